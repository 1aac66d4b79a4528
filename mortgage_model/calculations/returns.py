"""
Rental Yield and Appreciation

Investment return metrics for a held property.
"""


def rental_yield(price: float, monthly_rent: float, monthly_maintenance: float) -> float:
    """
    Calculate net annual rental yield.

    Args:
        price: Property price, must be positive
        monthly_rent: Gross monthly rent
        monthly_maintenance: Monthly maintenance charges borne by the owner

    Returns:
        Yield in percent (e.g., 4.4 for 4.4%)

    Raises:
        ZeroDivisionError: If price is zero. Callers must validate price.
    """
    annual_net_rent = (monthly_rent - monthly_maintenance) * 12
    return annual_net_rent / price * 100


def future_value(
    price: float, annual_appreciation_percent: float, holding_period_years: float
) -> float:
    """Compound the price at the annual appreciation rate over the holding period."""
    return price * (1 + annual_appreciation_percent / 100) ** holding_period_years


def appreciation_gain(
    price: float, annual_appreciation_percent: float, holding_period_years: float
) -> float:
    """Nominal gain from appreciation, before any tax."""
    return future_value(price, annual_appreciation_percent, holding_period_years) - price
