"""
Capital Gains Tax Calculations

Tax on the projected sale of a property. Holdings longer than two years are
long-term (LTCG) and taxed on the gain over the indexed cost; shorter
holdings are short-term (STCG) and taxed on the nominal gain. A surcharge
based on total income plus gains and a flat cess are added on top.
"""

import enum
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from mortgage_model.calculations import cost_inflation_index

logger = logging.getLogger(__name__)


class CapitalGainType(str, enum.Enum):
    """Holding-period classification of a gain."""

    ltcg = "LTCG"
    stcg = "STCG"


@dataclass(frozen=True)
class TaxPolicy:
    """
    Rates and slabs of one tax year.

    surcharge_slabs are (income threshold, rate) pairs, highest threshold
    first; the first threshold strictly exceeded by income sets the rate.
    """

    long_term_after_years: int = 2
    ltcg_rate: float = 0.20
    stcg_rate: float = 0.30
    # Projected yearly growth of the index between purchase and sale
    index_growth_rate: float = 0.043
    surcharge_slabs: Tuple[Tuple[float, float], ...] = (
        (50_000_000, 0.37),  # 5 crore
        (20_000_000, 0.25),  # 2 crore
        (10_000_000, 0.15),  # 1 crore
        (5_000_000, 0.10),  # 50 lakh
    )
    cess_rate: float = 0.04


DEFAULT_TAX_POLICY = TaxPolicy()


@dataclass(frozen=True)
class InvestmentInputs:
    """Holding assumptions for a purchased property."""

    price: float
    purchase_date: date
    holding_period_years: float
    annual_appreciation_percent: float = 0.0
    monthly_rent: float = 0.0
    monthly_maintenance: float = 0.0
    total_annual_income: float = 0.0


@dataclass(frozen=True)
class TaxBreakdown:
    """Capital gains tax on a projected sale."""

    gain_type: CapitalGainType
    gains: float
    indexation_multiplier: float
    indexed_cost: float
    purchase_fiscal_year: str
    current_fiscal_year: str
    sale_fiscal_year: str
    base_tax_rate: float
    base_tax: float
    surcharge_rate: float
    surcharge: float
    cess: float
    total: float

    def net_proceeds(self, sale_value: float) -> float:
        """Sale value left after paying the tax."""
        return sale_value - self.total


def classify_gain(
    holding_period_years: float, policy: TaxPolicy = DEFAULT_TAX_POLICY
) -> CapitalGainType:
    """Long-term only when held strictly longer than the threshold."""
    if holding_period_years > policy.long_term_after_years:
        return CapitalGainType.ltcg
    return CapitalGainType.stcg


def surcharge_rate(income: float, policy: TaxPolicy = DEFAULT_TAX_POLICY) -> float:
    """Surcharge rate for total income (including gains)."""
    for threshold, rate in policy.surcharge_slabs:
        if income > threshold:
            return rate
    return 0.0


def indexation_multiplier(
    purchase_date: date,
    holding_period_years: float,
    policy: TaxPolicy = DEFAULT_TAX_POLICY,
) -> float:
    """
    Ratio of the projected sale-year index to the purchase-year index.

    The sale-year index is unknown, so it is projected from the purchase-year
    index at policy.index_growth_rate per year.
    """
    purchase_index = cost_inflation_index.lookup(purchase_date)
    sale_index = purchase_index * (1 + policy.index_growth_rate) ** holding_period_years
    return sale_index / purchase_index


def compute_tax(
    inputs: InvestmentInputs,
    future_value: float,
    total_income: Optional[float] = None,
    as_of: Optional[date] = None,
    policy: TaxPolicy = DEFAULT_TAX_POLICY,
) -> TaxBreakdown:
    """
    Calculate capital gains tax on selling at future_value.

    Args:
        inputs: Purchase and holding assumptions
        future_value: Projected sale value
        total_income: Other annual income used for the surcharge slab;
            defaults to inputs.total_annual_income
        as_of: Date used for the current fiscal year (default: today)
        policy: Rates and slabs to apply

    Returns:
        TaxBreakdown with all components non-negative
    """
    if total_income is None:
        total_income = inputs.total_annual_income
    if as_of is None:
        as_of = date.today()

    gain_type = classify_gain(inputs.holding_period_years, policy)

    if gain_type == CapitalGainType.ltcg:
        multiplier = indexation_multiplier(
            inputs.purchase_date, inputs.holding_period_years, policy
        )
        base_tax_rate = policy.ltcg_rate
    else:
        multiplier = 1.0
        base_tax_rate = policy.stcg_rate

    indexed_cost = inputs.price * multiplier
    gains = future_value - indexed_cost
    base_tax = max(0.0, gains * base_tax_rate)

    rate = surcharge_rate(total_income + gains, policy)
    surcharge = base_tax * rate
    cess = (base_tax + surcharge) * policy.cess_rate

    sale_date = inputs.purchase_date + relativedelta(
        months=round(inputs.holding_period_years * 12)
    )

    logger.debug(
        f"{gain_type.value} on gains of {gains:.2f}: base tax {base_tax:.2f}, "
        f"surcharge {rate:.0%}"
    )

    return TaxBreakdown(
        gain_type=gain_type,
        gains=gains,
        indexation_multiplier=multiplier,
        indexed_cost=indexed_cost,
        purchase_fiscal_year=cost_inflation_index.fiscal_year_label(inputs.purchase_date),
        current_fiscal_year=cost_inflation_index.fiscal_year_label(as_of),
        sale_fiscal_year=cost_inflation_index.fiscal_year_label(sale_date),
        base_tax_rate=base_tax_rate,
        base_tax=base_tax,
        surcharge_rate=rate,
        surcharge=surcharge,
        cess=cess,
        total=base_tax + surcharge + cess,
    )
