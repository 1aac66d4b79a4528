"""
Acquisition Cost Calculations

Total cash outlay for buying a property: the price plus transaction charges.
Inputs are assumed to be range-checked by the caller.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PropertyCostInputs:
    """Purchase price and transaction charges."""

    price: float
    down_payment: float = 0.0
    stamp_duty_percent: float = 0.0
    broker_fee_percent: float = 0.0
    other_charges: float = 0.0


@dataclass(frozen=True)
class AcquisitionCost:
    """Itemized acquisition cost."""

    price: float
    stamp_duty: float
    broker_fee: float
    other_charges: float
    total: float
    max_loan_amount: float


def total_cost(inputs: PropertyCostInputs) -> float:
    """
    Calculate total acquisition cost.

    price + stamp duty % of price + broker fee % of price + other charges
    """
    stamp_duty = inputs.price * inputs.stamp_duty_percent / 100
    broker_fee = inputs.price * inputs.broker_fee_percent / 100
    return inputs.price + stamp_duty + broker_fee + inputs.other_charges


def cost_breakdown(inputs: PropertyCostInputs) -> AcquisitionCost:
    """Itemize the acquisition cost and the largest loan the down payment allows."""
    return AcquisitionCost(
        price=inputs.price,
        stamp_duty=inputs.price * inputs.stamp_duty_percent / 100,
        broker_fee=inputs.price * inputs.broker_fee_percent / 100,
        other_charges=inputs.other_charges,
        total=total_cost(inputs),
        max_loan_amount=max(0.0, inputs.price - inputs.down_payment),
    )


def loan_to_value_percent(loan_amount: float, price: float) -> float:
    """Loan amount as a percentage of the property price."""
    if price <= 0:
        return 0.0
    return loan_amount / price * 100
