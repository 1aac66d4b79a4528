"""
Financial calculation API endpoints.

These endpoints accept inputs and return calculated results. Request models
carry the range checks the calculation engine relies on.
"""

import logging
from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from mortgage_model.calculations import acquisition, amortization, capital_gains, returns
from mortgage_model.calculations.amortization import PrepaymentMode

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_RATE_PERCENT = 30
MAX_TENURE_YEARS = 30


class LoanInput(BaseModel):
    """Loan terms."""

    principal: float = Field(ge=0)
    annual_rate_percent: float = Field(gt=0, le=MAX_RATE_PERCENT)
    tenure_years: int = Field(ge=1, le=MAX_TENURE_YEARS)

    def to_parameters(self) -> amortization.LoanParameters:
        return amortization.LoanParameters(
            principal=self.principal,
            annual_rate_percent=self.annual_rate_percent,
            tenure_years=self.tenure_years,
        )


class PrepaymentInput(BaseModel):
    """One-time prepayment. An amount of zero means no prepayment."""

    amount: float = Field(default=0.0, ge=0)
    trigger_month: int = Field(default=12, ge=1)
    mode: PrepaymentMode = PrepaymentMode.reduce_duration

    def to_prepayment(self) -> amortization.Prepayment:
        return amortization.Prepayment(
            amount=self.amount,
            trigger_month=self.trigger_month,
            mode=self.mode,
        )


class AmortizationInput(LoanInput):
    """Input for amortization schedule calculation."""

    prepayment: Optional[PrepaymentInput] = None
    start_date: Optional[date] = None


class PrepaymentComparisonInput(LoanInput):
    """Input for prepayment comparison."""

    prepayment: PrepaymentInput


class InstallmentInput(BaseModel):
    """Input for a single EMI calculation."""

    principal: float = Field(ge=0)
    annual_rate_percent: float = Field(gt=0, le=MAX_RATE_PERCENT)
    tenure_months: int


class AcquisitionCostInput(BaseModel):
    """Purchase price and transaction charges."""

    price: float = Field(gt=0)
    down_payment: float = Field(default=0.0, ge=0)
    stamp_duty_percent: float = Field(default=0.0, ge=0, le=100)
    broker_fee_percent: float = Field(default=0.0, ge=0, le=100)
    other_charges: float = Field(default=0.0, ge=0)
    loan_amount: Optional[float] = Field(default=None, ge=0)


class RentalYieldInput(BaseModel):
    """Input for rental yield calculation."""

    price: float = Field(gt=0)
    monthly_rent: float = Field(ge=0)
    monthly_maintenance: float = Field(default=0.0, ge=0)


class CapitalGainsInput(BaseModel):
    """Holding assumptions for capital gains tax."""

    price: float = Field(gt=0)
    purchase_date: date
    holding_period_years: float = Field(ge=0, le=100)
    annual_appreciation_percent: float = Field(default=0.0, ge=-100)
    monthly_rent: float = Field(default=0.0, ge=0)
    monthly_maintenance: float = Field(default=0.0, ge=0)
    total_annual_income: float = Field(default=0.0, ge=0)
    as_of: Optional[date] = None

    def to_investment(self) -> capital_gains.InvestmentInputs:
        return capital_gains.InvestmentInputs(
            price=self.price,
            purchase_date=self.purchase_date,
            holding_period_years=self.holding_period_years,
            annual_appreciation_percent=self.annual_appreciation_percent,
            monthly_rent=self.monthly_rent,
            monthly_maintenance=self.monthly_maintenance,
            total_annual_income=self.total_annual_income,
        )


class AnalysisInput(BaseModel):
    """Full parameter bundle for a property purchase."""

    loan: AmortizationInput
    acquisition: AcquisitionCostInput
    investment: CapitalGainsInput


class ScheduleSummaryResponse(BaseModel):
    """Aggregates over a schedule."""

    months: int
    duration_years: int
    duration_months: int
    final_installment: float
    total_interest: float
    total_principal: float
    total_paid: float


class PrepaymentComparisonResponse(BaseModel):
    """Prepaid schedule measured against the plain schedule."""

    baseline: ScheduleSummaryResponse
    prepaid: ScheduleSummaryResponse
    interest_saved: float
    months_saved: int


class AcquisitionCostResponse(BaseModel):
    """Itemized acquisition cost."""

    price: float
    stamp_duty: float
    broker_fee: float
    other_charges: float
    total: float
    max_loan_amount: float
    loan_to_value_percent: Optional[float] = None


class RentalYieldResponse(BaseModel):
    """Rental yield."""

    rental_yield: float
    annual_net_rent: float


class CapitalGainsResponse(BaseModel):
    """Projected sale value with its capital gains tax."""

    future_value: float
    appreciation_gain: float
    gain_type: capital_gains.CapitalGainType
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
    net_proceeds: float


class AmortizationResponse(BaseModel):
    """Schedule with its summary."""

    installment: float
    schedule: List[dict]
    summary: ScheduleSummaryResponse


class AnalysisResponse(BaseModel):
    """All metrics for a property purchase."""

    amortization: AmortizationResponse
    acquisition: AcquisitionCostResponse
    rental: RentalYieldResponse
    capital_gains: CapitalGainsResponse


def _build_amortization(inputs: AmortizationInput) -> AmortizationResponse:
    loan = inputs.to_parameters()
    prepayment = inputs.prepayment.to_prepayment() if inputs.prepayment else None

    schedule = amortization.simulate_schedule(loan, prepayment, inputs.start_date)
    summary = amortization.summarize_schedule(schedule)

    return AmortizationResponse(
        installment=amortization.calculate_installment(
            loan.principal, loan.annual_rate_percent, loan.tenure_months
        ),
        schedule=[asdict(entry) for entry in schedule],
        summary=ScheduleSummaryResponse(**asdict(summary)),
    )


def _build_acquisition(inputs: AcquisitionCostInput) -> AcquisitionCostResponse:
    breakdown = acquisition.cost_breakdown(
        acquisition.PropertyCostInputs(
            price=inputs.price,
            down_payment=inputs.down_payment,
            stamp_duty_percent=inputs.stamp_duty_percent,
            broker_fee_percent=inputs.broker_fee_percent,
            other_charges=inputs.other_charges,
        )
    )
    ltv = None
    if inputs.loan_amount is not None:
        ltv = acquisition.loan_to_value_percent(inputs.loan_amount, inputs.price)

    return AcquisitionCostResponse(**asdict(breakdown), loan_to_value_percent=ltv)


def _build_rental(inputs: RentalYieldInput) -> RentalYieldResponse:
    return RentalYieldResponse(
        rental_yield=returns.rental_yield(
            inputs.price, inputs.monthly_rent, inputs.monthly_maintenance
        ),
        annual_net_rent=(inputs.monthly_rent - inputs.monthly_maintenance) * 12,
    )


def _build_capital_gains(inputs: CapitalGainsInput) -> CapitalGainsResponse:
    investment = inputs.to_investment()
    sale_value = returns.future_value(
        investment.price,
        investment.annual_appreciation_percent,
        investment.holding_period_years,
    )
    breakdown = capital_gains.compute_tax(
        investment, sale_value, investment.total_annual_income, as_of=inputs.as_of
    )

    return CapitalGainsResponse(
        future_value=sale_value,
        appreciation_gain=sale_value - investment.price,
        net_proceeds=breakdown.net_proceeds(sale_value),
        **asdict(breakdown),
    )


@router.post("/installment")
async def calculate_installment(inputs: InstallmentInput):
    """Calculate the monthly installment (EMI) of a loan."""
    try:
        installment = amortization.calculate_installment(
            inputs.principal, inputs.annual_rate_percent, inputs.tenure_months
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"installment": installment}


@router.post("/amortization", response_model=AmortizationResponse)
async def calculate_amortization(inputs: AmortizationInput):
    """Generate loan amortization schedule, optionally with a prepayment."""
    logger.info(
        f"Amortization requested: {inputs.principal:.2f} at "
        f"{inputs.annual_rate_percent}% for {inputs.tenure_years} years"
    )
    return _build_amortization(inputs)


@router.post("/prepayment", response_model=PrepaymentComparisonResponse)
async def calculate_prepayment(inputs: PrepaymentComparisonInput):
    """Compare a prepaid schedule against the plain schedule."""
    comparison = amortization.compare_prepayment(
        inputs.to_parameters(), inputs.prepayment.to_prepayment()
    )
    return PrepaymentComparisonResponse(**asdict(comparison))


@router.post("/acquisition-cost", response_model=AcquisitionCostResponse)
async def calculate_acquisition_cost(inputs: AcquisitionCostInput):
    """Calculate total acquisition cost including charges."""
    return _build_acquisition(inputs)


@router.post("/rental-yield", response_model=RentalYieldResponse)
async def calculate_rental_yield(inputs: RentalYieldInput):
    """Calculate net rental yield."""
    return _build_rental(inputs)


@router.post("/capital-gains", response_model=CapitalGainsResponse)
async def calculate_capital_gains(inputs: CapitalGainsInput):
    """Project the sale value and the capital gains tax on it."""
    logger.info(
        f"Capital gains requested: price {inputs.price:.2f}, "
        f"held {inputs.holding_period_years} years"
    )
    return _build_capital_gains(inputs)


@router.post("/analysis", response_model=AnalysisResponse)
async def calculate_analysis(inputs: AnalysisInput):
    """Run every calculation for a property purchase."""
    return AnalysisResponse(
        amortization=_build_amortization(inputs.loan),
        acquisition=_build_acquisition(inputs.acquisition),
        rental=_build_rental(
            RentalYieldInput(
                price=inputs.investment.price,
                monthly_rent=inputs.investment.monthly_rent,
                monthly_maintenance=inputs.investment.monthly_maintenance,
            )
        ),
        capital_gains=_build_capital_gains(inputs.investment),
    )
