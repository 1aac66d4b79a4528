"""
Loan Amortization Calculations

Implements the EMI (equated monthly installment) formula and a month-by-month
amortization schedule with an optional one-time prepayment.
"""

import enum
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

# Balances below half a paisa, plus rounding error that grows with the
# principal, are float residue of the annuity formula
BALANCE_TOLERANCE = 0.005
RELATIVE_BALANCE_TOLERANCE = 1e-11


class PrepaymentMode(str, enum.Enum):
    """How a prepayment is absorbed by the rest of the loan."""

    reduce_duration = "reduce_duration"
    reduce_installment = "reduce_installment"


@dataclass(frozen=True)
class LoanParameters:
    """Loan terms for a single simulation run."""

    principal: float
    annual_rate_percent: float
    tenure_years: int

    @property
    def tenure_months(self) -> int:
        return self.tenure_years * 12

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 12 / 100


@dataclass(frozen=True)
class Prepayment:
    """A single lump-sum payment towards principal."""

    amount: float
    trigger_month: int
    mode: PrepaymentMode = PrepaymentMode.reduce_duration


@dataclass(frozen=True)
class ScheduleEntry:
    """One month of the amortization schedule."""

    month: int
    installment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float
    total_payment: float
    payment_date: Optional[date] = None


@dataclass(frozen=True)
class ScheduleSummary:
    """Aggregates over a schedule."""

    months: int
    duration_years: int
    duration_months: int
    final_installment: float
    total_interest: float
    total_principal: float
    total_paid: float


@dataclass(frozen=True)
class PrepaymentComparison:
    """A prepaid schedule measured against the same loan without prepayment."""

    baseline: ScheduleSummary
    prepaid: ScheduleSummary
    interest_saved: float
    months_saved: int


def calculate_installment(
    principal: float, annual_rate_percent: float, tenure_months: int
) -> float:
    """
    Calculate the monthly installment (EMI) of an annuity loan.

    installment = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Args:
        principal: Outstanding principal
        annual_rate_percent: Annual interest rate in percent (e.g., 8.5)
        tenure_months: Number of monthly installments

    Returns:
        Monthly installment (0.0 when nothing is left to repay)

    Raises:
        ValueError: If tenure_months is negative
    """
    if tenure_months < 0:
        raise ValueError("Tenure must not be negative")
    if principal <= 0 or tenure_months == 0:
        return 0.0

    monthly_rate = annual_rate_percent / 12 / 100

    if monthly_rate == 0:
        return principal / tenure_months

    growth = (1 + monthly_rate) ** tenure_months
    return principal * monthly_rate * growth / (growth - 1)


def simulate_schedule(
    loan: LoanParameters,
    prepayment: Optional[Prepayment] = None,
    start_date: Optional[date] = None,
) -> List[ScheduleEntry]:
    """
    Generate the amortization schedule of a loan.

    The schedule runs from month 1 until the balance is repaid or the tenure
    is exhausted, whichever comes first. A prepayment fires once, at its
    trigger month, and is added to that month's principal portion. Under
    ``reduce_installment`` the installment is re-amortized over the months
    left in the tenure; under ``reduce_duration`` the installment is kept and
    the loan simply finishes earlier.

    Args:
        loan: Loan terms
        prepayment: Optional one-time prepayment
        start_date: Date of the first installment; when given each entry
            carries its payment date

    Returns:
        List of schedule entries, one per month
    """
    schedule = []
    balance = loan.principal
    monthly_rate = loan.monthly_rate
    total_months = loan.tenure_months
    installment = calculate_installment(
        loan.principal, loan.annual_rate_percent, total_months
    )

    residue_tolerance = BALANCE_TOLERANCE + loan.principal * RELATIVE_BALANCE_TOLERANCE

    pending = prepayment if prepayment is not None and prepayment.amount else None

    for month in range(1, total_months + 1):
        interest = balance * monthly_rate
        principal_portion = installment - interest

        if pending is not None and month == pending.trigger_month:
            principal_portion += pending.amount
            if pending.mode == PrepaymentMode.reduce_installment:
                installment = calculate_installment(
                    balance - principal_portion,
                    loan.annual_rate_percent,
                    total_months - month,
                )
            logger.debug(
                f"Prepayment of {pending.amount:.2f} applied in month {month} "
                f"({pending.mode.value})"
            )
            pending = None

        balance = max(0.0, balance - principal_portion)
        if balance < residue_tolerance:
            balance = 0.0

        schedule.append(
            ScheduleEntry(
                month=month,
                installment=installment,
                principal_portion=principal_portion,
                interest_portion=interest,
                remaining_balance=balance,
                total_payment=principal_portion + interest,
                payment_date=(
                    start_date + relativedelta(months=month - 1)
                    if start_date is not None
                    else None
                ),
            )
        )

        if balance == 0:
            break

    logger.debug(
        f"Schedule for {loan.principal:.2f} at {loan.annual_rate_percent}% "
        f"ended after {len(schedule)} of {total_months} months"
    )
    return schedule


def summarize_schedule(schedule: List[ScheduleEntry]) -> ScheduleSummary:
    """Calculate duration and payment totals for a schedule."""
    total_interest = sum(entry.interest_portion for entry in schedule)
    total_principal = sum(entry.principal_portion for entry in schedule)

    return ScheduleSummary(
        months=len(schedule),
        duration_years=len(schedule) // 12,
        duration_months=len(schedule) % 12,
        final_installment=schedule[-1].installment if schedule else 0.0,
        total_interest=total_interest,
        total_principal=total_principal,
        total_paid=total_interest + total_principal,
    )


def compare_prepayment(
    loan: LoanParameters, prepayment: Prepayment
) -> PrepaymentComparison:
    """
    Measure the effect of a prepayment against the plain schedule.

    Args:
        loan: Loan terms
        prepayment: Prepayment to evaluate

    Returns:
        Summaries of both schedules with interest and months saved
    """
    baseline = summarize_schedule(simulate_schedule(loan))
    prepaid = summarize_schedule(simulate_schedule(loan, prepayment))

    return PrepaymentComparison(
        baseline=baseline,
        prepaid=prepaid,
        interest_saved=baseline.total_interest - prepaid.total_interest,
        months_saved=baseline.months - prepaid.months,
    )
