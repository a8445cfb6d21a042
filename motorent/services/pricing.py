# motorent/services/pricing.py
"""
Rental pricing engine — plan rates, contract totals and return settlement.

Pure functions: nothing here touches the store. All money is Decimal and
every result is rounded to cents.

Plans (days → daily rate):
  7 → 30.00 | 15 → 28.00 | 30 → 22.00 | 45 → 20.00 | 50 → 18.00

Settlement on return, relative to expected_end_date:
  early → unused days are refunded, minus a penalty on the unused value
          (7-day plan 20%, 15-day plan 40%, longer plans none)
  late  → 50.00 per extra day on top of the baseline
  exact → baseline unchanged
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from motorent.services.errors import invalid_plan
from motorent.utils.clock import as_naive_utc

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

DAILY_RATES = MappingProxyType({
    7: Decimal("30.00"),
    15: Decimal("28.00"),
    30: Decimal("22.00"),
    45: Decimal("20.00"),
    50: Decimal("18.00"),
})

EARLY_RETURN_PENALTY_RATES = MappingProxyType({
    7: Decimal("0.20"),
    15: Decimal("0.40"),
})

LATE_FEE_PER_DAY = Decimal("50.00")


@dataclass(frozen=True)
class Settlement:
    total_value: Decimal
    penalty: Decimal
    extra_charge: Decimal


def to_money(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def daily_rate_for_plan(plan_days: int) -> Decimal:
    """Daily rate for a plan length. Raises InvalidInputError for unknown plans."""
    rate = DAILY_RATES.get(plan_days)
    if rate is None:
        raise invalid_plan(plan_days)
    return rate


def compute_rental_total(daily_rate: Decimal, plan_days: int) -> Decimal:
    return to_money(Decimal(daily_rate) * plan_days)


def early_return_penalty_rate(plan_days: int) -> Decimal:
    return EARLY_RETURN_PENALTY_RATES.get(plan_days, ZERO)


def settle(rental, return_date: datetime) -> Settlement:
    """
    Settle a rental returned on `return_date`.

    `rental` only needs expected_end_date, daily_rate, plan_days and
    total_value (the baseline). Day counts are whole days, truncated.
    The total is not floored: returning more days early than the plan
    length refunds more than the baseline and settles below zero.
    """
    expected = as_naive_utc(rental.expected_end_date)
    returned = as_naive_utc(return_date)
    baseline = to_money(rental.total_value)
    daily_rate = Decimal(rental.daily_rate)

    if returned < expected:
        early_days = (expected - returned).days
        unused = daily_rate * early_days
        penalty = to_money(unused * early_return_penalty_rate(rental.plan_days))
        return Settlement(total_value=to_money(baseline - unused + penalty),
                          penalty=penalty, extra_charge=ZERO)

    if returned > expected:
        extra_days = (returned - expected).days
        extra_charge = to_money(LATE_FEE_PER_DAY * extra_days)
        return Settlement(total_value=to_money(baseline + extra_charge),
                          penalty=ZERO, extra_charge=extra_charge)

    return Settlement(total_value=baseline, penalty=ZERO, extra_charge=ZERO)
