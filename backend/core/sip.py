from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict

MONTHS_PER_YEAR = 12
CHART_MAX_POINTS = 10


# -----------------------------
# Models
# -----------------------------


class InvestmentParameters(BaseModel):
    """
    The five scalars a calculation depends on.

    No range checks here: the form layer clamps values before they reach the
    engine, and the engine has defined behaviour for zero years / zero investment.
    """

    model_config = ConfigDict(frozen=True)

    monthly_investment: float
    annual_return_percent: float
    years: int
    step_up_percent: float = 0.0
    inflation_rate_percent: float = 0.0


class YearRecord(BaseModel):
    year: int
    monthly_contribution: int
    yearly_contribution: int
    cumulative_contributed: int
    end_of_year_value: int
    gain: int


class ResultSummary(BaseModel):
    future_value_nominal: float
    total_contributed_nominal: float
    total_contributed_present_value: float
    nominal_gain: float
    future_value_real: float
    real_gain: float


class ChartPoint(BaseModel):
    year: int
    normal_sip_value: int
    step_up_sip_value: int


class SIPResults(BaseModel):
    normal: ResultSummary
    step_up: ResultSummary
    yearly_breakdown: List[YearRecord]
    chart_series: List[ChartPoint]


# -----------------------------
# Helpers
# -----------------------------


def monthly_rate(annual_return_percent: float) -> float:
    return annual_return_percent / MONTHS_PER_YEAR / 100


def round_currency(value: float) -> int:
    """Round to the nearest whole currency unit, halves going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def _has_horizon(monthly_investment: float, years: int) -> bool:
    return years > 0 and monthly_investment != 0


@dataclass
class _YearState:
    """Unrounded running totals at the end of one simulated year."""

    year: int
    monthly_contribution: float
    yearly_contribution: float
    cumulative_contributed: float
    balance: float


def _simulate_years(
    monthly_investment: float,
    annual_return_percent: float,
    years: int,
    step_up_percent: float,
) -> Iterator[_YearState]:
    """
    Month-by-month step-up simulation, yielding the full-precision state after each year.

    Order of operations (per month):
      1) Add this year's monthly contribution (start of month).
      2) Compound the whole balance for one month.
    After the 12th month the contribution is stepped up for the following year.
    """
    rate = monthly_rate(annual_return_percent)
    step = 1 + step_up_percent / 100

    balance = 0.0
    cumulative = 0.0
    contribution = float(monthly_investment)

    for year in range(1, years + 1):
        yearly = 0.0
        for _ in range(MONTHS_PER_YEAR):
            balance = (balance + contribution) * (1 + rate)
            yearly += contribution
            cumulative += contribution

        yield _YearState(
            year=year,
            monthly_contribution=contribution,
            yearly_contribution=yearly,
            cumulative_contributed=cumulative,
            balance=balance,
        )

        contribution *= step


def _monthly_contributions(
    monthly_investment: float, years: int, step_up_percent: float
) -> Iterator[Tuple[int, float]]:
    """Yield (month_index, contribution) for every month, month_index starting at 0."""
    step = 1 + step_up_percent / 100
    contribution = float(monthly_investment)
    for year in range(years):
        for month in range(MONTHS_PER_YEAR):
            yield year * MONTHS_PER_YEAR + month, contribution
        contribution *= step


# -----------------------------
# Engine
# -----------------------------


def calculate_normal_sip(monthly_investment: float, annual_return_percent: float, years: int) -> float:
    """Future value of a constant monthly contribution (annuity due)."""
    rate = monthly_rate(annual_return_percent)
    months = years * MONTHS_PER_YEAR

    if rate == 0:
        return monthly_investment * years * MONTHS_PER_YEAR

    return monthly_investment * ((1 + rate) ** months - 1) / rate * (1 + rate)


def calculate_step_up_sip(
    monthly_investment: float,
    annual_return_percent: float,
    years: int,
    step_up_percent: float,
) -> float:
    """Future value when the monthly contribution grows by step_up_percent every year."""
    balance = 0.0
    for state in _simulate_years(monthly_investment, annual_return_percent, years, step_up_percent):
        balance = state.balance
    return balance


def adjust_for_inflation(future_value: float, inflation_rate_percent: float, years: float) -> float:
    """Discount a nominal amount back to today's money."""
    return future_value / (1 + inflation_rate_percent / 100) ** years


def present_value_of_contributions(
    monthly_investment: float,
    years: int,
    step_up_percent: float,
    inflation_rate_percent: float,
) -> float:
    """
    Sum of every monthly contribution discounted by its own elapsed time.

    The first contribution is made at time 0 (factor 1); month k is discounted
    by (1 + inflation) ** (k / 12).
    """
    total = 0.0
    for month_index, contribution in _monthly_contributions(monthly_investment, years, step_up_percent):
        total += adjust_for_inflation(contribution, inflation_rate_percent, month_index / MONTHS_PER_YEAR)
    return total


def total_contributed(monthly_investment: float, years: int, step_up_percent: float) -> float:
    total = 0.0
    for _, contribution in _monthly_contributions(monthly_investment, years, step_up_percent):
        total += contribution
    return total


def generate_yearly_breakdown(
    monthly_investment: float,
    annual_return_percent: float,
    years: int,
    step_up_percent: float,
) -> List[YearRecord]:
    """
    One rounded YearRecord per year of the step-up schedule.

    Rounding happens only when the record is emitted; the simulation keeps
    running on the unrounded balance.
    """
    if not _has_horizon(monthly_investment, years):
        return []

    records: List[YearRecord] = []
    for state in _simulate_years(monthly_investment, annual_return_percent, years, step_up_percent):
        records.append(
            YearRecord(
                year=state.year,
                monthly_contribution=round_currency(state.monthly_contribution),
                yearly_contribution=round_currency(state.yearly_contribution),
                cumulative_contributed=round_currency(state.cumulative_contributed),
                end_of_year_value=round_currency(state.balance),
                gain=round_currency(state.balance - state.cumulative_contributed),
            )
        )
    return records


def chart_stride(years: int) -> int:
    return max(1, years // CHART_MAX_POINTS)


def generate_chart_series(
    monthly_investment: float,
    annual_return_percent: float,
    years: int,
    step_up_percent: float,
) -> List[ChartPoint]:
    """
    Normal vs step-up balances sampled every `chart_stride(years)` years.

    The final year is always included, so long horizons give at most ~11 points.
    """
    if not _has_horizon(monthly_investment, years):
        return []

    stride = chart_stride(years)
    normal_years = _simulate_years(monthly_investment, annual_return_percent, years, 0.0)
    step_up_years = _simulate_years(monthly_investment, annual_return_percent, years, step_up_percent)

    points: List[ChartPoint] = []
    for normal, step_up in zip(normal_years, step_up_years):
        if normal.year % stride == 0 or normal.year == years:
            points.append(
                ChartPoint(
                    year=normal.year,
                    normal_sip_value=round_currency(normal.balance),
                    step_up_sip_value=round_currency(step_up.balance),
                )
            )
    return points


def summarize(
    future_value: float,
    contributed: float,
    contributed_present_value: float,
    inflation_rate_percent: float,
    years: int,
) -> ResultSummary:
    real_value = adjust_for_inflation(future_value, inflation_rate_percent, years)
    return ResultSummary(
        future_value_nominal=future_value,
        total_contributed_nominal=contributed,
        total_contributed_present_value=contributed_present_value,
        nominal_gain=future_value - contributed,
        future_value_real=real_value,
        real_gain=real_value - contributed_present_value,
    )


def calculate_sip(params: InvestmentParameters) -> SIPResults:
    """
    Full calculation for one set of parameters.

    Everything is recomputed from the inputs on every call; nothing is cached
    between calls.
    """
    m = params.monthly_investment
    r = params.annual_return_percent
    y = max(params.years, 0)
    s = params.step_up_percent
    i = params.inflation_rate_percent

    normal = summarize(
        future_value=calculate_normal_sip(m, r, y),
        contributed=m * y * MONTHS_PER_YEAR,
        contributed_present_value=present_value_of_contributions(m, y, 0.0, i),
        inflation_rate_percent=i,
        years=y,
    )
    step_up = summarize(
        future_value=calculate_step_up_sip(m, r, y, s),
        contributed=total_contributed(m, y, s),
        contributed_present_value=present_value_of_contributions(m, y, s, i),
        inflation_rate_percent=i,
        years=y,
    )

    return SIPResults(
        normal=normal,
        step_up=step_up,
        yearly_breakdown=generate_yearly_breakdown(m, r, y, s),
        chart_series=generate_chart_series(m, r, y, s),
    )


__all__ = [
    "InvestmentParameters",
    "YearRecord",
    "ResultSummary",
    "ChartPoint",
    "SIPResults",
    "monthly_rate",
    "round_currency",
    "calculate_normal_sip",
    "calculate_step_up_sip",
    "adjust_for_inflation",
    "present_value_of_contributions",
    "total_contributed",
    "generate_yearly_breakdown",
    "chart_stride",
    "generate_chart_series",
    "summarize",
    "calculate_sip",
]
