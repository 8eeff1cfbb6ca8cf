"""Data contracts for SIP calculations exposed over HTTP."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from backend.core.sip import ChartPoint, InvestmentParameters, ResultSummary, YearRecord


class SIPRequest(BaseModel):
    """Parameter form. Ranges match the calculator's sliders; the engine itself does not re-check them."""

    model_config = ConfigDict(extra="forbid")

    monthly_investment: float = Field(
        5000,
        ge=500,
        le=100000,
        description="Amount invested at the start of every month.",
    )
    annual_return_percent: float = Field(
        12,
        ge=1,
        le=30,
        description="Expected annual return in percent (e.g. 12 for 12%).",
    )
    years: int = Field(10, ge=1, le=40, description="Investment duration in years.")
    step_up_percent: float = Field(
        10,
        ge=0,
        le=30,
        description="Yearly increase of the monthly contribution, in percent.",
    )
    inflation_rate_percent: float = Field(
        6,
        ge=0,
        le=15,
        description="Expected annual inflation in percent.",
    )

    def to_parameters(self) -> InvestmentParameters:
        return InvestmentParameters(**self.model_dump())


class SIPResponse(BaseModel):
    """Both summaries, the yearly table and the chart series."""

    normal: ResultSummary
    step_up: ResultSummary
    yearly_breakdown: List[YearRecord]
    chart_series: List[ChartPoint]
