"""Data contracts for the projection endpoint."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from investcalc.core.breakdown import ChartBreakdown
from investcalc.core.projection import ProjectionInput, ProjectionResult

DEFAULT_MAX_YEARS = 100


class ProjectionRequest(BaseModel):
    """Calculator form fields. Defaults are the values the form opens with."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initialInvestment: float = Field(10000.0, ge=0, description="Lump sum invested at the start.")
    monthlyInvestment: float = Field(5000.0, ge=0, description="Contribution added every month.")
    annualStepUp: float = Field(
        5.0,
        ge=0,
        le=100,
        description="Yearly increase of the monthly contribution, in percent.",
    )
    years: int = Field(5, ge=1, description="Investment horizon in years.")
    interestRate: float = Field(7.0, gt=-100, le=100, description="Annual return, in percent.")
    inflationRate: float = Field(4.5, ge=0, le=100, description="Annual inflation, in percent.")

    @field_validator(
        "initialInvestment",
        "monthlyInvestment",
        "annualStepUp",
        "years",
        "interestRate",
        "inflationRate",
        mode="before",
    )
    @classmethod
    def reject_booleans(cls, value):
        # lax mode would read true/false as 1/0
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value

    @field_validator("years")
    @classmethod
    def within_horizon(cls, value: int, info: ValidationInfo) -> int:
        max_years = (info.context or {}).get("max_years", DEFAULT_MAX_YEARS)
        if value > max_years:
            raise ValueError(f"years must be at most {max_years}")
        return value

    def to_input(self) -> ProjectionInput:
        return ProjectionInput(
            initial_investment=self.initialInvestment,
            monthly_investment=self.monthlyInvestment,
            annual_step_up=self.annualStepUp,
            years=self.years,
            interest_rate=self.interestRate,
            inflation_rate=self.inflationRate,
        )


class ResultValues(BaseModel):
    futureValue: float
    totalPrincipal: float
    totalContributions: float
    totalInterest: float
    inflationAdjustedValue: float

    @classmethod
    def from_result(cls, result: ProjectionResult) -> "ResultValues":
        return cls(
            futureValue=result.future_value,
            totalPrincipal=result.total_principal,
            totalContributions=result.total_contributions,
            totalInterest=result.total_interest,
            inflationAdjustedValue=result.inflation_adjusted_value,
        )


class FormattedValues(BaseModel):
    futureValue: str
    totalPrincipal: str
    totalContributions: str
    totalInterest: str
    inflationAdjustedValue: str

    @classmethod
    def from_formatted(cls, formatted: Dict[str, str]) -> "FormattedValues":
        """Build from `format_result` output, which is keyed by result field name."""
        return cls(
            futureValue=formatted["future_value"],
            totalPrincipal=formatted["total_principal"],
            totalContributions=formatted["total_contributions"],
            totalInterest=formatted["total_interest"],
            inflationAdjustedValue=formatted["inflation_adjusted_value"],
        )


class ProjectionResponse(BaseModel):
    inputs: ProjectionRequest
    result: ResultValues
    formatted: FormattedValues
    chart: ChartBreakdown
