from __future__ import annotations

import logging
import math

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class ProjectionInput(BaseModel):
    """Raw calculator inputs. Rates are percentages (7 means 7%).

    Numbers and numeric strings are coerced; ranges are not checked here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_investment: float
    monthly_investment: float
    annual_step_up: float
    years: int
    interest_rate: float
    inflation_rate: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    future_value: float
    total_principal: float
    total_contributions: float
    total_interest: float
    inflation_adjusted_value: float


def _pow(base: float, exponent: float) -> float:
    """Real-valued power: NaN where the result would be complex, inf on overflow."""
    if base == 0 and exponent < 0:
        return math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        # negative base with a fractional exponent
        return math.nan


def project(inputs: ProjectionInput) -> ProjectionResult:
    """
    Project the future value of a lump sum plus a stepped-up monthly contribution.

    Order of operations:
      1) Grow the initial investment over the whole horizon in one step and add
         the growth on top of the original amount (the initial amount is
         therefore counted twice, once as principal and once inside the growth).
      2) For each month, raise the contribution by the step-up on every 12th
         month, then add it compounded at the monthly equivalent rate for
         `month` periods.
      3) Discount the running value by (1 - inflation)^years after each month;
         the last month's figure is the one reported.

    With years <= 0 the monthly loop does not run and the step 1 value is returned.
    """
    months = inputs.years * 12
    logger.debug("projecting %s months", months)

    total_contributions = inputs.monthly_investment * 12 * inputs.years
    total_principal = inputs.initial_investment + total_contributions

    growth_factor = 1 + inputs.interest_rate / 100
    monthly_return_rate = _pow(growth_factor, 1 / 12) - 1
    inflation_factor = _pow(1 - inputs.inflation_rate / 100, inputs.years)

    future_value = inputs.initial_investment
    future_value += future_value * _pow(growth_factor, inputs.years)
    inflation_adjusted = future_value * inflation_factor

    contribution = inputs.monthly_investment
    for month in range(1, months + 1):
        if month % 12 == 0 and inputs.annual_step_up > 0:
            contribution *= 1 + inputs.annual_step_up / 100

        future_value += contribution * _pow(1 + monthly_return_rate, month)
        inflation_adjusted = future_value * inflation_factor

    return ProjectionResult(
        future_value=future_value,
        total_principal=total_principal,
        total_contributions=total_contributions,
        total_interest=future_value - total_principal,
        inflation_adjusted_value=inflation_adjusted,
    )


__all__ = [
    "ProjectionInput",
    "ProjectionResult",
    "project",
]
