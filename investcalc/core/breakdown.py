"""Doughnut-chart dataset for a projection result."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from investcalc.core.projection import ProjectionResult

BREAKDOWN_LABELS = ["Initial Investment", "Contributions", "Interest"]
BREAKDOWN_COLORS = ["lightblue", "lightgreen", "red"]


class ChartDataset(BaseModel):
    label: str
    data: List[float]
    backgroundColor: List[str]


class ChartBreakdown(BaseModel):
    labels: List[str]
    datasets: List[ChartDataset]


def build_breakdown(result: ProjectionResult, label: str = "₹") -> ChartBreakdown:
    # first segment is total principal (initial + contributions), not the initial amount alone
    return ChartBreakdown(
        labels=list(BREAKDOWN_LABELS),
        datasets=[
            ChartDataset(
                label=label,
                data=[
                    result.total_principal,
                    result.total_contributions,
                    result.total_interest,
                ],
                backgroundColor=list(BREAKDOWN_COLORS),
            )
        ],
    )
