"""Analysis configuration — passed explicitly to every run."""

from __future__ import annotations

from dataclasses import dataclass

from tracesight.geometry.junctions import DEFAULT_TOLERANCE, check_tolerance


@dataclass(frozen=True)
class AnalysisConfig:
    """Controls junction inference and optional transforms."""

    # Max endpoint distance treated as the same point
    tolerance: float = DEFAULT_TOLERANCE
    # Group connected traces into nets
    label_nets: bool = True

    def __post_init__(self) -> None:
        check_tolerance(self.tolerance)
