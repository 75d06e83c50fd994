from typing import List, Optional

from ..domain.entities import Number, SeverityTier
from ...common.schemas import LegendEntry

def legend_entries() -> List[LegendEntry]:
    """Traffic level legend, lowest tier first."""
    return [
        LegendEntry(tier=tier.value, label=tier.label, color=tier.color)
        for tier in SeverityTier
    ]

def describe_point(value: Optional[Number], tier: SeverityTier) -> str:
    if not value or tier is SeverityTier.NONE:
        return "No Traffic Detected"
    return f"Vehicle Count: {value} ({tier.label})"

def tooltip_title(label: str, interval_minutes: int) -> str:
    return f"Time: {label} ({interval_minutes}-min interval)"

def axis_title(interval_minutes: int) -> str:
    return f"Time ({interval_minutes}-Minute Intervals)"
