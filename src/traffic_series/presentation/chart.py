"""
Bar chart payload for the vehicle count series.
"""
from typing import Dict

from ..domain.entities import VehicleCountSeries
from .legend import axis_title, describe_point, tooltip_title

def to_chart_data(series: VehicleCountSeries, dataset_label: str = "Vehicle Count") -> Dict:
    """
    Shapes a series the way a Chart.js style bar renderer expects it.
    """
    return {
        'labels': list(series.labels),
        'datasets': [{
            'label': dataset_label,
            'data': list(series.values),
            'backgroundColor': list(series.colors),
            'borderColor': list(series.colors),
            'borderWidth': 1,
            'borderRadius': 4,
        }],
        'tooltipTitles': [tooltip_title(label, series.interval_minutes) for label in series.labels],
        'tooltips': [describe_point(v, t) for v, t in zip(series.values, series.severities)],
        'xAxisTitle': axis_title(series.interval_minutes),
        'quintiles': list(series.thresholds.as_tuple()),
    }
