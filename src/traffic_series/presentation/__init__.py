"""
Presentation module initialization.
"""
from .legend import legend_entries, describe_point, tooltip_title, axis_title
from .chart import to_chart_data
