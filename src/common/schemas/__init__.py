from .series import SeriesPayload, LegendEntry, DiagnosticsPayload, SeriesReport

__all__ = [
    "SeriesPayload",
    "LegendEntry",
    "DiagnosticsPayload",
    "SeriesReport",
]
