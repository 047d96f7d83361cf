"""Infrastructure layer - output formatters and exporters."""

from .formatters import (
    HangingInstructionsFormatter,
    JsonExporter,
    LayoutDiagramFormatter,
    MeasurementTableFormatter,
)

__all__ = [
    "HangingInstructionsFormatter",
    "JsonExporter",
    "LayoutDiagramFormatter",
    "MeasurementTableFormatter",
]
