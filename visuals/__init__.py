# visuals/__init__.py
"""
Visual helpers for the raster FFT spectrum toolkit.
Provides plotting and export utilities used by the scripts.
"""
from .plots import (
    plot_magnitude_spectrum,
    plot_phase_spectrum,
    compare_and_save,
)
__all__ = [
    "plot_magnitude_spectrum",
    "plot_phase_spectrum",
    "compare_and_save",
]
