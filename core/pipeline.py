"""
core/pipeline.py

Spectrum pipeline for a single greyscale raster:
  1) to_complex (bytes -> all-real complex values)
  2) 2D FFT
  3) optional fft_shift (centre the DC coefficient)
  4) to_displayable (log-scaled power spectrum as bytes)

API:
- compute_spectrum(image, fft_config=None, display_config=None, return_intermediates=False)

`image` may be a byte Raster or a 2D uint8 array. If return_intermediates=True
the function returns (spectrum_raster, intermediates_dict) where
intermediates_dict holds 'complex', 'F', 'F_display' and 'magnitude'.
"""

from typing import Any, Optional
import numpy as np

from .adapters import power_spectrum, to_complex, to_displayable
from .config import DEFAULT_DISPLAY_CONFIG, DEFAULT_FFT_CONFIG, DisplayConfig, FFTConfig
from .fft_engine import apply_2d_fft, fft_shift
from .raster import Raster


def compute_spectrum(
    image: Any,
    fft_config: Optional[FFTConfig] = None,
    display_config: Optional[DisplayConfig] = None,
    *,
    return_intermediates: bool = False,
) -> Any:
    """
    Compute the displayable power spectrum of a greyscale raster.
    """
    fft_config = fft_config or DEFAULT_FFT_CONFIG
    display_config = display_config or DEFAULT_DISPLAY_CONFIG

    if not isinstance(image, Raster):
        arr = np.asarray(image)
        if arr.ndim != 2:
            raise ValueError("compute_spectrum expects a 2D greyscale array.")
        image = Raster.from_array(arr)
    if image.is_complex:
        raise TypeError("compute_spectrum expects a byte raster.")

    C = to_complex(image)
    F = apply_2d_fft(C, fft_config)
    F_display = fft_shift(F) if display_config.center else F
    out = to_displayable(F_display, display_config)

    if return_intermediates:
        intermediates = {
            "complex": C,
            "F": F,
            "F_display": F_display,
            "magnitude": power_spectrum(F_display),
        }
        return out, intermediates

    return out
