"""
core/adapters.py

Conversions between byte rasters and complex rasters.

- to_complex(byte_raster): each byte v becomes (v, 0)
- power_spectrum(complex_raster): |F| = sqrt(r^2 + i^2) per cell
- to_displayable(complex_raster, config): clamp(gain * ln(1 + |F|)) as bytes

The display mapping is lossy and only meant for looking at spectra.
"""

import warnings
from typing import Optional
import numpy as np

from .config import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from .raster import Raster


def to_complex(raster: Raster) -> Raster:
    """Byte raster -> all-real complex raster of the same dimensions."""
    if raster.is_complex:
        raise TypeError("to_complex expects a byte raster.")
    out = np.zeros(raster.shape, dtype=np.complex128)
    out.real = raster.data
    return Raster(out, raster.rows, raster.cols)


def power_spectrum(raster: Raster) -> np.ndarray:
    """Magnitude sqrt(r^2 + i^2) of every cell, as a float64 (rows, cols) array."""
    if not raster.is_complex:
        raise TypeError("power_spectrum expects a complex raster.")
    re = raster.data.real
    im = raster.data.imag
    return np.sqrt(re * re + im * im)


def to_displayable(raster: Raster, config: Optional[DisplayConfig] = None) -> Raster:
    """
    Complex spectrum -> byte raster for viewing.

    scaled = gain * ln(1 + |F|), clamped to [level_black, level_white] and
    truncated to an integer grey level.
    """
    config = config or DEFAULT_DISPLAY_CONFIG
    mag = power_spectrum(raster)
    scaled = float(config.gain) * np.log(1.0 + mag)

    if not np.all(np.isfinite(scaled)):
        warnings.warn(
            "Spectrum contains non-finite values; they are mapped to the grey-level bounds.",
            RuntimeWarning,
        )
        scaled = np.nan_to_num(
            scaled, nan=float(config.level_black), posinf=float(config.level_white), neginf=float(config.level_black)
        )

    out = np.clip(scaled, config.level_black, config.level_white).astype(np.uint8)
    return Raster(out, raster.rows, raster.cols)
