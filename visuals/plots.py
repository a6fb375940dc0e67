"""
visuals/plots.py

Plotting utilities for spectra and side-by-side comparisons.

APIs:
- plot_magnitude_spectrum(F, out_path=None, center=True, log=True)
- plot_phase_spectrum(F, out_path=None, center=True)
- compare_and_save(original, spectrum, out_path=None, titles=None)

Notes:
- Spectrum images are written straight through Pillow (no Matplotlib).
- compare_and_save uses Matplotlib; if out_path is None it returns the Figure.
"""

from typing import Optional, Sequence
import os
import numpy as np
import matplotlib.pyplot as plt
from PIL import Image

from core.adapters import power_spectrum
from core.fft_engine import fft_shift
from core.raster import Raster


# Helper to ensure outdir exists
def _ensure_outdir(out_path: Optional[str]):
    if out_path is None:
        return None
    d = os.path.dirname(out_path)
    if d:
        os.makedirs(d, exist_ok=True)
    return out_path


def _normalize(a: np.ndarray) -> np.ndarray:
    """Min/max stretch to [0, 1]; constant or non-finite input maps to zeros."""
    a = np.asarray(a, dtype=np.float64)
    amin = float(np.nanmin(a))
    amax = float(np.nanmax(a))
    if np.isfinite(amin) and np.isfinite(amax) and amax > amin:
        return (a - amin) / (amax - amin)
    return np.zeros_like(a, dtype=np.float64)


def _save_raw_array_image(out_path: Optional[str], arr: np.ndarray, log_scale: bool = False):
    """
    Save a 2D numeric array as a greyscale PNG, stretched to 0..255.
    log_scale: apply log1p before normalization (useful for magnitude spectra).
    """
    if out_path is None:
        return None

    _ensure_outdir(out_path)
    a = np.array(arr, dtype=np.float64, copy=True)
    if log_scale:
        a = np.log1p(np.abs(a))

    img_arr = np.clip(_normalize(a) * 255.0, 0, 255).astype(np.uint8)
    Image.fromarray(img_arr).save(out_path)
    return out_path


def _display_view(F: Raster, center: bool) -> Raster:
    if not F.is_complex:
        raise TypeError("Spectrum plots expect a complex raster.")
    return fft_shift(F) if center else F


def plot_magnitude_spectrum(
    F: Raster,
    out_path: Optional[str] = None,
    center: bool = True,
    log: bool = True,
):
    """
    Save the magnitude spectrum as a PNG (log-scaled by default).
    If out_path is None, return the normalized 2D float array instead.
    """
    mag = power_spectrum(_display_view(F, center))
    if out_path is not None:
        return _save_raw_array_image(out_path, mag, log_scale=bool(log))
    return _normalize(np.log1p(mag) if log else mag)


def plot_phase_spectrum(
    F: Raster,
    out_path: Optional[str] = None,
    center: bool = True,
):
    """
    Save the phase spectrum, mapped from -pi..pi to 0..255.
    If out_path is None, return the phase mapped to 0..1.
    """
    phase = np.angle(_display_view(F, center).data)
    phase_norm = (phase + np.pi) / (2.0 * np.pi)
    if out_path is not None:
        _ensure_outdir(out_path)
        img_arr = np.clip(phase_norm * 255.0, 0, 255).astype(np.uint8)
        Image.fromarray(img_arr).save(out_path)
        return out_path
    return phase_norm


def compare_and_save(
    original,
    spectrum,
    out_path: Optional[str] = None,
    titles: Optional[Sequence[str]] = None,
):
    """
    Original (left) | Spectrum (right), both greyscale byte rasters.
    """
    titles = titles or ("Original", "Spectrum")
    fig, axs = plt.subplots(1, 2, figsize=(12, 6))

    for ax, img, title in zip(axs, (original, spectrum), titles):
        arr = img.data if isinstance(img, Raster) else np.asarray(img)
        ax.imshow(arr, cmap="gray", vmin=0, vmax=255, interpolation="nearest")
        ax.set_title(title)
        ax.axis("off")

    if out_path:
        _ensure_outdir(out_path)
        fig.savefig(out_path, dpi=200, bbox_inches="tight", pad_inches=0.05)
        plt.close(fig)
        return out_path
    return fig
