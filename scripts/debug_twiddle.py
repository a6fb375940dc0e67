"""
Compare the FFT engine against numpy.fft.fft2 on a random raster.

Prints, for every twiddle convention / stage-halving combination, the max
absolute deviation from numpy's (suitably scaled) transform, plus the
Hermitian symmetry check that any real-input 2D DFT must pass.

Usage (from project root):
python -m scripts.debug_twiddle
"""

import numpy as np

from core.config import FFTConfig
from core.fft_engine import apply_2d_fft
from core.raster import Raster

# --- Config ---
ROWS = 64
COLS = 32
SEED = 0

rng = np.random.default_rng(SEED)
img = Raster.from_array(rng.integers(0, 256, size=(ROWS, COLS), dtype=np.uint8))
F_np = np.fft.fft2(img.data.astype(np.float64))

print("\n=== FFT ENGINE vs numpy.fft.fft2 ===")
for twiddle in ("reference", "canonical"):
    for halve in (False, True):
        cfg = FFTConfig(twiddle=twiddle, halve_stages=halve)
        F = apply_2d_fft(img, cfg).data
        target = F_np / (ROWS * COLS) if halve else F_np
        dev = float(np.max(np.abs(F - target)))
        i_idx = (-np.arange(ROWS)) % ROWS
        j_idx = (-np.arange(COLS)) % COLS
        hermitian = np.allclose(F, np.conj(F[i_idx[:, None], j_idx[None, :]]))
        print(f"twiddle={twiddle:9s} halve_stages={halve!s:5s} max|F - numpy|={dev:.3e} hermitian={hermitian}")
print("====================================\n")
