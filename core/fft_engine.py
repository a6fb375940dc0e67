'''
FFT engine.

Functions:
- is_power_of_two / reverse_bits / bit_reversal_permutation: index helpers
- twiddle_factors: per-stage rotation factors for the butterfly merge
- apply_1d_fft: radix-2 decimation-in-time FFT of one power-of-two sequence
- apply_2d_fft: separable 2D FFT (columns, then rows) of a raster
- fft_shift / ifft_shift: move the DC coefficient to / from the centre
'''

import math
import warnings
from typing import Optional
import numpy as np

from .complex_math import complex_diff, complex_product, complex_scale, complex_sum, make_complex
from .config import (
    DEFAULT_FFT_CONFIG,
    ROW_SOURCE_ORIGINAL,
    TWIDDLE_CANONICAL,
    FFTConfig,
)
from .errors import InvalidDimension
from .raster import Raster
from .adapters import to_complex


def is_power_of_two(n: int) -> bool:
    n = int(n)
    return n > 0 and (n & (n - 1)) == 0


def _require_power_of_two(n: int, axis: str = "sequence") -> int:
    if not is_power_of_two(n):
        raise InvalidDimension(n, axis=axis)
    return int(n).bit_length() - 1


def reverse_bits(i: int, width: int) -> int:
    """Reverse the low `width` bits of i (bit 0 <-> bit width-1)."""
    out = 0
    for _ in range(width):
        out = (out << 1) | (i & 1)
        i >>= 1
    return out


def bit_reversal_permutation(n: int) -> np.ndarray:
    """perm[i] = reverse_bits(i, log2(n)) for every i in [0, n)."""
    bits = _require_power_of_two(n)
    return np.array([reverse_bits(i, bits) for i in range(n)], dtype=np.intp)


def twiddle_factors(m: int, convention: str = "reference") -> np.ndarray:
    """
    Twiddle factors W[u] for u in [0, m), used when merging two length-m halves.

    "reference": W = (cos(pi*u), -sin(pi*u)); the angle ignores the stage size.
    "canonical": W = (cos(pi*u/m), -sin(pi*u/m)) = exp(-2j*pi*u / (2m)).
    """
    u = np.arange(m, dtype=np.float64)
    if convention == TWIDDLE_CANONICAL:
        angle = math.pi * u / m
    else:
        angle = math.pi * u
    return make_complex(np.cos(angle), -np.sin(angle))


def _fft_lines(lines: np.ndarray, config: FFTConfig) -> np.ndarray:
    """
    Transform every row of a (L, N) complex array independently.
    N must already be validated as a power of two. Returns a new array.
    """
    n_lines, n = lines.shape
    bits = n.bit_length() - 1

    # Place sample i at the bit-reversal of i
    work = np.empty((n_lines, n), dtype=np.complex128)
    work[:, bit_reversal_permutation(n)] = lines

    m = 1          # half-length of the groups being merged
    pairs = n // 2  # number of group pairs at this stage
    for _ in range(bits):
        groups = work.reshape(n_lines, pairs, 2, m)
        first = groups[:, :, 0, :]   # F[i1 + u], i1 = 2*k*m
        second = groups[:, :, 1, :]  # F[i2 + u], i2 = (2*k+1)*m
        w = twiddle_factors(m, config.twiddle)

        rotated = complex_product(second, w)
        top = complex_sum(first, rotated)
        bottom = complex_diff(first, rotated)
        if config.halve_stages:
            top = complex_scale(0.5, top)
            bottom = complex_scale(0.5, bottom)

        work = np.stack([top, bottom], axis=2).reshape(n_lines, n)
        m *= 2
        pairs //= 2

    return work


def apply_1d_fft(samples, config: Optional[FFTConfig] = None) -> np.ndarray:
    """
    Radix-2 FFT of a 1D sequence whose length is a power of two.

    Real samples are treated as all-real complex numbers. Returns a new
    complex128 array of the same length in natural order.
    Raises InvalidDimension before allocating anything if the length is not
    a power of two.
    """
    config = config or DEFAULT_FFT_CONFIG
    arr = np.asarray(samples)
    if arr.ndim != 1:
        raise ValueError("apply_1d_fft expects a 1D sequence.")
    _require_power_of_two(arr.shape[0])
    line = arr.astype(np.complex128).reshape(1, -1)
    return _fft_lines(line, config)[0]


def apply_2d_fft(raster, config: Optional[FFTConfig] = None) -> Raster:
    """
    Separable 2D FFT: 1D FFT down every column, then along every row of the
    column-transformed data. No 1/(rows*cols) normalization.

    Accepts a byte or complex Raster (or a 2D array). Both dimensions are
    validated before any line is transformed; the input is left untouched.
    """
    config = config or DEFAULT_FFT_CONFIG
    if not isinstance(raster, Raster):
        raster = Raster.from_array(raster)
    _require_power_of_two(raster.rows, axis="rows")
    _require_power_of_two(raster.cols, axis="cols")

    src = raster.data if raster.is_complex else to_complex(raster).data

    # Columns: each column is one line of length rows
    cols_done = _fft_lines(src.T, config).T

    if config.row_source == ROW_SOURCE_ORIGINAL:
        warnings.warn(
            "Row pass is running over the untransformed input rows; "
            "the result is not a 2D DFT.",
            RuntimeWarning,
        )
        row_input = src
    else:
        row_input = cols_done

    out = _fft_lines(np.ascontiguousarray(row_input), config)
    return Raster(out, raster.rows, raster.cols)


def fft_shift(F: Raster) -> Raster:
    """Shift zero-frequency to center (wrapper)."""
    return Raster(np.fft.fftshift(F.data), F.rows, F.cols)


def ifft_shift(Fs: Raster) -> Raster:
    """Inverse shift (center -> origin) (wrapper)."""
    return Raster(np.fft.ifftshift(Fs.data), Fs.rows, Fs.cols)
