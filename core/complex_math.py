"""
core/complex_math.py

Complex arithmetic used by the butterfly merge.

Functions:
- complex_sum(a, b), complex_diff(a, b)
- complex_product(a, b): (a.r*b.r - a.i*b.i, a.r*b.i + a.i*b.r)
- complex_scale(k, z): real factor times complex value
- make_complex(real, imag): build a Complex or a complex128 array from parts

Every function works on `Complex` values and, elementwise, on numpy complex
arrays (anything exposing `.real` / `.imag`). Scalars in give a `Complex`
back; arrays in give a new complex128 array back. Inputs are never modified.
"""

from dataclasses import dataclass
from typing import Iterable, List, Union
import numpy as np


@dataclass(frozen=True)
class Complex:
    """Immutable pair of doubles (real, imag)."""

    real: float
    imag: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    @classmethod
    def from_builtin(cls, z: complex) -> "Complex":
        return cls(z.real, z.imag)

    def to_builtin(self) -> complex:
        return complex(self.real, self.imag)

    def __iter__(self):
        yield self.real
        yield self.imag

    def __add__(self, other):
        return complex_sum(self, other)

    def __sub__(self, other):
        return complex_diff(self, other)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return complex_scale(other, self)
        return complex_product(self, other)

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return complex_scale(other, self)
        return complex_product(other, self)

    def __abs__(self) -> float:
        return float(np.sqrt(self.real * self.real + self.imag * self.imag))


ComplexLike = Union[Complex, complex, np.ndarray]


def make_complex(real, imag) -> ComplexLike:
    """
    Assemble a complex value from separate real and imaginary parts.
    Returns a Complex for scalar parts, a complex128 array otherwise.
    """
    if np.ndim(real) == 0 and np.ndim(imag) == 0:
        return Complex(real, imag)
    real, imag = np.broadcast_arrays(np.asarray(real, dtype=np.float64), np.asarray(imag, dtype=np.float64))
    out = np.empty(real.shape, dtype=np.complex128)
    out.real = real
    out.imag = imag
    return out


def complex_sum(a: ComplexLike, b: ComplexLike) -> ComplexLike:
    return make_complex(a.real + b.real, a.imag + b.imag)


def complex_diff(a: ComplexLike, b: ComplexLike) -> ComplexLike:
    return make_complex(a.real - b.real, a.imag - b.imag)


def complex_product(a: ComplexLike, b: ComplexLike) -> ComplexLike:
    """
    Product of two complex values using the explicit component formula
    (a.r*b.r - a.i*b.i, a.r*b.i + a.i*b.r).
    """
    return make_complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def complex_scale(k: float, z: ComplexLike) -> ComplexLike:
    """Scale both components of z by the real factor k."""
    k = float(k)
    return make_complex(k * z.real, k * z.imag)


def complex_values(arr: Iterable) -> List[Complex]:
    """Convert a 1D sequence of complex numbers into a list of Complex values."""
    return [Complex(z.real, z.imag) for z in np.asarray(arr, dtype=np.complex128).ravel()]
