"""
core/raster.py

Row-major raster container shared by every stage.

A Raster owns a dense (rows, cols) numpy buffer of either uint8 samples
(byte raster) or complex128 values (complex raster). The buffer is copied in
on construction and marked read-only, so a raster never changes once built;
each stage produces a fresh one.
"""

from typing import Union
import numpy as np

from .complex_math import Complex
from .errors import DimensionMismatch

BYTE = "byte"
COMPLEX = "complex"


def _as_owned_buffer(data) -> np.ndarray:
    arr = np.asarray(data)
    if np.iscomplexobj(arr):
        return np.array(arr, dtype=np.complex128, copy=True)
    if arr.dtype == np.bool_ or np.issubdtype(arr.dtype, np.integer):
        if arr.size and (int(arr.min()) < 0 or int(arr.max()) > 255):
            raise ValueError("Byte raster values must lie in [0, 255].")
        return np.array(arr, dtype=np.uint8, copy=True)
    raise TypeError(
        f"Raster data must be integer samples in [0, 255] or complex values, got dtype {arr.dtype}."
    )


class Raster:
    """
    Fixed-dimension, row-major buffer with explicit (rows, cols).

    Parameters
    ----------
    data : array-like
        rows*cols cells, flat or already shaped (rows, cols).
    rows, cols : int
        Dimensions of the raster. The cell count of `data` must equal rows*cols.
    """

    __slots__ = ("_data", "_rows", "_cols")

    def __init__(self, data, rows: int, cols: int):
        rows, cols = int(rows), int(cols)
        if rows <= 0 or cols <= 0:
            raise ValueError("Raster dimensions must be positive.")
        buf = _as_owned_buffer(data)
        if buf.size != rows * cols:
            raise DimensionMismatch(rows * cols, buf.size, what="raster cell count")
        if buf.ndim == 2 and buf.shape != (rows, cols):
            raise DimensionMismatch((rows, cols), buf.shape, what="raster shape")
        buf = buf.reshape(rows, cols)
        buf.flags.writeable = False
        self._data = buf
        self._rows = rows
        self._cols = cols

    # --- constructors ---
    @classmethod
    def from_array(cls, arr) -> "Raster":
        """Build a raster from a 2D array, taking its dimensions from the shape."""
        a = np.asarray(arr)
        if a.ndim != 2:
            raise ValueError("Raster.from_array expects a 2D array.")
        return cls(a, a.shape[0], a.shape[1])

    @classmethod
    def from_bytes(cls, buffer: bytes, rows: int, cols: int) -> "Raster":
        """Interpret a headerless byte buffer as a rows x cols byte raster."""
        return cls(np.frombuffer(bytes(buffer), dtype=np.uint8), rows, cols)

    @classmethod
    def zeros(cls, rows: int, cols: int, kind: str = BYTE) -> "Raster":
        if kind == BYTE:
            dtype = np.uint8
        elif kind == COMPLEX:
            dtype = np.complex128
        else:
            raise ValueError(f"Unknown raster kind '{kind}'. Choose 'byte' or 'complex'.")
        return cls(np.zeros((rows, cols), dtype=dtype), rows, cols)

    # --- properties ---
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self):
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        return self._rows * self._cols

    @property
    def kind(self) -> str:
        return COMPLEX if self._data.dtype == np.complex128 else BYTE

    @property
    def is_complex(self) -> bool:
        return self.kind == COMPLEX

    @property
    def data(self) -> np.ndarray:
        """Read-only (rows, cols) view of the cells."""
        return self._data

    # --- bounds-checked accessors ---
    def _check_row(self, i: int) -> int:
        if not 0 <= i < self._rows:
            raise IndexError(f"row {i} out of range [0, {self._rows}).")
        return i

    def _check_col(self, j: int) -> int:
        if not 0 <= j < self._cols:
            raise IndexError(f"column {j} out of range [0, {self._cols}).")
        return j

    def at(self, i: int, j: int) -> Union[int, Complex]:
        """Cell (i, j); an int for byte rasters, a Complex for complex ones."""
        v = self._data[self._check_row(i), self._check_col(j)]
        if self.is_complex:
            return Complex(v.real, v.imag)
        return int(v)

    def row(self, i: int) -> np.ndarray:
        return self._data[self._check_row(i), :]

    def column(self, j: int) -> np.ndarray:
        return self._data[:, self._check_col(j)]

    def to_bytes(self) -> bytes:
        """Serialize a byte raster row by row (no header)."""
        if self.is_complex:
            raise TypeError("Only byte rasters can be serialized to raw bytes.")
        return self._data.tobytes(order="C")

    def require_shape(self, rows: int, cols: int) -> "Raster":
        """Return self if it is rows x cols, raise DimensionMismatch otherwise."""
        if self.shape != (int(rows), int(cols)):
            raise DimensionMismatch((int(rows), int(cols)), self.shape, what="raster shape")
        return self

    def __eq__(self, other):
        if not isinstance(other, Raster):
            return NotImplemented
        return self.kind == other.kind and self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self):
        return f"Raster(kind={self.kind!r}, rows={self._rows}, cols={self._cols})"
