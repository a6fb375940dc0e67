import numpy as np
import pytest
from core.complex_math import Complex
from core.errors import DimensionMismatch
from core.raster import Raster

def test_from_bytes_row_major():
    r = Raster.from_bytes(bytes(range(6)), 2, 3)
    assert r.shape == (2, 3)
    assert r.kind == "byte"
    assert r.at(1, 0) == 3
    assert list(r.row(1)) == [3, 4, 5]
    assert list(r.column(2)) == [2, 5]
    assert r.to_bytes() == bytes(range(6))

def test_cell_count_mismatch():
    with pytest.raises(DimensionMismatch):
        Raster.from_bytes(b"\x00" * 5, 2, 3)
    with pytest.raises(ValueError):
        Raster(np.zeros((3, 2), dtype=np.uint8), 2, 3)

def test_bounds_checked_accessors():
    r = Raster.zeros(4, 4)
    with pytest.raises(IndexError):
        r.at(4, 0)
    with pytest.raises(IndexError):
        r.at(-1, 0)
    with pytest.raises(IndexError):
        r.column(4)

def test_raster_is_read_only_and_owns_its_buffer():
    arr = np.arange(16, dtype=np.uint8).reshape(4, 4)
    r = Raster.from_array(arr)
    arr[0, 0] = 99
    assert r.at(0, 0) == 0
    with pytest.raises(ValueError):
        r.data[0, 0] = 1

def test_value_and_dtype_validation():
    with pytest.raises(ValueError):
        Raster(np.array([[300]]), 1, 1)
    with pytest.raises(TypeError):
        Raster(np.zeros((2, 2), dtype=np.float64), 2, 2)
    with pytest.raises(ValueError):
        Raster.zeros(0, 4)

def test_complex_raster():
    r = Raster(np.array([[1 + 2j, 0j]]), 1, 2)
    assert r.is_complex
    assert r.at(0, 0) == Complex(1, 2)
    with pytest.raises(TypeError):
        r.to_bytes()

def test_require_shape_and_equality():
    a = Raster.zeros(2, 4)
    assert a.require_shape(2, 4) is a
    with pytest.raises(DimensionMismatch):
        a.require_shape(4, 2)
    assert a == Raster.zeros(2, 4)
    assert a != Raster.zeros(2, 4, kind="complex")
