import numpy as np
import pytest
from core.complex_math import (
    Complex, complex_sum, complex_diff, complex_product, complex_scale, make_complex, complex_values
)

def test_sum_and_diff():
    a, b = Complex(1, 2), Complex(3, -4)
    assert complex_sum(a, b) == Complex(4, -2)
    assert complex_diff(a, b) == Complex(-2, 6)
    assert a + b == Complex(4, -2)
    assert a - b == Complex(-2, 6)

def test_product_formula():
    # (1+2i)(3+4i) = 3 - 8 + (4 + 6)i
    assert complex_product(Complex(1, 2), Complex(3, 4)) == Complex(-5, 10)
    assert Complex(0, 1) * Complex(0, 1) == Complex(-1, 0)

def test_scalar_product():
    z = Complex(1, -3)
    assert complex_scale(2, z) == Complex(2, -6)
    assert 0.5 * z == Complex(0.5, -1.5)
    assert z * 2 == Complex(2, -6)

def test_values_are_immutable_and_builtin_compatible():
    z = Complex(3, 4)
    assert abs(z) == 5.0
    assert tuple(z) == (3.0, 4.0)
    assert z.to_builtin() == 3 + 4j
    assert Complex.from_builtin(1 - 2j) == Complex(1, -2)
    with pytest.raises(AttributeError):
        z.real = 1.0

def test_elementwise_on_arrays():
    a = np.array([1 + 2j, 0 + 1j])
    b = np.array([3 + 4j, 0 + 1j])
    a_before = a.copy()
    out = complex_product(a, b)
    assert out.dtype == np.complex128
    assert np.allclose(out, a * b)
    assert np.array_equal(a, a_before)
    assert np.allclose(complex_sum(a, b), a + b)
    assert np.allclose(complex_diff(a, b), a - b)
    assert np.allclose(complex_scale(0.5, a), 0.5 * a)

def test_make_complex_kinds():
    assert make_complex(1.0, 2.0) == Complex(1, 2)
    arr = make_complex(np.array([1.0, 2.0]), 0.0)
    assert arr.dtype == np.complex128
    assert np.array_equal(arr, np.array([1 + 0j, 2 + 0j]))
    assert complex_values(arr) == [Complex(1, 0), Complex(2, 0)]
