import numpy as np
import pytest
from core.config import DisplayConfig, FFTConfig
from core.errors import InvalidDimension
from core.fft_engine import apply_2d_fft
from core.pipeline import compute_spectrum
from core.raster import Raster

def test_zero_image_gives_black_spectrum():
    out = compute_spectrum(np.zeros((16, 16), dtype=np.uint8))
    assert out.shape == (16, 16)
    assert np.all(out.data == 0)

def test_constant_image_lights_only_dc():
    img = np.ones((16, 16), dtype=np.uint8)
    out = compute_spectrum(img)
    assert out.at(0, 0) == 255
    assert int(out.data.sum()) == 255

def test_centered_spectrum_moves_dc():
    img = np.ones((16, 8), dtype=np.uint8)
    out = compute_spectrum(img, display_config=DisplayConfig(center=True))
    assert out.at(8, 4) == 255
    assert out.at(0, 0) == 0

def test_intermediates():
    rng = np.random.default_rng(7)
    img = Raster.from_array(rng.integers(0, 256, size=(8, 16), dtype=np.uint8))
    cfg = FFTConfig(twiddle="canonical")
    out, inter = compute_spectrum(img, cfg, return_intermediates=True)
    assert set(inter) == {"complex", "F", "F_display", "magnitude"}
    assert inter["F"] == apply_2d_fft(img, cfg)
    assert np.allclose(inter["magnitude"], np.abs(np.fft.fft2(img.data.astype(np.float64))))
    assert out.kind == "byte"

def test_input_validation():
    with pytest.raises(ValueError):
        compute_spectrum(np.zeros((4, 4, 3), dtype=np.uint8))
    with pytest.raises(TypeError):
        compute_spectrum(Raster.zeros(4, 4, kind="complex"))
    with pytest.raises(InvalidDimension):
        compute_spectrum(np.zeros((12, 16), dtype=np.uint8))
