import os
import numpy as np
import pytest
from core.raster import Raster
from visuals.plots import compare_and_save, plot_magnitude_spectrum, plot_phase_spectrum

def _impulse_spectrum():
    F = np.zeros((32, 32), dtype=complex)
    F[0, 0] = 1.0 + 0j
    return Raster(F, 32, 32)

def test_plot_spectrum_files(tmp_path):
    F = _impulse_spectrum()
    p_mag = str(tmp_path / "plots" / "mag.png")
    p_phase = str(tmp_path / "plots" / "phase.png")
    assert plot_magnitude_spectrum(F, out_path=p_mag) == p_mag
    assert plot_phase_spectrum(F, out_path=p_phase) == p_phase
    assert os.path.exists(p_mag)
    assert os.path.exists(p_phase)

def test_plot_spectrum_arrays():
    F = _impulse_spectrum()
    mag = plot_magnitude_spectrum(F)
    assert mag.shape == (32, 32)
    assert mag[16, 16] == 1.0  # centred DC
    assert plot_magnitude_spectrum(F, center=False)[0, 0] == 1.0
    phase = plot_phase_spectrum(F)
    assert np.all((phase >= 0) & (phase <= 1))

def test_plot_requires_complex():
    with pytest.raises(TypeError):
        plot_magnitude_spectrum(Raster.zeros(4, 4))

def test_compare_and_save(tmp_path):
    orig = Raster.zeros(32, 32)
    spectrum = Raster.from_array(np.full((32, 32), 10, dtype=np.uint8))
    pm = str(tmp_path / "cmp.png")
    assert compare_and_save(orig, spectrum, out_path=pm) == pm
    assert os.path.exists(pm)
