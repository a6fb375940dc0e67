import csv
import os
import numpy as np
from scripts.spectrum_demo import main

def test_batch_run(tmp_path):
    raw = tmp_path / "square.raw"
    img = np.zeros((16, 16), dtype=np.uint8)
    img[4:12, 4:12] = 255
    raw.write_bytes(img.tobytes())
    outdir = tmp_path / "out"

    rc = main([str(raw), str(tmp_path / "missing.raw"), "--rows", "16", "--cols", "16",
               "--outdir", str(outdir), "--center", "--compare"])

    assert rc == 0
    assert (outdir / "square_spectrum.raw").stat().st_size == 256
    assert (outdir / "square_spectrum.png").exists()
    assert (outdir / "square_compare.png").exists()
    assert (outdir / "parameters.txt").exists()
    with open(outdir / "results.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert float(rows[0]["dc_magnitude"]) == 64 * 255

def test_batch_rejects_bad_dimensions(tmp_path):
    raw = tmp_path / "odd.raw"
    raw.write_bytes(b"\x01" * 36)
    rc = main([str(raw), "--rows", "6", "--cols", "6", "--outdir", str(tmp_path / "out")])
    assert rc == 1
    assert not os.path.exists(tmp_path / "out" / "odd_spectrum.raw")

def test_scripts_is_a_regular_package():
    import scripts
    assert scripts.__file__ is not None
    assert os.path.basename(scripts.__file__) == "__init__.py"
