"""
Batch-run the spectrum pipeline across multiple images.

Inputs are either headerless .raw files (dimensions from --rows/--cols) or
any picture Pillow can open (converted to greyscale). For each input the
script saves:
- <name>_spectrum.raw : displayable spectrum, same raw format as the input
- <name>_spectrum.png : the same bytes as a PNG
- <name>_compare.png  : original | spectrum figure (with --compare)
and appends a row to results.csv with diagnostics:
- input_path, rows, cols, spectrum_raw_path, spectrum_png_path, compare_path,
  dc_magnitude, max_magnitude, saturated_fraction

Usage (from project root):
python -m scripts.spectrum_demo in/square256.raw in/car.raw --rows 256 --cols 256
"""

import argparse
import csv
import os
from datetime import datetime
from typing import List, Optional
import numpy as np

from core.config import DISPLAY_GAIN, DisplayConfig, FFTConfig
from core.errors import FFTError
from core.pipeline import compute_spectrum
from io_utils.file_utils import save_parameters_txt
from io_utils.image_handler import read_image, save_image
from io_utils.raw_io import read_raw, write_raw
from visuals.plots import compare_and_save

# Defaults match the original exercise inputs
IMAGES = [
    "in/square256.raw",
    "in/car.raw",
]
DEFAULT_ROWS = 256
DEFAULT_COLS = 256
DEFAULT_OUTROOT = "results"

csv_fields = [
    "input_path", "rows", "cols", "spectrum_raw_path", "spectrum_png_path",
    "compare_path", "dc_magnitude", "max_magnitude", "saturated_fraction",
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate greyscale power-spectrum images with the radix-2 FFT."
    )
    parser.add_argument("inputs", nargs="*", default=IMAGES, help="Raw or picture files to transform")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Rows of raw inputs (power of two)")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Columns of raw inputs (power of two)")
    parser.add_argument("--outdir", default=None, help="Output directory (default: results/spectrum_<timestamp>)")
    parser.add_argument(
        "--twiddle",
        choices=("reference", "canonical"),
        default="reference",
        help="Twiddle factor convention used by the butterfly merge",
    )
    parser.add_argument("--halve-stages", action="store_true", help="Scale every butterfly output by 0.5")
    parser.add_argument("--center", action="store_true", help="Move the DC coefficient to the image centre")
    parser.add_argument("--gain", type=float, default=DISPLAY_GAIN, help="Gain applied to ln(1 + |F|)")
    parser.add_argument("--compare", action="store_true", help="Also save an original | spectrum figure")
    return parser.parse_args(argv)


def load_input(path: str, rows: int, cols: int):
    if path.lower().endswith(".raw"):
        return read_raw(path, rows, cols)
    raster, _meta = read_image(path)
    return raster


def process_one_image(path, outdir, fft_config, display_config, rows, cols, compare=False):
    image = load_input(path, rows, cols)
    spectrum, inter = compute_spectrum(image, fft_config, display_config, return_intermediates=True)

    base = os.path.splitext(os.path.basename(path))[0]
    raw_path = write_raw(os.path.join(outdir, f"{base}_spectrum.raw"), spectrum)
    png_path = save_image(os.path.join(outdir, f"{base}_spectrum.png"), spectrum)
    cmp_path = ""
    if compare:
        cmp_path = compare_and_save(image, spectrum, out_path=os.path.join(outdir, f"{base}_compare.png"))

    magnitude = inter["magnitude"]
    return {
        "input_path": path,
        "rows": image.rows,
        "cols": image.cols,
        "spectrum_raw_path": raw_path,
        "spectrum_png_path": png_path,
        "compare_path": cmp_path,
        "dc_magnitude": float(np.abs(inter["F"].data[0, 0])),
        "max_magnitude": float(magnitude.max()),
        "saturated_fraction": float(np.mean(spectrum.data >= display_config.level_white)),
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    fft_config = FFTConfig(twiddle=args.twiddle, halve_stages=args.halve_stages)
    display_config = DisplayConfig(gain=args.gain, center=args.center)

    outdir = args.outdir
    if outdir is None:
        timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
        outdir = os.path.join(DEFAULT_OUTROOT, f"spectrum_{timestamp}")
    os.makedirs(outdir, exist_ok=True)

    save_parameters_txt(outdir, {
        "rows": args.rows,
        "cols": args.cols,
        "twiddle": fft_config.twiddle,
        "halve_stages": fft_config.halve_stages,
        "row_source": fft_config.row_source,
        "gain": display_config.gain,
        "center": display_config.center,
    })

    failures = 0
    csv_path = os.path.join(outdir, "results.csv")
    with open(csv_path, "w", newline="", encoding="utf-8") as csvf:
        writer = csv.DictWriter(csvf, fieldnames=csv_fields)
        writer.writeheader()

        for path in args.inputs:
            if not os.path.exists(path):
                print("Skipping missing:", path)
                continue
            print("Processing:", path)
            try:
                rec = process_one_image(
                    path, outdir, fft_config, display_config, args.rows, args.cols, compare=args.compare
                )
            except FFTError as e:
                print(" -> rejected:", e)
                failures += 1
                continue
            writer.writerow(rec)
            csvf.flush()
            print(" -> done. DC magnitude:", rec["dc_magnitude"], "saturated:", rec["saturated_fraction"])

    print("Batch done. Results in:", outdir, "CSV:", csv_path)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
