# io/image_handler.py
"""
Image read/write helpers using Pillow.

Functions:
- read_image(path) -> (byte Raster, meta); colour inputs are converted to greyscale
- save_image(path, raster) -> writes an 8-bit greyscale image
"""

from PIL import Image
import pillow_avif  # noqa: F401  (registers the AVIF codec with Pillow)
from typing import Tuple
import numpy as np

from core.raster import Raster


def read_image(path: str) -> Tuple[Raster, dict]:
    """
    Read an image from `path` and return (raster, meta).
    - Every input is converted to 8-bit greyscale ("L"); alpha is dropped.
    - Meta contains the original mode, size (width, height) and 'has_alpha'.
    """
    img = Image.open(path)
    mode = img.mode
    has_alpha = mode in ("RGBA", "LA") or ("transparency" in img.info)
    if has_alpha:
        img = img.convert("RGBA")
    gray = img.convert("L")
    arr = np.asarray(gray)
    meta = {"mode": mode, "size": gray.size, "has_alpha": has_alpha}
    return Raster.from_array(arr), meta


def save_image(path: str, raster) -> str:
    """
    Save a byte raster (or HxW array) to `path` as a greyscale image.
    Floats are clipped to 0..255 before the uint8 cast.
    """
    arr = raster.data if isinstance(raster, Raster) else np.asarray(raster)
    if np.iscomplexobj(arr):
        raise ValueError("save_image expects real samples; convert spectra with to_displayable first.")
    if arr.ndim != 2:
        raise ValueError("save_image expects an HxW array.")

    if np.issubdtype(arr.dtype, np.floating):
        arr = np.clip(arr, 0.0, 255.0).astype(np.uint8)
    else:
        arr = arr.astype(np.uint8)

    img = Image.fromarray(arr)
    img.save(path)
    return path
