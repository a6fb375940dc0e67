# io/__init__.py
"""
I/O helpers package for the raster FFT spectrum toolkit.
"""
from .image_handler import read_image, save_image
from .raw_io import read_raw, write_raw
from .file_utils import make_result_filename, save_parameters_txt

__all__ = [
    "read_image",
    "save_image",
    "read_raw",
    "write_raw",
    "make_result_filename",
    "save_parameters_txt",
]
