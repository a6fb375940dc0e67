"""
Driver scripts for the raster FFT spectrum toolkit.
Run from the project root, e.g. `python -m scripts.spectrum_demo`.
"""
