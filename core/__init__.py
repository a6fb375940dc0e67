"""
Core package init for the raster FFT spectrum toolkit.
Exposes public modules for import in tests and scripts.
"""
__all__ = ["complex_math", "config", "errors", "raster", "adapters", "fft_engine", "pipeline"]
