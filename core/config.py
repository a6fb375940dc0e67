"""
core/config.py

Configuration values for the transform and display stages.

The grey-level bounds and display gain used to be process-wide constants;
they are plain defaults here and travel with each call through the
FFTConfig / DisplayConfig values.
"""

from dataclasses import dataclass

# Grey levels of an 8-bit raster
LEVELS = 256
LEVEL_BLACK = 0
LEVEL_WHITE = LEVELS - 1

# Gain applied to ln(1 + |F|) when mapping a spectrum to grey levels
DISPLAY_GAIN = 100.0

TWIDDLE_REFERENCE = "reference"
TWIDDLE_CANONICAL = "canonical"
TWIDDLE_CONVENTIONS = (TWIDDLE_REFERENCE, TWIDDLE_CANONICAL)

ROW_SOURCE_TRANSFORMED = "transformed"
ROW_SOURCE_ORIGINAL = "original"
ROW_SOURCES = (ROW_SOURCE_TRANSFORMED, ROW_SOURCE_ORIGINAL)


@dataclass(frozen=True)
class FFTConfig:
    """
    Options for the 1D and 2D transforms.

    twiddle:
      "reference" -> W = (cos(pi*u), -sin(pi*u)), independent of the stage
      "canonical" -> W = exp(-2j*pi*u / (2M)), the textbook radix-2 factor
    halve_stages:
      multiply each butterfly output by 0.5 (overall 1/N scaling)
    row_source:
      "transformed" -> row pass runs over the column-transformed data (true 2D DFT)
      "original"    -> row pass runs over the untransformed input rows (legacy)
    """

    twiddle: str = TWIDDLE_REFERENCE
    halve_stages: bool = False
    row_source: str = ROW_SOURCE_TRANSFORMED

    def __post_init__(self):
        if self.twiddle not in TWIDDLE_CONVENTIONS:
            raise ValueError(
                f"Unknown twiddle convention '{self.twiddle}'. Choose 'reference' or 'canonical'."
            )
        if self.row_source not in ROW_SOURCES:
            raise ValueError(
                f"Unknown row_source '{self.row_source}'. Choose 'transformed' or 'original'."
            )


@dataclass(frozen=True)
class DisplayConfig:
    """
    Options for mapping a complex spectrum to a displayable byte raster.

    Each cell becomes clamp(gain * ln(1 + |F|), level_black, level_white).
    When center is True the DC coefficient is moved to the middle first.
    """

    gain: float = DISPLAY_GAIN
    level_black: int = LEVEL_BLACK
    level_white: int = LEVEL_WHITE
    center: bool = False

    def __post_init__(self):
        if not float(self.gain) > 0.0:
            raise ValueError("Display gain must be > 0.")
        if int(self.level_black) != self.level_black or int(self.level_white) != self.level_white:
            raise ValueError("Grey-level bounds must be integers.")
        if not (LEVEL_BLACK <= self.level_black < self.level_white <= LEVEL_WHITE):
            raise ValueError(
                f"Grey-level bounds must satisfy {LEVEL_BLACK} <= black < white <= {LEVEL_WHITE}."
            )


DEFAULT_FFT_CONFIG = FFTConfig()
DEFAULT_DISPLAY_CONFIG = DisplayConfig()
