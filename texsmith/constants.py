"""
Global constants for texsmith.

Numeric limits, gain constants and defaults shared by the seeded stream,
the noise field generator and the compositor. Values here are part of the
reproducibility contract: changing any of them changes generated bytes.

Author: B.G.
"""

# Output raster limits (pixels)
MIN_DIMENSION = 32
MAX_DIMENSION = 4096
MIN_SCALE = 1

# Seeded stream (mulberry32 Weyl increment and seed handling)
UINT32_MASK = 0xFFFFFFFF
WEYL_INCREMENT = 0x6D2B79F5
ZERO_SEED_REPLACEMENT = 0x9E3779B9
TWO_POW_32 = 4294967296.0

# Compositing
CONTRAST_GAIN = 3.0
NEUTRAL_LEVEL = 0.5
ALPHA_FLOOR = 0.45

# Speckle: speck when draw > SPECKLE_BASE + SPECKLE_SPAN * (1 - intensity)
SPECKLE_BASE = 0.87
SPECKLE_SPAN = 0.08
SPECKLE_HIGH = 0.97
SPECKLE_LOW = 0.03

# Dust: speck when draw < DUST_DENSITY * intensity
DUST_DENSITY = 0.04
DUST_MIN_BRIGHTNESS = 0.6
DUST_BRIGHTNESS_SPAN = 0.4

# Defaults used when an option is omitted
DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512
DEFAULT_VARIANT = "film"
DEFAULT_INTENSITY = 0.7
DEFAULT_ALPHA = 0.25
DEFAULT_CONTRAST = 0.1
DEFAULT_SCALE = 2
DEFAULT_TINT = "#ffffff"
DEFAULT_TINT_STRENGTH = 0.0

# Samples per band when generating and compositing large textures
BAND_SAMPLES = 1 << 20
