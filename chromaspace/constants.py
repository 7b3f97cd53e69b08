"""Numeric constants shared across chromaspace.

These are read-only tables; nothing in the package mutates them.
"""

# sRGB transfer curve (IEC 61966-2-1)
SRGB_GAMMA = 2.4
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.0 + SRGB_OFFSET
SRGB_ENCODED_CUTOFF = 0.04045     # encoded values at or below are on the linear toe
SRGB_LINEAR_CUTOFF = 0.0031308    # linear values at or below are on the linear toe

# ITU-R BT.709 relative luminance weights, applied to linear channels
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Shade classification. Bins are inclusive at their lower edge:
#   y < DARK  -> dark,  DARK <= y < LIGHT -> mid,  y >= LIGHT -> light
DARK_LUMINANCE_THRESHOLD = 0.045
LIGHT_LUMINANCE_THRESHOLD = 0.40

# Base color shade borders
HUE_MARGIN = 60.0 * 0.75
BLACK_CUTOFF_LUMINANCE = 0.005
GREYSCALE_SATURATION = 0.05
WHITE_SATURATION = 0.35
WHITE_LUMINANCE = LIGHT_LUMINANCE_THRESHOLD
GREY_SATURATION = 0.45
GREY_LUMINANCE_MAX = 0.80
GREY_LUMINANCE_MIN = 0.03
BLACK_LUMINANCE = DARK_LUMINANCE_THRESHOLD

# Comparison tolerance used for float channel equality checks in tests and docs
DEFAULT_TOLERANCE = 1e-6
