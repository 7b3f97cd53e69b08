# No dependencies
from enum import Enum


class Colorspace(str, Enum):
    """Tag telling how the RGB channels of a color are to be read.

    ``LINEAR`` channels are proportional to light intensity, ``ENCODED``
    channels have gone through the sRGB transfer curve (the values found in
    8-bit images and hex codes).
    """
    LINEAR = "linear"
    ENCODED = "encoded"

    @property
    def other(self) -> "Colorspace":
        return Colorspace.ENCODED if self is Colorspace.LINEAR else Colorspace.LINEAR
