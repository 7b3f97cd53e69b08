from .colorspace import Colorspace
from .format_type import FormatType

__all__ = ["Colorspace", "FormatType"]
