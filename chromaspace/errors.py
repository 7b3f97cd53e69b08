class ColorspaceMismatchError(TypeError):
    """A color was handed to an operation defined for the other colorspace."""


class InvalidHexError(ValueError):
    """A string could not be read as a 3, 4, 6 or 8 digit hex color code."""


class PaletteError(ValueError):
    """Base class for palette parsing errors."""


class ColorWithoutSetError(PaletteError):
    def __init__(self, name: str, line_number: int | None = None):
        self.name = name
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Color `{name}` declared without any color set{where}")
