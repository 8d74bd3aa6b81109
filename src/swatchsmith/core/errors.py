"""
Error types for swatch generation, color parsing, and swatchspec loading.
"""


class SwatchError(Exception):
    """Base exception for all swatchsmith errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(SwatchError):
    """
    Raised when the input color is not a usable string.

    Examples:
    - Non-string input (None, numbers, tuples)
    - Empty or whitespace-only string
    """

    pass


class InvalidOptions(SwatchError):
    """
    Raised when swatch options violate a constraint.

    Examples:
    - min_lightness >= max_lightness
    - Lightness bounds outside [0, 1]
    - swatch_steps other than 11 or 21
    - Unknown variant or scale
    """

    pass


class UnparseableColor(SwatchError):
    """
    Raised when a color string cannot be interpreted.

    Examples:
    - Malformed hex literal
    - Unknown color name
    - Unsupported function notation
    """

    pass


class UnsupportedFormat(SwatchError):
    """Raised when a color cannot be serialized to the requested output format."""

    pass


class SwatchSpecError(SwatchError):
    """Error loading or validating a swatchspec.yaml file."""

    pass
