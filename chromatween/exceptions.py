class ChromatweenWarning(UserWarning):
    """Base category for diagnostics issued by chromatween."""


class UnrecognizedColorInputWarning(ChromatweenWarning):
    """A set() call whose arguments match no known color shape; the color is left as is."""


class MalformedColorWarning(ChromatweenWarning):
    """Hex or color-name input that could not be parsed; affected channels become NaN."""
