"""
Exceptions raised by circlelayout
"""


class ConfigurationError(ValueError):
    """
    Invalid layout configuration

    Raised synchronously when a parameter assignment is rejected
    (unknown radius mode or direction, negative fixed radius, a center
    element that is not a child, ...). The rejected value never reaches
    the layout state.
    """
