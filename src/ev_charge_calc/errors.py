"""Domain error raised by every calculation on a rejected input."""


class InvalidInput(ValueError):
    """An input field is NaN, infinite, or outside its allowed bounds.

    The message names the field/rule that failed.  Raised at the first
    violated precondition, before any arithmetic.
    """
