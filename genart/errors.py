"""Error kinds raised by the core."""


class InvalidArgumentError(ValueError):
    """An argument is outside an operation's documented domain.

    Raised for an empty ``pick`` sequence, inverted ranges, non-positive
    octave counts, non-positive palette sizes and malformed colors.
    """
