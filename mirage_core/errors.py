from __future__ import annotations


class MirageError(Exception):
    """Base class for errors raised by mirage_core."""


class ParseError(MirageError, ValueError):
    pass


class PixelFormatError(MirageError, ValueError):
    pass


class BoundsError(MirageError, IndexError):
    pass


class UnsupportedOperationError(MirageError, NotImplementedError):
    pass
