"""Exceptions raised by the board and search API."""


class SudokuError(Exception):
    """Base class for all squaredoku errors."""


class InvalidArgumentError(SudokuError, ValueError):
    """A field, number, block or matrix argument is out of range."""


class UnsupportedVariantError(SudokuError, NotImplementedError):
    """The requested board type is declared but not implemented."""
