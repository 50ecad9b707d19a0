"""Exceptions raised by the matrix calculator."""


class FileError(Exception):
    """Raised when data read for the calculator is invalid or unreadable."""


class InputError(Exception):
    """Raised when user input cannot be interpreted."""