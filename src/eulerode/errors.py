"""
Exception taxonomy for eulerode.

Every failure is fatal to a run. The exception message is the text shown
to the user; the command line prints it and exits with a failure status.
"""


class EulerError(Exception):
    """Base class for all eulerode errors."""


class InvalidInputError(EulerError, OSError):
    """The input stream could not be read (closed, broken or undecodable)."""


class InvalidDataError(EulerError, ValueError):
    """Input was read but does not parse, or violates a domain constraint."""
