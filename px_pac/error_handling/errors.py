"""
Exception types raised while resolving proxies from a PAC script.
"""


class PacError(Exception):
    """Base class for PAC resolution errors."""


class CallerError(PacError, ValueError):
    """Invalid input passed to the selector, such as a missing URI."""


class EngineBindError(PacError):
    """No script engine could be bound to the PAC script."""


class EvaluationError(PacError):
    """FindProxyForURL failed or returned something unusable."""


class FormatError(EvaluationError):
    """A proxy entry in the PAC result could not be parsed."""
