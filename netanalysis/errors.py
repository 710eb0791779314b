"""
netanalysis.errors
==================

Exceptions raised by the network analysis components.  All of them
derive from :class:`NetworkAnalysisError` so that callers can catch
every failure of a call in one place, while the concrete classes also
inherit from the matching builtin (``ValueError`` or
``NotImplementedError``) for code that only knows about those.
"""

from __future__ import annotations


class NetworkAnalysisError(Exception):
    """Base class for all errors raised by :mod:`netanalysis`."""


class ConfigurationError(NetworkAnalysisError, ValueError):
    """Raised when a configuration or input record is invalid.

    Parameters
    ----------
    field : str
        Name of the configuration option or record field at fault.
    message : str
        Human readable description of the problem.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class UnsupportedMetricError(NetworkAnalysisError, ValueError):
    """Raised when a metric name is not known at all."""

    def __init__(self, method: str) -> None:
        super().__init__(f"unsupported connectivity metric '{method}' requested")
        self.method = method


class MetricNotImplementedError(NetworkAnalysisError, NotImplementedError):
    """Raised for a known metric that has no routine wired up yet."""

    def __init__(self, method: str) -> None:
        super().__init__(f"connectivity metric '{method}' is not implemented")
        self.method = method


__all__ = [
    'NetworkAnalysisError',
    'ConfigurationError',
    'UnsupportedMetricError',
    'MetricNotImplementedError',
]
