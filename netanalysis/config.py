"""
netanalysis.config
==================

This module defines the configuration data class for network
analysis.  :class:`NetworkAnalysisConfig` names the graph metric to
compute, the field of the input record holding the connectivity
array and, optionally, files to read the input from and write the
result to.  It includes basic validation so that a bad configuration
fails before any computation starts.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigurationError

DEGREE_OUTPUTS = ('total', 'in', 'out')


@dataclass
class NetworkAnalysisConfig:
    """Configuration options for network analysis.

    Attributes
    ----------
    method : str | None
        Name of the graph metric, e.g. ``'clustering_coef'`` or
        ``'degrees'``.  Required.
    parameter : str | None
        Name of the field in the input record that holds the
        ``chan_chan(_freq)(_time)`` connectivity array (for example
        ``'cohspctrm'``).  Required.
    inputfile : str | None, optional
        If provided and no record is passed explicitly, the input
        record is read from this ``.mat`` or ``.npz`` file.
    outputfile : str | None, optional
        If provided, the resulting statistic is written to this file.
    degree_output : str, optional
        Which of the directed degree outputs to keep: ``'total'``
        (default), ``'in'`` or ``'out'``.  Only used by ``'degrees'``.
    """

    method: Optional[str] = None
    parameter: Optional[str] = None
    inputfile: Optional[str] = None
    outputfile: Optional[str] = None
    degree_output: str = 'total'

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'NetworkAnalysisConfig':
        """Build a configuration from a plain dictionary of options."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(unknown[0], "unknown configuration option")
        return cls(**dict(options))

    def validate(self) -> None:
        """Validate the configuration.

        Raises
        ------
        ConfigurationError
            If ``method`` or ``parameter`` is missing or empty, or if
            ``degree_output`` is not one of the supported values.
        """
        if not self.method:
            raise ConfigurationError('method', "a graph metric must be specified")
        if not self.parameter:
            raise ConfigurationError(
                'parameter',
                "the field holding the connectivity data must be specified",
            )
        if self.degree_output not in DEGREE_OUTPUTS:
            raise ConfigurationError(
                'degree_output',
                f"expected one of {', '.join(DEGREE_OUTPUTS)}, got '{self.degree_output}'",
            )

    def to_dict(self) -> Dict[str, Any]:
        """Return the options as a dictionary, for provenance."""
        return asdict(self)


__all__ = ['NetworkAnalysisConfig', 'DEGREE_OUTPUTS']
