"""
netanalysis.network.model
=========================

Result container for network analysis.  :class:`NetworkStat` holds
the values of one graph metric along with the descriptive fields
copied from the input record, and can be flattened into the
FieldTrip-style dictionary keyed by the metric name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

PASSTHROUGH_FIELDS = ('label', 'freq', 'time', 'grad', 'elec', 'dof')


@dataclass
class NetworkStat:
    """Outcome of a network analysis.

    Parameters
    ----------
    metric : str
        Canonical name of the computed metric (e.g. ``'degrees'``).
    values : np.ndarray
        Metric values, one per node and frequency/time slice.
    dimord : str
        Dimension order of ``values``, e.g. ``'chan_freq'``.
    label, freq, time, grad, elec, dof : optional
        Copied verbatim from the input record when present there and
        left as ``None`` otherwise.
    cfg : Dict[str, Any]
        Configuration used to compute the result.  If the input record
        carried its own ``cfg``, it is kept under ``'previous'``.
    """

    metric: str
    values: np.ndarray
    dimord: str
    label: Optional[List[str]] = None
    freq: Optional[Any] = None
    time: Optional[Any] = None
    grad: Optional[Any] = None
    elec: Optional[Any] = None
    dof: Optional[Any] = None
    cfg: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        """Return the result as a dictionary keyed by the metric name.

        Optional fields that are ``None`` are left out.
        """
        out: Dict[str, Any] = {self.metric: self.values, 'dimord': self.dimord}
        for name in PASSTHROUGH_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        if self.cfg:
            out['cfg'] = self.cfg
        return out


__all__ = ['NetworkStat', 'PASSTHROUGH_FIELDS']
