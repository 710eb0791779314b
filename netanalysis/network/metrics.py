"""
netanalysis.network.metrics
===========================

The table of graph metrics known to the dispatcher.  Every entry of
:class:`Metric` maps either to a handler that computes the metric for
a whole connectivity stack, or to ``None`` for metrics that are
recognised but not implemented yet.  Handlers delegate the per-matrix
computation to a :class:`GraphBackend`, by default the ``bct`` module
of the Brain Connectivity Toolbox for Python (bctpy).

A handler receives the rank-4 ``N×N×F×T`` stack, the dimension order
tokens, the stack-wide :class:`~netanalysis.network.classifier.MatrixClass`
and the backend, and returns the output array together with its
dimension order tokens.  Each handler decides for itself what shape
its output has.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, Tuple

import numpy as np

from ..errors import ConfigurationError, MetricNotImplementedError, UnsupportedMetricError
from .classifier import MatrixClass

logger = logging.getLogger(__name__)

Dimord = Tuple[str, ...]
Handler = Callable[..., Tuple[np.ndarray, Dimord]]


class GraphBackend(Protocol):
    """Per-matrix routines the implemented metrics rely on."""

    def clustering_coef_bd(self, A: np.ndarray) -> np.ndarray: ...

    def clustering_coef_bu(self, G: np.ndarray) -> np.ndarray: ...

    def clustering_coef_wd(self, W: np.ndarray) -> np.ndarray: ...

    def clustering_coef_wu(self, W: np.ndarray) -> np.ndarray: ...

    def degrees_dir(self, CIJ: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]: ...

    def degrees_und(self, CIJ: np.ndarray) -> np.ndarray: ...


class Metric(str, Enum):
    """Graph metrics recognised by the dispatcher."""

    ASSORTATIVITY = 'assortativity'
    BETWEENNESS = 'betweenness'
    BREADTHDIST = 'breadthdist'
    BREADTH = 'breadth'
    CHARPATH = 'charpath'
    CLUSTERING_COEF = 'clustering_coef'
    DEGREES = 'degrees'
    DENSITY = 'density'
    DISTANCE = 'distance'
    EDGE_BETWEENNESS = 'edge_betweenness'
    EFFICIENCY = 'efficiency'
    MODULARITY = 'modularity'
    PARTICIPATION_COEF = 'participation_coef'

    @classmethod
    def lookup(cls, name: str) -> 'Metric':
        """Return the member called ``name`` or raise :class:`UnsupportedMetricError`."""
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedMetricError(name) from None


# -- per-node metrics ------------------------------------------------
def _per_node(
    stack: np.ndarray,
    dimord: Dimord,
    routine: Callable[[np.ndarray], np.ndarray],
) -> Tuple[np.ndarray, Dimord]:
    """Apply ``routine`` to every slice and collect one vector per slice."""
    output: Optional[np.ndarray] = None
    outdimord = dimord
    for k in range(stack.shape[2]):
        for m in range(stack.shape[3]):
            if output is None:
                # the metric is defined per node and not per node pair,
                # so one of the node axes goes away
                output = np.zeros(stack.shape[1:], dtype=float)
                outdimord = dimord[1:]
            output[:, k, m] = routine(stack[:, :, k, m])
    return output, outdimord


def clustering_coef(
    stack: np.ndarray,
    dimord: Dimord,
    matclass: MatrixClass,
    backend: GraphBackend,
    **options: Any,
) -> Tuple[np.ndarray, Dimord]:
    """Clustering coefficient of every node in every slice."""
    routines = {
        'bd': backend.clustering_coef_bd,
        'bu': backend.clustering_coef_bu,
        'wd': backend.clustering_coef_wd,
        'wu': backend.clustering_coef_wu,
    }
    return _per_node(stack, dimord, routines[matclass.quadrant])


_DEGREE_SLOTS = {'in': 0, 'out': 1, 'total': 2}


def degrees(
    stack: np.ndarray,
    dimord: Dimord,
    matclass: MatrixClass,
    backend: GraphBackend,
    degree_output: str = 'total',
    **options: Any,
) -> Tuple[np.ndarray, Dimord]:
    """Node degree in every slice.

    Weighted input is binarised by the backend routine.  For directed
    graphs ``degree_output`` selects which of in-degree, out-degree
    and total degree is returned.
    """
    if degree_output not in _DEGREE_SLOTS:
        raise ConfigurationError(
            'degree_output',
            f"expected one of 'in', 'out' or 'total', got '{degree_output}'",
        )
    if not matclass.is_binary:
        logger.warning(
            'weights are not taken into account and graph is converted to binary values'
        )
    if matclass.is_directed:
        slot = _DEGREE_SLOTS[degree_output]

        def routine(mat: np.ndarray) -> np.ndarray:
            return backend.degrees_dir(mat)[slot]
    else:
        routine = backend.degrees_und
    return _per_node(stack, dimord, routine)


METRIC_TABLE: Dict[Metric, Optional[Handler]] = {
    Metric.ASSORTATIVITY: None,
    Metric.BETWEENNESS: None,
    Metric.BREADTHDIST: None,
    Metric.BREADTH: None,
    Metric.CHARPATH: None,
    Metric.CLUSTERING_COEF: clustering_coef,
    Metric.DEGREES: degrees,
    Metric.DENSITY: None,
    Metric.DISTANCE: None,
    Metric.EDGE_BETWEENNESS: None,
    Metric.EFFICIENCY: None,
    Metric.MODULARITY: None,
    Metric.PARTICIPATION_COEF: None,
}


def resolve(method: str) -> Tuple[Metric, Handler]:
    """Look up the handler for ``method``.

    Raises
    ------
    UnsupportedMetricError
        If ``method`` is not in the table.
    MetricNotImplementedError
        If ``method`` is in the table but has no handler yet.
    """
    metric = Metric.lookup(method)
    handler = METRIC_TABLE[metric]
    if handler is None:
        raise MetricNotImplementedError(metric.value)
    return metric, handler


def implemented_metrics() -> Sequence[str]:
    """Names of the metrics that can currently be computed."""
    return [m.value for m, h in METRIC_TABLE.items() if h is not None]


__all__ = [
    'GraphBackend',
    'Metric',
    'METRIC_TABLE',
    'clustering_coef',
    'degrees',
    'resolve',
    'implemented_metrics',
]
