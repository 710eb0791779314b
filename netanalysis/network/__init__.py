"""
netanalysis.network
===================

This subpackage contains the components that turn a stack of
connectivity matrices into per-node graph metrics.  The modules
separate the classification of the input from the table of metrics
and from the dispatching loop that ties them together.

Modules
-------

classifier
    Defines :class:`MatrixClass` and :func:`classify`, which decide
    whether a stack is binary or weighted and directed or undirected.

metrics
    Defines the :class:`Metric` table, the :class:`GraphBackend`
    protocol and the handlers for the implemented metrics
    (clustering coefficient, degree).

dispatch
    Provides :func:`dispatch`, which runs a metric over every
    frequency/time slice of a connectivity array.

model
    Defines the :class:`NetworkStat` result container.
"""

from .classifier import MatrixClass, classify
from .metrics import GraphBackend, Metric, METRIC_TABLE, implemented_metrics
from .dispatch import dispatch, parse_dimord, format_dimord
from .model import NetworkStat

__all__ = [
    'MatrixClass',
    'classify',
    'GraphBackend',
    'Metric',
    'METRIC_TABLE',
    'implemented_metrics',
    'dispatch',
    'parse_dimord',
    'format_dimord',
    'NetworkStat',
]
