"""
netanalysis
===========

This package computes graph-theoretic summary statistics, such as the
clustering coefficient or the degree of each node, from channel by
channel connectivity data (optionally resolved in frequency and time).
The per-matrix algorithms come from the Brain Connectivity Toolbox for
Python (``bctpy``); this package decides for every call whether the
input is binary or weighted and directed or undirected, selects the
matching routine and lays out the results with one node axis removed.

The key modules include:

* ``config`` – the :class:`NetworkAnalysisConfig` data class.
* ``analysis`` – :func:`compute_metric`, the high level entry point.
* ``network`` – classification, the metric table and the dispatcher.
* ``io`` – reading input records from and writing results to
  ``.mat``/``.npz`` files.
* ``errors`` – the exceptions raised on invalid input.

See ``netanalysis.main`` for a command line wrapper.
"""

from .errors import (
    NetworkAnalysisError,
    ConfigurationError,
    UnsupportedMetricError,
    MetricNotImplementedError,
)
from .config import NetworkAnalysisConfig
from .network import MatrixClass, Metric, NetworkStat, classify, dispatch
from .analysis import compute_metric
from .io import load_record, save_stat

__all__ = [
    'NetworkAnalysisError',
    'ConfigurationError',
    'UnsupportedMetricError',
    'MetricNotImplementedError',
    'NetworkAnalysisConfig',
    'MatrixClass',
    'Metric',
    'NetworkStat',
    'classify',
    'dispatch',
    'compute_metric',
    'load_record',
    'save_stat',
]
