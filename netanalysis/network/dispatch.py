"""
netanalysis.network.dispatch
============================

Gateway between connectivity data and the graph metric routines.
:func:`dispatch` resolves the requested metric, classifies the stack
of ``chan_chan(_freq)(_time)`` matrices once, runs the metric handler
over every frequency/time slice and returns the result with one node
axis removed, together with the updated dimension order.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple, Union

import bct
import numpy as np

from .classifier import as_stack, classify
from .metrics import GraphBackend, resolve

logger = logging.getLogger(__name__)

NODE_AXES = ('chan', 'pos')


def parse_dimord(dimord: Union[str, Sequence[str]]) -> Tuple[str, ...]:
    """Split a ``'chan_chan_freq'`` style string into its tokens."""
    if isinstance(dimord, str):
        return tuple(dimord.split('_'))
    return tuple(dimord)


def format_dimord(tokens: Sequence[str]) -> str:
    """Join dimension order tokens back into a string."""
    return '_'.join(tokens)


def has_node_pair_prefix(tokens: Sequence[str]) -> bool:
    """True if the first two tokens name the same node axis twice."""
    return len(tokens) >= 2 and tokens[0] == tokens[1] and tokens[0] in NODE_AXES


def dispatch(
    data: np.ndarray,
    method: str,
    dimord: Union[str, Sequence[str]],
    backend: GraphBackend = bct,
    **options: Any,
) -> Tuple[np.ndarray, str]:
    """Compute a graph metric for every slice of a connectivity array.

    Parameters
    ----------
    data : np.ndarray
        Connectivity array of shape ``(N, N)``, ``(N, N, F)`` or
        ``(N, N, F, T)``.
    method : str
        Name of the metric, see :class:`~netanalysis.network.metrics.Metric`.
    dimord : str or sequence of str
        Dimension order of ``data``, e.g. ``'chan_chan_freq'``.
    backend : GraphBackend, optional
        Provider of the per-matrix routines.  Defaults to :mod:`bct`.
    **options
        Metric specific options, e.g. ``degree_output`` for ``'degrees'``.

    Returns
    -------
    output : np.ndarray
        Metric values with shape ``data.shape[1:]``.
    dimord : str
        Dimension order of ``output``: the input order without its
        first token.

    Raises
    ------
    UnsupportedMetricError
        If ``method`` is unknown.
    MetricNotImplementedError
        If ``method`` is known but not implemented.
    """
    metric, handler = resolve(method)
    tokens = parse_dimord(dimord)
    data = np.asarray(data)
    siz = data.shape
    stack = as_stack(data)

    matclass = classify(stack)
    logger.debug(
        "computing %s on %d slice(s) of %dx%d, graph type '%s'",
        metric.value, stack.shape[2] * stack.shape[3], siz[0], siz[1], matclass.quadrant,
    )
    output, outtokens = handler(stack, tokens, matclass, backend, **options)
    return output.reshape(siz[1:]), format_dimord(outtokens)


__all__ = [
    'NODE_AXES',
    'dispatch',
    'format_dimord',
    'has_node_pair_prefix',
    'parse_dimord',
]
