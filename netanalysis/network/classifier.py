"""
netanalysis.network.classifier
==============================

Classification of a stack of connectivity matrices as binary or
weighted and as directed or undirected.  The result applies to the
whole stack: a single weighted slice makes the stack weighted and a
single asymmetric slice makes it directed.  The dispatcher uses the
classification to select the matching variant of a graph metric.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class MatrixClass:
    """Binary/weighted and directed/undirected nature of a matrix stack.

    Attributes
    ----------
    is_binary : bool
        True if every entry of every slice is 0 or 1.
    is_directed : bool
        True if at least one slice differs from its transpose.
    """

    is_binary: bool
    is_directed: bool

    @property
    def quadrant(self) -> str:
        """Two letter code of the graph type: ``'bd'``, ``'bu'``, ``'wd'`` or ``'wu'``."""
        return ('b' if self.is_binary else 'w') + ('d' if self.is_directed else 'u')


def as_stack(matrices: np.ndarray) -> np.ndarray:
    """View an ``N×N(×F)(×…)`` array as a rank-4 ``N×N×F×T`` stack.

    Missing trailing axes become singletons; every axis beyond the
    third is flattened into the last one.
    """
    arr = np.asarray(matrices)
    if arr.ndim < 2:
        raise ValueError("connectivity data must have at least two dimensions")
    if arr.shape[0] != arr.shape[1]:
        raise ValueError(
            f"connectivity slices must be square, got {arr.shape[0]}x{arr.shape[1]}"
        )
    if arr.size == 0:
        raise ValueError(f"connectivity data is empty, got shape {arr.shape}")
    siz = arr.shape + (1, 1)
    n_freq = siz[2]
    n_time = int(np.prod(siz[3:]))
    return arr.reshape(arr.shape[0], arr.shape[1], n_freq, n_time)


def classify(stack: np.ndarray) -> MatrixClass:
    """Classify a stack of square matrices.

    Slices are visited frequency first, time second.  Each property
    stops being tested once a slice has disproved it and the sweep
    ends as soon as both are decided, so the answer is the same as
    for an exhaustive scan.

    Parameters
    ----------
    stack : np.ndarray
        Array of shape ``(N, N)``, ``(N, N, F)`` or ``(N, N, F, T)``.

    Returns
    -------
    MatrixClass
        Stack-wide classification.
    """
    stack = as_stack(stack)
    is_binary = True
    is_directed = False
    for k in range(stack.shape[2]):
        for m in range(stack.shape[3]):
            tmp = stack[:, :, k, m]
            if is_binary and not np.isin(tmp, (0, 1)).all():
                is_binary = False
            if not is_directed and not np.array_equal(tmp, tmp.T):
                is_directed = True
            if not is_binary and is_directed:
                return MatrixClass(is_binary, is_directed)
    return MatrixClass(is_binary, is_directed)


__all__ = ['MatrixClass', 'as_stack', 'classify']
