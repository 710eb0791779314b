"""Tests for :mod:`netanalysis.network.dispatch` and the metric table."""

from __future__ import annotations

import logging
from typing import List

import bct
import numpy as np
import pytest

from netanalysis.errors import (
    ConfigurationError,
    MetricNotImplementedError,
    UnsupportedMetricError,
)
from netanalysis.network.dispatch import dispatch, format_dimord, parse_dimord
from netanalysis.network.metrics import METRIC_TABLE, Metric, implemented_metrics


class RecordingBackend:
    """Backend stand-in that records which routine handled each slice."""

    CODES = {'bd': 1.0, 'bu': 2.0, 'wd': 3.0, 'wu': 4.0}

    def __init__(self) -> None:
        self.calls: List[str] = []

    def _clustering(self, quadrant: str, mat: np.ndarray) -> np.ndarray:
        self.calls.append(f'clustering_coef_{quadrant}')
        return np.full(mat.shape[0], self.CODES[quadrant])

    def clustering_coef_bd(self, A):
        return self._clustering('bd', A)

    def clustering_coef_bu(self, G):
        return self._clustering('bu', G)

    def clustering_coef_wd(self, W):
        return self._clustering('wd', W)

    def clustering_coef_wu(self, W):
        return self._clustering('wu', W)

    def degrees_dir(self, CIJ):
        self.calls.append('degrees_dir')
        n = CIJ.shape[0]
        return np.full(n, 10.0), np.full(n, 20.0), np.full(n, 30.0)

    def degrees_und(self, CIJ):
        self.calls.append('degrees_und')
        return np.full(CIJ.shape[0], 5.0)


def _stack(quadrant: str, n: int = 4, n_freq: int = 2, n_time: int = 3) -> np.ndarray:
    rng = np.random.RandomState(42)
    if quadrant[0] == 'b':
        stack = (rng.rand(n, n, n_freq, n_time) > 0.5).astype(float)
    else:
        stack = rng.rand(n, n, n_freq, n_time) + 0.1
    if quadrant[1] == 'u':
        stack = (stack + stack.transpose(1, 0, 2, 3)) / 2
        if quadrant[0] == 'b':
            stack = np.ceil(stack)
    else:
        stack[0, 1, :, :] = 1.0
        stack[1, 0, :, :] = 0.0
    for k in range(n_freq):
        for m in range(n_time):
            np.fill_diagonal(stack[:, :, k, m], 0.0)
    return stack


@pytest.mark.parametrize("quadrant", ["bd", "bu", "wd", "wu"])
def test_quadrant_selects_matching_routine(quadrant):
    backend = RecordingBackend()
    stack = _stack(quadrant)
    output, dimord = dispatch(stack, 'clustering_coef', 'chan_chan_freq_time', backend=backend)
    assert backend.calls == [f'clustering_coef_{quadrant}'] * 6
    assert np.all(output == RecordingBackend.CODES[quadrant])
    assert dimord == 'chan_freq_time'


@pytest.mark.parametrize("shape,dimord,expected_dimord", [
    ((4, 4), 'chan_chan', 'chan'),
    ((4, 4, 3), 'chan_chan_freq', 'chan_freq'),
    ((4, 4, 3, 5), 'chan_chan_freq_time', 'chan_freq_time'),
    ((4, 4, 1, 5), 'chan_chan_freq_time', 'chan_freq_time'),
])
def test_output_drops_one_node_axis(shape, dimord, expected_dimord):
    data = np.zeros(shape)
    output, outdimord = dispatch(data, 'degrees', dimord, backend=RecordingBackend())
    assert output.shape == shape[1:]
    assert outdimord == expected_dimord
    assert len(parse_dimord(outdimord)) == len(parse_dimord(dimord)) - 1


def test_dimord_may_be_given_as_tokens():
    _, outdimord = dispatch(np.zeros((3, 3, 2)), 'degrees', ['chan', 'chan', 'freq'],
                            backend=RecordingBackend())
    assert outdimord == 'chan_freq'


def test_directed_degrees_keep_selected_output():
    stack = _stack('bd', n_freq=1, n_time=1)
    backend = RecordingBackend()
    total, _ = dispatch(stack, 'degrees', 'chan_chan_freq_time', backend=backend)
    indeg, _ = dispatch(stack, 'degrees', 'chan_chan_freq_time', backend=backend,
                        degree_output='in')
    outdeg, _ = dispatch(stack, 'degrees', 'chan_chan_freq_time', backend=backend,
                         degree_output='out')
    assert np.all(total == 30.0)
    assert np.all(indeg == 10.0)
    assert np.all(outdeg == 20.0)
    assert backend.calls == ['degrees_dir'] * 3


def test_weighted_degrees_warn_once(caplog):
    stack = _stack('wu', n_freq=3, n_time=2)
    with caplog.at_level(logging.WARNING, logger='netanalysis'):
        dispatch(stack, 'degrees', 'chan_chan_freq_time', backend=RecordingBackend())
    messages = [r.getMessage() for r in caplog.records if 'weights are not taken' in r.getMessage()]
    assert len(messages) == 1


def test_binary_degrees_do_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger='netanalysis'):
        dispatch(_stack('bu'), 'degrees', 'chan_chan_freq_time', backend=RecordingBackend())
    assert not caplog.records


def test_unsupported_metric_names_the_method():
    backend = RecordingBackend()
    with pytest.raises(UnsupportedMetricError) as excinfo:
        dispatch(np.zeros((3, 3)), 'not_a_real_metric', 'chan_chan', backend=backend)
    assert excinfo.value.method == 'not_a_real_metric'
    assert 'not_a_real_metric' in str(excinfo.value)
    assert backend.calls == []


@pytest.mark.parametrize("name", [m.value for m, h in METRIC_TABLE.items() if h is None])
def test_placeholder_metrics_are_not_implemented(name):
    backend = RecordingBackend()
    with pytest.raises(MetricNotImplementedError) as excinfo:
        dispatch(np.zeros((3, 3)), name, 'chan_chan', backend=backend)
    assert excinfo.value.method == name
    assert isinstance(excinfo.value, NotImplementedError)
    assert backend.calls == []


def test_metric_table_covers_every_metric():
    assert set(METRIC_TABLE) == set(Metric)
    assert sorted(implemented_metrics()) == ['clustering_coef', 'degrees']


def test_unknown_degree_output_is_a_configuration_error():
    with pytest.raises(ConfigurationError) as excinfo:
        dispatch(_stack('bd'), 'degrees', 'chan_chan_freq_time',
                 backend=RecordingBackend(), degree_output='both')
    assert excinfo.value.field == 'degree_output'


def test_empty_frequency_axis_is_rejected():
    with pytest.raises(ValueError):
        dispatch(np.zeros((4, 4, 0)), 'degrees', 'chan_chan_freq', backend=RecordingBackend())


def test_dimord_helpers():
    assert parse_dimord('chan_chan_freq') == ('chan', 'chan', 'freq')
    assert format_dimord(('chan', 'freq')) == 'chan_freq'


# -- with the Brain Connectivity Toolbox ---------------------------------

def test_undirected_binary_degrees():
    adj = np.array([[0, 1, 1],
                    [1, 0, 0],
                    [1, 0, 0]], dtype=float)
    output, dimord = dispatch(adj, 'degrees', 'chan_chan')
    assert np.array_equal(output, [2, 1, 1])
    assert np.array_equal(output, adj.sum(axis=1))
    assert dimord == 'chan'


def test_directed_binary_degrees_total():
    adj = np.array([[0, 1, 1],
                    [1, 0, 0],
                    [0, 0, 0]], dtype=float)
    output, _ = dispatch(adj, 'degrees', 'chan_chan')
    # in-degree [1, 1, 1] plus out-degree [2, 1, 0]
    assert np.array_equal(output, [3, 2, 1])
    indeg, _ = dispatch(adj, 'degrees', 'chan_chan', degree_output='in')
    assert np.array_equal(indeg, [1, 1, 1])


def test_weighted_undirected_clustering_per_frequency():
    rng = np.random.RandomState(1)
    data = rng.rand(4, 4, 2)
    data = (data + data.transpose(1, 0, 2)) / 2
    for k in range(2):
        np.fill_diagonal(data[:, :, k], 0.0)
    output, dimord = dispatch(data, 'clustering_coef', 'chan_chan_freq')
    assert output.shape == (4, 2)
    assert dimord == 'chan_freq'
    for k in range(2):
        assert np.allclose(output[:, k], bct.clustering_coef_wu(data[:, :, k]))
