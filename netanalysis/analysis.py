"""
netanalysis.analysis
====================

High level entry point for computing graph metrics on the output of a
connectivity analysis.  :func:`compute_metric` validates the
configuration and the input record, hands the connectivity array to
:func:`~netanalysis.network.dispatch.dispatch` and wraps the result in
a :class:`~netanalysis.network.model.NetworkStat`, copying the
descriptive fields (labels, frequencies, times, sensor definitions)
over from the input.

The input record is a mapping with at least a ``dimord`` entry such as
``'chan_chan_freq'`` and the connectivity array under the name given by
``config.parameter``.  It can also be read from disk by setting
``config.inputfile``, and the result written with ``config.outputfile``.

Example
-------
>>> from netanalysis import compute_metric
>>> stat = compute_metric({'method': 'degrees', 'parameter': 'cohspctrm'}, data)
>>> stat.values.shape
(32, 40)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import numpy as np

from .config import NetworkAnalysisConfig
from .errors import ConfigurationError
from .io import load_record, save_stat
from .network.dispatch import dispatch, has_node_pair_prefix, parse_dimord
from .network.metrics import GraphBackend
from .network.model import PASSTHROUGH_FIELDS, NetworkStat

logger = logging.getLogger(__name__)


def _check_record(config: NetworkAnalysisConfig, record: Mapping[str, Any]) -> np.ndarray:
    """Validate ``record`` against ``config`` and return the connectivity array."""
    if 'dimord' not in record:
        raise ConfigurationError('dimord', "the input data has no dimord")
    tokens = parse_dimord(record['dimord'])
    if not has_node_pair_prefix(tokens):
        raise ConfigurationError(
            'dimord',
            f"the dimord of the input data should start with 'chan_chan', got '{record['dimord']}'",
        )
    if config.parameter not in record:
        raise ConfigurationError(
            'parameter', f"the input data has no field '{config.parameter}'"
        )
    data = np.asarray(record[config.parameter])
    if data.ndim > len(tokens):
        raise ConfigurationError(
            'dimord',
            f"'{record['dimord']}' has {len(tokens)} dimensions but "
            f"'{config.parameter}' has {data.ndim}",
        )
    # trailing singleton axes may have been squeezed away
    data = data.reshape(data.shape + (1,) * (len(tokens) - data.ndim))
    if data.shape[0] != data.shape[1]:
        raise ConfigurationError(
            config.parameter,
            f"the node axes differ in length ({data.shape[0]} and {data.shape[1]})",
        )
    return data


def compute_metric(
    config: Union[NetworkAnalysisConfig, Mapping[str, Any]],
    record: Optional[Mapping[str, Any]] = None,
    backend: Optional[GraphBackend] = None,
) -> NetworkStat:
    """Compute a graph metric from connectivity data.

    Parameters
    ----------
    config : NetworkAnalysisConfig or mapping
        Analysis options.  A plain mapping is converted with
        :meth:`NetworkAnalysisConfig.from_mapping`.
    record : mapping, optional
        Connectivity data.  If omitted, it is read from
        ``config.inputfile``.
    backend : GraphBackend, optional
        Graph routines to use instead of the Brain Connectivity Toolbox.

    Returns
    -------
    NetworkStat
        The metric values and the fields copied from ``record``.

    Raises
    ------
    ConfigurationError
        If the configuration or the record is invalid.
    UnsupportedMetricError
        If the metric is unknown.
    MetricNotImplementedError
        If the metric is known but not implemented.
    """
    if not isinstance(config, NetworkAnalysisConfig):
        config = NetworkAnalysisConfig.from_mapping(config)
    config.validate()

    if record is None:
        if not config.inputfile:
            raise ConfigurationError(
                'inputfile', "either input data or an inputfile must be given"
            )
        logger.info("reading input data from %s", config.inputfile)
        record = load_record(config.inputfile)

    data = _check_record(config, record)
    options: Dict[str, Any] = {}
    if backend is not None:
        options['backend'] = backend
    if config.method == 'degrees':
        options['degree_output'] = config.degree_output
    values, dimord = dispatch(data, config.method, record['dimord'], **options)

    cfg = config.to_dict()
    if 'cfg' in record:
        cfg['previous'] = record['cfg']
    stat = NetworkStat(metric=config.method, values=values, dimord=dimord, cfg=cfg)
    for name in PASSTHROUGH_FIELDS:
        if name in record:
            setattr(stat, name, record[name])

    if config.outputfile:
        logger.info("writing %s to %s", config.method, config.outputfile)
        save_stat(stat, config.outputfile)
    return stat


__all__ = ['compute_metric']
