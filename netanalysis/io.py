"""Helpers for reading connectivity data from disk and saving results.

Records are exchanged as MATLAB ``.mat`` files, which hold a single
structure variable as written by FieldTrip, or as NumPy ``.npz``
archives with one entry per field.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

import numpy as np
from scipy import io as sio

from .network.model import NetworkStat

SUFFIXES = ('.mat', '.npz')


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUFFIXES:
        raise ValueError(f"unsupported file type '{path.suffix}', expected .mat or .npz")
    return suffix


def _to_mat(value: Any) -> Any:
    """Prepare ``value`` for :func:`scipy.io.savemat`.

    ``None`` entries are dropped from dictionaries and sequences of
    strings become cell arrays so that labels keep their lengths.
    """
    if isinstance(value, Mapping):
        return {k: _to_mat(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        arr = np.empty(len(value), dtype=object)
        arr[:] = list(value)
        return arr
    return value


def load_record(path: str | Path) -> Dict[str, Any]:
    """Load a data record from ``path``.

    Parameters
    ----------
    path : str or Path
        A ``.mat`` file containing exactly one structure variable, or
        a ``.npz`` archive.

    Returns
    -------
    dict
        Field name to value mapping.
    """
    inp = Path(path)
    suffix = _check_suffix(inp)
    if not inp.exists():
        raise FileNotFoundError(f"No input file found at {path}.")
    if suffix == '.mat':
        contents = sio.loadmat(inp, simplify_cells=True)
        variables = {k: v for k, v in contents.items() if not k.startswith('__')}
        if len(variables) != 1:
            raise ValueError(
                f"{path} should contain a single variable, found {len(variables)}"
            )
        (record,) = variables.values()
        if not isinstance(record, dict):
            raise ValueError(f"the variable in {path} is not a structure")
        return record
    record = {}
    with np.load(inp, allow_pickle=True) as data:
        for key in data.files:
            value = data[key]
            record[key] = value.item() if value.ndim == 0 else value
    return record


def save_stat(stat: NetworkStat, path: str | Path, varname: str = 'stat') -> None:
    """Save ``stat`` to ``path``.

    Parameters
    ----------
    stat : NetworkStat
        Result of :func:`netanalysis.analysis.compute_metric`.
    path : str or Path
        Destination ``.mat`` or ``.npz`` file.  Parent directories are
        created if necessary.
    varname : str, optional
        Name of the structure variable in a ``.mat`` file.
    """
    out = Path(path)
    suffix = _check_suffix(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    if suffix == '.mat':
        sio.savemat(out, {varname: _to_mat(stat.as_dict())})
    else:
        # a file object stops savez from appending another suffix
        with open(out, 'wb') as fh:
            np.savez(fh, **stat.as_dict())


__all__ = ['load_record', 'save_stat']
