"""
main
====

Command line interface for computing a graph metric from connectivity
data stored on disk.  The input file must hold a record with a
``chan_chan(_freq)(_time)`` array, as produced by a connectivity
analysis, saved as a ``.mat`` or ``.npz`` file.

Example
-------
python -m netanalysis.main coh.mat --method degrees --parameter cohspctrm --output deg.mat

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .analysis import compute_metric
from .config import DEGREE_OUTPUTS, NetworkAnalysisConfig
from .errors import NetworkAnalysisError
from .network.metrics import implemented_metrics


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute graph metrics from connectivity data")
    parser.add_argument('input', type=str, help='Input .mat or .npz file')
    parser.add_argument(
        '--method', type=str, required=True,
        help=f"Graph metric ({', '.join(implemented_metrics())})")
    parser.add_argument(
        '--parameter', type=str, required=True,
        help='Field holding the connectivity array (e.g. cohspctrm)')
    parser.add_argument('--output', type=str, default=None, help='Output .mat or .npz file')
    parser.add_argument(
        '--degree-output', type=str, choices=DEGREE_OUTPUTS, default='total',
        help='Degree kept for directed graphs')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(args)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )
    cfg = NetworkAnalysisConfig(
        method=args.method,
        parameter=args.parameter,
        inputfile=args.input,
        outputfile=args.output,
        degree_output=args.degree_output,
    )
    try:
        stat = compute_metric(cfg)
    except (NetworkAnalysisError, FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"error: {exc}") from exc
    if args.output is None:
        print(f"{stat.metric}: shape {stat.values.shape}, dimord {stat.dimord}")


if __name__ == '__main__':
    main()
