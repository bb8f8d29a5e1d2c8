"""Command-line interface for paritybits."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from itertools import islice
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from paritybits.bitops import format_bits
from paritybits.config import PARITY_CONFIG
from paritybits.enumerate import all_with_parity, count_with_parity
from paritybits.jobs import load_jobs_yaml, run_jobs
from paritybits.logging import get_logger, set_global_log_level
from paritybits.sampler import random_with_parity
from paritybits.seed_manager import SeedManager
from paritybits.types import Parity

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _emit_patterns(
    patterns: List[int], width: int, fmt: str, meta: Dict[str, Any]
) -> None:
    """Print patterns one per line, or as a single JSON document."""
    if fmt == "json":
        payload = dict(meta)
        payload["patterns"] = patterns
        payload["bits"] = [format_bits(p, width) for p in patterns]
        print(json.dumps(payload, indent=2))
        return
    for pattern in patterns:
        print(format_bits(pattern, width) if fmt == "bits" else pattern)


def _enumerate(
    width: int, parity: Parity, limit: Optional[int], show_all: bool, fmt: str
) -> None:
    """Print the even- or odd-popcount patterns of ``width`` bits."""
    total = count_with_parity(width, parity)
    patterns_iter = all_with_parity(width, parity)
    if not show_all:
        if limit is None:
            limit = PARITY_CONFIG.preview_limit
        patterns_iter = islice(patterns_iter, limit)
    patterns = list(patterns_iter)

    logger.info(
        f"Enumerated {len(patterns)} of {total} {parity.name.lower()} patterns "
        f"of width {width}"
    )
    meta = {"width": width, "parity": parity.name.lower(), "total": total}
    _emit_patterns(patterns, width, fmt, meta)


def _sample(
    bit_length: int,
    parity: Parity,
    count: int,
    seed: Optional[int],
    allow_zero: bool,
    fmt: str,
) -> None:
    """Print ``count`` random patterns of ``bit_length`` bits."""
    PARITY_CONFIG.check_sample_count(count)
    source = SeedManager(seed).create_random_state("sample", "cli")
    patterns = [
        random_with_parity(bit_length, parity, source, allow_zero=allow_zero)
        for _ in range(count)
    ]
    width = max([bit_length] + [p.bit_length() for p in patterns])
    meta = {"bit_length": bit_length, "parity": parity.name.lower(), "seed": seed}
    _emit_patterns(patterns, width, fmt, meta)


def _run_jobs_file(
    path: Path,
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
) -> None:
    """Run a YAML job file and export results as JSON by default.

    Args:
        path: Job file.
        results_override: Explicit results path. Defaults to
            ``<jobs_name>.results.json`` in the current directory.
        no_results: Whether to disable results file generation.
        stdout: Whether to also print results to stdout.
    """
    logger.info(f"Loading jobs from: {path}")
    start_time = perf_counter()

    data = load_jobs_yaml(path.read_text())
    results = run_jobs(data)
    json_str = json.dumps(results, indent=2)

    if not no_results:
        output = results_override or Path(f"{path.stem}.results.json")
        output.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Writing results to: {output}")
        output.write_text(json_str)
        print(f"Results written to: {output}")

    if stdout:
        print(json_str)

    logger.info(
        f"Ran {len(results['jobs'])} job(s) in "
        f"{_format_duration(perf_counter() - start_time)}"
    )


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``paritybits`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="paritybits",
        description="Enumerate and sample bit patterns by popcount parity.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{enumerate,sample,run}",
        help="Available commands",
    )

    enum_parser = subparsers.add_parser(
        "enumerate", help="List all patterns of a width with the given parity"
    )
    enum_parser.add_argument("width", type=_non_negative_int, help="Pattern width")
    enum_parser.add_argument(
        "--limit",
        "-n",
        type=_non_negative_int,
        default=None,
        help=f"Print at most N patterns (default: {PARITY_CONFIG.preview_limit})",
    )
    enum_parser.add_argument(
        "--all", action="store_true", help="Print every pattern, ignoring --limit"
    )

    sample_parser = subparsers.add_parser(
        "sample", help="Draw random patterns of an exact bit length"
    )
    sample_parser.add_argument(
        "bit_length", type=_non_negative_int, help="Significant bit length"
    )
    sample_parser.add_argument(
        "--count", "-c", type=int, default=1, help="Number of patterns to draw"
    )
    sample_parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Seed for reproducible output"
    )
    sample_parser.add_argument(
        "--allow-zero",
        action="store_true",
        help="Pass allow_zero to the even sampler",
    )

    for p in (enum_parser, sample_parser):
        p.add_argument(
            "--parity",
            "-p",
            choices=["even", "odd"],
            default="even",
            help="Required popcount parity (default: even)",
        )
        p.add_argument(
            "--format",
            "-f",
            choices=["int", "bits", "json"],
            default="int",
            help="Output format; 'bits' prints LSB-first 0/1 strings",
        )

    run_parser = subparsers.add_parser("run", help="Run a YAML job file")
    run_parser.add_argument("jobs", type=Path, help="Path to job YAML")
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to JSON file (default: <jobs_name>.results.json)",
    )
    run_parser.add_argument(
        "--no-results",
        action="store_true",
        help="Disable results file generation",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results to stdout",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        if args.command == "enumerate":
            _enumerate(
                width=args.width,
                parity=Parity.from_string(args.parity),
                limit=args.limit,
                show_all=args.all,
                fmt=args.format,
            )
        elif args.command == "sample":
            _sample(
                bit_length=args.bit_length,
                parity=Parity.from_string(args.parity),
                count=args.count,
                seed=args.seed,
                allow_zero=args.allow_zero,
                fmt=args.format,
            )
        elif args.command == "run":
            _run_jobs_file(
                path=args.jobs,
                results_override=args.results,
                no_results=args.no_results,
                stdout=args.stdout,
            )
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"ERROR: File not found: {e.filename}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
