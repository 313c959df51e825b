"""CLI entry point: permute a fixed input and write an evaluation report.

Usage:
    python scripts/run_evaluation.py                          # evaluate Tip5, write report
    python scripts/run_evaluation.py --trials 8 --no-sbox     # quick run
    python scripts/run_evaluation.py --input 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0 0

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from pydantic import ValidationError

from tip5lab.config import load_settings
from tip5lab.evaluation import evaluate_permutation
from tip5lab.permutation import STATE_SIZE, TIP5_SPEC, permute
from tip5lab.utils.repro import make_run_dir, set_global_seed, write_json


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def main() -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Tip5 permutation evaluation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--input", nargs=STATE_SIZE, type=int, default=None, metavar="X",
        help=f"Permute these {STATE_SIZE} field elements and print the result",
    )
    parser.add_argument(
        "--trials", type=int, default=settings.diffusion_trials,
        help=f"Diffusion trials per input position (default: {settings.diffusion_trials})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Random seed (default: {settings.global_seed})",
    )
    parser.add_argument(
        "--output-dir", type=str, default=settings.runs_dir,
        help=f"Output directory (default: {settings.runs_dir})",
    )
    parser.add_argument(
        "--no-sbox", action="store_true",
        help="Skip lookup-table analysis",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.input is not None:
        try:
            output = permute(args.input)
        except ValueError as exc:
            print(f"Invalid input: {exc}", file=sys.stderr)
            sys.exit(2)
        print(" ".join(str(x) for x in output))
        return

    set_global_seed(args.seed)
    try:
        cfg = settings.with_overrides(
            diffusion_trials=args.trials,
            global_seed=args.seed,
            run_sbox_analysis=settings.run_sbox_analysis and not args.no_sbox,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    report = evaluate_permutation(TIP5_SPEC, settings=cfg, progress_callback=_cli_progress)

    paths = make_run_dir(args.output_dir, TIP5_SPEC.name)
    write_json(paths.report_json, report.to_dict())
    write_json(paths.vectors_json, {k: [str(x) for x in v] for k, v in report.vectors.items()})

    print(report.to_summary())
    print(f"\nReport written to {paths.report_json}")


if __name__ == "__main__":
    main()
