"""
Argument parser for spamBench.

Options left unset fall back to the config file, then to the built-in
defaults.
"""

import argparse
from typing import List, Optional, Sequence


def str2bool(v):
    """Convert a string to a boolean."""
    if isinstance(v, bool):
        return v
    if v.lower() in ('yes', 'true', 't', 'y', '1'):
        return True
    elif v.lower() in ('no', 'false', 'f', 'n', '0'):
        return False
    else:
        raise argparse.ArgumentTypeError('Boolean value expected.')


def comma_separated_items(value: str) -> List[str]:
    """Parse a comma-separated string into a list."""
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI parser with the run subcommand."""
    parser = argparse.ArgumentParser(
        prog="spambench",
        description="spamBench - binary classification benchmark for the Spambase table",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    run_p = subparsers.add_parser('run', help='Split, train every registered model and report holdout metrics')

    # Data and output
    run_p.add_argument('--data', type=str, required=False, default=None,
                       help="Comma-separated data file (58 fields per row, no header)")
    run_p.add_argument('--output', type=str, required=False, default=None,
                       help="Result output directory")
    run_p.add_argument('--config', type=str, required=False, default=None,
                       help="YAML/JSON config file (overrides built-in defaults)")

    # Partitioning
    run_p.add_argument('--split_fraction', type=float, required=False, default=None,
                       help="Fraction of each class assigned to train (default 0.8)")
    run_p.add_argument('--seed', type=int, required=False, default=None,
                       help="Random seed for the split and the CV folds")

    # Cross-validation
    run_p.add_argument('--cv_folds', type=int, required=False, default=None,
                       help="Number of CV folds (default 5)")
    run_p.add_argument('--cv_repeats', type=int, required=False, default=None,
                       help="Number of CV repeats (default 1)")

    # Models
    run_p.add_argument('--models', type=comma_separated_items, required=False, default=None,
                       help="Registered models to run, comma separated (default: all)")

    # System and outputs
    run_p.add_argument('--cpu', type=int, required=False, default=None,
                       help="Parallel jobs for fold evaluation")
    run_p.add_argument('--plots', type=str2bool, required=False, default=None,
                       help="Write ROC and resample plots")
    run_p.add_argument('--save_models', type=str2bool, required=False, default=None,
                       help="Persist fitted models with joblib")
    run_p.add_argument('--verbose', action='store_true',
                       help="Print tracebacks on failure")

    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    if args.command == 'run' and not args.data and not args.config:
        parser.error("run needs --data or a --config that sets data_path")
    return args
