#!/usr/bin/env python3
"""
spamBench command line entry point.

Supported commands:
- run: split the data, train every registered model and report holdout metrics
"""

import sys
import os
import traceback
import warnings
from datetime import datetime
from typing import Optional, Sequence

from sklearn.exceptions import ConvergenceWarning

from spamBench.cli.argument_parser import parse_arguments
from spamBench.core.exceptions import SpamBenchError
from spamBench.utils.logger import get_logger

warnings.filterwarnings("ignore", category=ConvergenceWarning)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point; dispatches to the command handler and maps errors to exit codes."""
    args = parse_arguments(argv)

    handlers = {
        'run': lambda a: __import__('spamBench.pipelines.benchmark', fromlist=['handle_run']).handle_run(a),
    }

    cmd = getattr(args, 'command', None)
    handler = handlers.get(cmd)

    if handler is None:
        raise ValueError(f"Unknown command: {cmd}. Supported commands: {', '.join(handlers.keys())}")

    logger = get_logger("main")
    start_time = datetime.now()
    logger.info("=" * 80)
    logger.info(f"spamBench {cmd.upper()} | start {start_time.strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"Working directory: {os.getcwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.info("=" * 80)

    try:
        handler(args)
    except KeyboardInterrupt:
        logger.warning(f"{cmd.upper()} interrupted by user")
        return 130
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 2
    except (SpamBenchError, ValueError) as e:
        logger.error(f"Invalid data or configuration: {e}")
        if args.verbose:
            traceback.print_exc()
        return 3
    except Exception as e:
        logger.error(f"{cmd.upper()} failed: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1

    logger.info(f"{cmd.upper()} finished | duration {datetime.now() - start_time}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
