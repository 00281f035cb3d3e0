"""Command line entry point of ab-gnuplot."""
import subprocess
import sys
from typing import List, Optional

import requests

from ab_gnuplot.const import SYNTAX, EXIT_SUCCESS, EXIT_USER_ABORT, EXIT_INTERNAL_ERROR, EXIT_GENERIC_FAILURE
from ab_gnuplot.shared.config import Config
from ab_gnuplot.shared.logging import LoggingManager
from ab_gnuplot.benchmark import AbGnuplotError, BenchmarkRunner, Console, Options, UserAbortError
from ab_gnuplot.benchmark.options import is_help_request

logger = LoggingManager.get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Run ab-gnuplot, returning the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    if is_help_request(argv):
        print(SYNTAX)
        return EXIT_SUCCESS
    try:
        config = Config()
        LoggingManager.setup_logging(config=config)
        BenchmarkRunner(config, Console.create()).run(Options.from_argv(argv))
    except (UserAbortError, KeyboardInterrupt):
        print("Aborted by user", file=sys.stderr)
        return EXIT_USER_ABORT
    except AbGnuplotError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code
    except (OSError, ValueError, subprocess.SubprocessError, requests.RequestException) as e:
        logger.debug("Runtime failure", exc_info=True)
        print(str(e) or type(e).__name__, file=sys.stderr)
        return EXIT_GENERIC_FAILURE
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
