# main.py
# Runs the whole test suite and reports pass/fail on the console.
# Exit code is 0 when every test passes.
import sys
from pathlib import Path

import pytest

from utils.logger import setup_logger

TESTS_DIR = Path(__file__).resolve().parent / "tests"


def main(argv=None) -> int:
    logger = setup_logger()
    args = [str(TESTS_DIR), "-v"] + list(sys.argv[1:] if argv is None else argv)
    logger.info("Running tests: %s", " ".join(args))
    exit_code = int(pytest.main(args))
    if exit_code == 0:
        logger.info("All tests passed")
    else:
        logger.error("Test run failed (exit code %d)", exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
