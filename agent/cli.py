# =============================================================================
# agent/cli.py : Shared Entry-Point Helpers
# =============================================================================
# Every script (main.py, skills_check.py, debug_skills.py) runs exactly one
# top-level coroutine.  An unhandled exception is logged with its traceback
# and the process exits with status 1.  Nothing is retried.
#
# Logs go to STDERR; STDOUT is reserved for the conversation output.
# =============================================================================

import asyncio
import logging
import os
import sys
from typing import Coroutine


def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [agent] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def query_from_argv(default: str) -> str:
    """First command-line argument, or ``default`` when absent or empty."""
    if len(sys.argv) > 1 and sys.argv[1]:
        return sys.argv[1]
    return default


def run(main: Coroutine) -> None:
    try:
        asyncio.run(main)
    except Exception:
        logging.exception("Agent run failed")
        sys.exit(1)
