# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console session. This is
the only place that terminates the process.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import StdConsole
from ..logging_setup import setup_logging
from .session import SessionController

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level = getattr(logging, settings.log_level, logging.WARNING)
    console_level = level if isinstance(level, int) else logging.WARNING
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        file_enabled=settings.file_logging,
    )

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    session = SessionController(state, StdConsole())
    code = session.run()

    logger.info("Bye. exit_code=%s", code)
    sys.exit(code)


if __name__ == "__main__":
    main()
