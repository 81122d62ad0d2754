# src/iforgor/cli/main.py

"""
CLI entrypoint.

Resolves settings, initializes logging, builds the Session and runs it
in the main thread. Storage and config failures end the process with status 1.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_session
from ..config import ConfigError, get_settings
from ..logging_setup import setup_logging
from ..todo.store import StoreError

logger = logging.getLogger(__name__)


def main() -> int:
    try:
        settings = get_settings()
        console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
        setup_logging(log_file=settings.log_path, console_level=console_level)
    except (ConfigError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("Starting %s (config_dir=%s)...", settings.app_name, settings.config_dir)

    try:
        session = create_session(settings=settings)
        session.run()
    except (StoreError, OSError) as e:
        logger.debug("Fatal storage error.", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
