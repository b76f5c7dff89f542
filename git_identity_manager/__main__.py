"""Main entry point for direct module execution."""

import logging
import os
from pathlib import Path

from .cli import cli
from .config import get_config_file_path

LOG_FILE_NAME = "git_identity_manager.log"
DEBUG_ENV_VAR = "GIT_IDENTITY_MANAGER_DEBUG"


def setup_logging(config_file: Path) -> None:
    """Log to a file next to the identities file, away from the menu."""
    log_file = config_file.with_name(LOG_FILE_NAME)
    try:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()

    logging.basicConfig(
        level=logging.DEBUG if os.environ.get(DEBUG_ENV_VAR) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler],
    )


def main() -> None:
    """Main entry point."""
    config_file = get_config_file_path()
    setup_logging(config_file)
    logging.getLogger(__name__).debug("Starting Git identity manager")
    cli(obj=config_file)


if __name__ == "__main__":
    main()
