"""Apply a Git identity with ``git config``."""

import logging
import os
from pathlib import Path
from typing import Optional

# A missing git executable is reported by apply(), not at import time
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from git import Git, GitCommandError, GitCommandNotFound  # noqa: E402

from .exceptions import ApplyError

logger = logging.getLogger(__name__)

NOT_IN_REPOSITORY = "Failed to set git identity. Make sure you're in a Git repository."


class GitIdentityApplier:
    """Sets ``user.name`` and ``user.email`` for the repository in a directory."""

    def __init__(self, working_dir: Optional[Path] = None) -> None:
        """Initialize the applier.

        Args:
            working_dir: Directory whose repository is configured; defaults
                to the current working directory at apply time
        """
        self.working_dir = working_dir

    def apply(self, name: str, email: str) -> None:
        """Set the Git author identity.

        Both settings are attempted once; the identity counts as applied
        only if both succeed.

        Raises:
            ApplyError: If Git is missing or either ``git config`` call fails
        """
        working_dir = self.working_dir or Path.cwd()
        git_cmd = Git(str(working_dir))
        errors = []

        for param, value in (("user.name", name), ("user.email", email)):
            logger.debug(f"Running git config {param} in {working_dir}")
            try:
                git_cmd.config(param, value)
            except GitCommandNotFound as e:
                logger.error(f"Git not found: {e}")
                raise ApplyError(
                    "Git is not installed",
                    details="Please install Git to use this tool",
                ) from e
            except GitCommandError as e:
                logger.error(f"git config {param} failed with status {e.status}: {e.stderr}")
                errors.append(str(e.stderr).strip())

        if errors:
            raise ApplyError(NOT_IN_REPOSITORY, details=errors[0] or None)

        logger.info(f"Applied identity {name} <{email}> in {working_dir}")
