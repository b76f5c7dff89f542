"""Test configuration and fixtures."""

from collections.abc import Generator, Iterable
from pathlib import Path

import pytest

from git_identity_manager.config import CONFIG_ENV_VAR
from git_identity_manager.exceptions import ApplyError, IdentityManagerError


class RecordingApplier:
    """Applier that records calls instead of running Git."""

    def __init__(self, error: ApplyError | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def apply(self, name: str, email: str) -> None:
        self.calls.append((name, email))
        if self.error:
            raise self.error


class ScriptedAsker:
    """Answers prompts from a fixed script, like a user typing lines."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise IdentityManagerError("Operation cancelled by user")
        return self.answers.pop(0).strip()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path of a not-yet-existing identities file."""
    return tmp_path / "git_identity_manager" / "git_identities.toml"


@pytest.fixture
def config_env(config_file: Path, monkeypatch) -> Generator[Path, None, None]:
    """Point the configuration override at a temporary file."""
    config_file.parent.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
    yield config_file


@pytest.fixture
def applier() -> RecordingApplier:
    """Applier that succeeds and records its calls."""
    return RecordingApplier()
