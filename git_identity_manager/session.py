"""Interactive identity selection loop.

The loop is a small state machine::

    DISPLAYING --q--> QUITTING --> FINISHED
    DISPLAYING --a--> ADDING ----> FINISHED
    DISPLAYING --*--> SELECTING -> FINISHED
                          |
                          +-- invalid input --> DISPLAYING
"""

import logging
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Protocol

from .config import Configuration, save_config
from .exceptions import InvalidSelectionError
from .registry import Identity, IdentityRegistry, derive_key
from .ui import Asker, ask, print_menu, prompt_choice, prompt_new_identity
from .ui_common import console, print_error, print_success, print_warning

logger = logging.getLogger(__name__)


class State(Enum):
    """States of the interactive loop."""
    DISPLAYING = auto()
    SELECTING = auto()
    ADDING = auto()
    QUITTING = auto()
    FINISHED = auto()


class Applier(Protocol):
    """Anything that can make an identity the active Git identity."""

    def apply(self, name: str, email: str) -> None:
        ...


class IdentitySession:
    """Runs one interactive session against a loaded configuration."""

    def __init__(
        self,
        config: Configuration,
        config_file: Path,
        applier: Applier,
        asker: Asker = ask,
    ) -> None:
        """Initialize the session.

        Args:
            config: Loaded configuration, mutated in place by "add"
            config_file: Where the configuration is saved after a mutation
            applier: Applies the chosen identity
            asker: Reads one line of user input for a prompt
        """
        self.config = config
        self.config_file = config_file
        self.applier = applier
        self.asker = asker
        self.state = State.DISPLAYING
        self.history: list[State] = []
        self.applied: Optional[Identity] = None
        self._choice = ""

    @property
    def registry(self) -> IdentityRegistry:
        """Registry over the current identities table."""
        return IdentityRegistry(self.config.identities)

    def run(self) -> None:
        """Run the loop until it finishes.

        Raises:
            IdentityManagerError: On save, configuration or apply failures,
                which end the session
        """
        handlers = {
            State.DISPLAYING: self._display,
            State.SELECTING: self._select,
            State.ADDING: self._add,
            State.QUITTING: self._quit,
        }
        while self.state is not State.FINISHED:
            self.history.append(self.state)
            handler = handlers[self.state]
            try:
                self.state = handler()
            except Exception:
                self.state = State.FINISHED
                raise
        self.history.append(self.state)

    def _display(self) -> State:
        print_menu(self.registry)
        self._choice = prompt_choice(self.asker).strip()

        if self._choice.lower() == "q":
            return State.QUITTING
        if self._choice.lower() == "a":
            return State.ADDING
        return State.SELECTING

    def _quit(self) -> State:
        console.print("Exiting without changes.")
        return State.FINISHED

    def _select(self) -> State:
        digits = self._choice[1:] if self._choice.startswith("+") else self._choice
        if not digits.isdecimal():
            logger.debug(f"Rejected non-numeric choice: {self._choice!r}")
            print_error("Invalid input.")
            return State.DISPLAYING

        registry = self.registry
        try:
            identity = registry.get_by_index(int(digits), registry.sorted_keys())
        except InvalidSelectionError as e:
            logger.debug(f"Rejected selection {self._choice}: {e.details}")
            print_error("Invalid selection.", details=e.details)
            return State.DISPLAYING

        self._apply(identity)
        return State.FINISHED

    def _add(self) -> State:
        name, email = prompt_new_identity(self.asker)
        identity = Identity(name=name, email=email)
        key = derive_key(name)

        if key in self.registry:
            logger.info(f"Replacing existing identity '{key}'")
        self.registry.insert(key, identity)
        save_config(self.config_file, self.config)

        if name and email:
            self._apply(identity)
        else:
            print_warning("Identity saved but not applied: name and email are required")
        return State.FINISHED

    def _apply(self, identity: Identity) -> None:
        self.applier.apply(identity.name, identity.email)
        self.applied = identity
        print_success(f"Git identity set to {identity.name} <{identity.email}>")
