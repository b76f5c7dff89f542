"""Command-line interface."""

import logging
import sys
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

import click

from .applier import GitIdentityApplier
from .config import get_config_file_path, load_config
from .exceptions import IdentityManagerError
from .session import IdentitySession
from .ui_common import print_error

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator to report errors as a single line and exit non-zero."""
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except IdentityManagerError as e:
            logger.error(f"{type(e).__name__}: {e}")
            print_error(str(e), details=e.details)
            sys.exit(1)
        except Exception as e:
            logger.error(f"Unexpected error: {str(e)}", exc_info=True)
            print_error(f"Unexpected error: {str(e)}")
            sys.exit(1)
    return cast(F, wrapper)


@click.command()
@click.pass_context
@handle_errors
def cli(ctx: click.Context) -> None:
    """Pick one of your saved Git identities and apply it to this repository."""
    # The entry point passes the path it already resolved as ctx.obj
    config_file = ctx.obj or get_config_file_path()
    config = load_config(config_file)

    session = IdentitySession(
        config=config,
        config_file=config_file,
        applier=GitIdentityApplier(),
    )
    session.run()
