"""Git identity manager - keep a few Git identities and switch between them."""

from git_identity_manager.applier import GitIdentityApplier
from git_identity_manager.cli import cli
from git_identity_manager.config import Configuration, load_config, save_config
from git_identity_manager.registry import Identity, IdentityRegistry, derive_key
from git_identity_manager.session import IdentitySession, State
from git_identity_manager.version import __version__

__all__ = [
    "Configuration",
    "GitIdentityApplier",
    "Identity",
    "IdentityRegistry",
    "IdentitySession",
    "State",
    "__version__",
    "cli",
    "derive_key",
    "load_config",
    "save_config",
]
