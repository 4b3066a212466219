"""Core modules for GIT-COLLAB."""

from .config_store import ConfigStore
from .exceptions import ConfigError, GitCollabError
from .models import (
    InstallResult,
    Repository,
    TrampolineKind,
    User,
)

__all__ = [
    # Store
    "ConfigStore",
    # Exceptions
    "ConfigError",
    "GitCollabError",
    # Models
    "InstallResult",
    "Repository",
    "TrampolineKind",
    "User",
]
