"""Services: git identity, repository registry and users."""

from .git import GitService
from .repos import RepoRegistry, name_from_path, normalize_path
from .users import UserService

__all__ = [
    "GitService",
    "RepoRegistry",
    "UserService",
    "name_from_path",
    "normalize_path",
]
