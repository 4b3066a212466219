"""Git hooks installation and management."""

from .install import (
    HookInstaller,
    parse_submodule_status,
)
from .paths import resolve_hooks_path
from .trampoline import (
    GIT_SWITCH_POST_COMMIT_BASE,
    POST_COMMIT_BASE,
    POST_COMMIT_BASE_OLD,
    classify,
    merge_trampoline,
    strip_trampoline,
)

__all__ = [
    "GIT_SWITCH_POST_COMMIT_BASE",
    "HookInstaller",
    "POST_COMMIT_BASE",
    "POST_COMMIT_BASE_OLD",
    "classify",
    "merge_trampoline",
    "parse_submodule_status",
    "resolve_hooks_path",
    "strip_trampoline",
]
