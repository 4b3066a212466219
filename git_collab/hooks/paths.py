"""
GIT-COLLAB - Hooks Path Resolver
Descobre onde o git procura hooks para um repositório.
"""

import logging
from pathlib import Path
from typing import Callable, Tuple, Union

from ..utils.shell import ShellCommandError, run_command

logger = logging.getLogger(__name__)

Runner = Callable[..., str]

# Gerenciadores de hooks que mantêm um diretório interno `<dir>/_`.
# O diretório interno não deve receber escrita direta.
MANAGED_HOOK_DIRS: Tuple[str, ...] = (".husky",)
MANAGED_INTERNAL_DIR = "_"


def default_hooks_path(repo_path: Union[str, Path]) -> Path:
    """Diretório padrão `.git/hooks`."""
    return Path(repo_path) / ".git" / "hooks"


def is_native_hooks_path(hooks_path: Union[str, Path]) -> bool:
    """True se o path termina em `.git/hooks` (diretório do próprio git)."""
    parts = Path(hooks_path).parts
    return parts[-2:] == (".git", "hooks")


def resolve_hooks_path(repo_path: Union[str, Path], runner: Runner = run_command) -> Path:
    """
    Resolve o diretório de hooks de um repositório.

    Considera `core.hooksPath` local. Se não estiver configurado (o git
    retorna erro), usa `.git/hooks`. Nunca levanta exceção.

    Args:
        repo_path: Raiz do repositório
        runner: Executor de comandos (injetável para testes)

    Returns:
        Path do diretório de hooks
    """
    repo_path = Path(repo_path)
    hooks_path = default_hooks_path(repo_path)

    try:
        local_hooks_path = runner(["git", "config", "--local", "core.hooksPath"], cwd=repo_path)
    except ShellCommandError:
        logger.debug("core.hooksPath não configurado em %s", repo_path)
        return hooks_path

    local_hooks_path = (local_hooks_path or "").strip()
    if local_hooks_path:
        hooks_path = repo_path / local_hooks_path

    if hooks_path.name == MANAGED_INTERNAL_DIR and hooks_path.parent.name in MANAGED_HOOK_DIRS:
        hooks_path = hooks_path.parent

    return hooks_path
