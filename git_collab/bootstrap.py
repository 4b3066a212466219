"""
GIT-COLLAB - Bootstrap
Prepara o diretório home, scripts e hooks de todos os repositórios.
"""

import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

from .config import CollabPaths
from .core.config_store import ConfigStore
from .hooks.install import HookInstaller
from .hooks.paths import Runner
from .hooks.templates import (
    GIT_LOG_CO_AUTHOR_SCRIPT,
    get_auto_rotate_command,
    get_post_commit_payload,
)
from .services import GitService, RepoRegistry, UserService
from .utils.shell import run_command

logger = logging.getLogger(__name__)

SCRIPT_MODE = 0o755


def default_executable() -> str:
    """Executável usado pelo payload para rotacionar autores."""
    return shutil.which("git-collab") or sys.argv[0]


def write_script_if_changed(path: Path, content: str) -> bool:
    """
    Escreve um script executável se o conteúdo mudou.

    Returns:
        True se o arquivo foi escrito
    """
    if path.exists() and path.read_text(encoding="utf-8") == content:
        return False

    path.write_text(content, encoding="utf-8")
    path.chmod(SCRIPT_MODE)
    return True


def install(
    paths: CollabPaths,
    executable: Optional[str] = None,
    platform: Optional[str] = None,
    runner: Runner = run_command,
) -> None:
    """
    Instala/atualiza o GIT-COLLAB.

    1. Cria config (migrando configs antigos)
    2. Escreve o payload post-commit
    3. Reinstala o hook em todos os repositórios registrados
    4. Escreve o script de log e o alias `git lg`
    5. Aplica autor/co-autores dos usuários ativos

    Args:
        paths: Localização dos arquivos do GIT-COLLAB
        executable: Executável chamado pelo payload (default: `git-collab` no PATH)
        platform: sys.platform alvo (default: plataforma atual)
        runner: Executor de comandos
    """
    store = ConfigStore(paths)
    store.ensure()

    git = GitService(runner)
    registry = RepoRegistry(store, HookInstaller(paths, runner))
    users = UserService(store, git)

    auto_rotate = get_auto_rotate_command(
        executable or default_executable(),
        platform or sys.platform,
    )
    if write_script_if_changed(paths.payload_file, get_post_commit_payload(auto_rotate)):
        logger.info("Instalando hook post-commit")

    registry.reconcile()

    if write_script_if_changed(paths.git_log_file, GIT_LOG_CO_AUTHOR_SCRIPT):
        logger.info("Instalando script de git log com co-autores")
    git.set_git_log_alias(paths.git_log_file)

    git.update_author_and_co_authors(users.get())
