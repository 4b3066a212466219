"""
GIT-COLLAB - Repository Registry
Registra repositórios, instala/remove hooks e persiste o resultado.
"""

import logging
import re
from typing import List

from ..core.config_store import ConfigStore
from ..core.exceptions import GitCollabError
from ..core.models import Repository
from ..hooks.install import HookInstaller

logger = logging.getLogger(__name__)

_TRAILING_SEPARATOR = re.compile(r"[/\\]$")
_LAST_SEGMENT = re.compile(r"[^/\\]+$")


def normalize_path(path: str) -> str:
    """Remove separador final ('/' ou '\\')."""
    return _TRAILING_SEPARATOR.sub("", str(path))


def name_from_path(path: str) -> str:
    """Último segmento do path."""
    match = _LAST_SEGMENT.search(path)
    return match.group(0) if match else path


class RepoRegistry:
    """
    Registro de repositórios do GIT-COLLAB.

    Cada operação processa um repositório por vez e persiste a lista
    uma única vez no final.
    """

    def __init__(self, store: ConfigStore, installer: HookInstaller):
        self.store = store
        self.installer = installer

    def get(self) -> List[Repository]:
        """Repositórios registrados (lista vazia se não houver)."""
        return [Repository.from_dict(r) for r in self.store.read().get("repos") or []]

    def add(self, path: str) -> List[Repository]:
        """
        Registra (ou re-registra) um repositório e instala o hook.

        Args:
            path: Caminho do repositório

        Returns:
            Lista de repositórios ordenada por nome
        """
        path = normalize_path(path)
        repos = [r for r in self.get() if r.path != path]

        result = self.installer.install(path)
        repos.append(Repository(
            name=name_from_path(path),
            path=path,
            hooks_path=result.hooks_path or "",
            is_valid=result.is_valid,
        ))

        return self._persist(repos)

    def remove(self, path: str) -> List[Repository]:
        """
        Remove um repositório do registro e desinstala o hook.

        Erros de filesystem na desinstalação propagam e o config
        não é alterado.
        """
        path = normalize_path(path)
        repos = self.get()

        found = next((r for r in repos if r.path == path), None)
        if found is None:
            return repos

        if found.is_valid and found.hooks_path:
            self.installer.remove(path, found.hooks_path)

        repos.remove(found)
        return self._persist(repos)

    def update(self, repos: List[Repository]) -> List[Repository]:
        return self._persist(repos)

    def reconcile(self) -> List[Repository]:
        """
        Reinstala o hook em todos os repositórios registrados.

        `core.hooksPath` e submódulos podem ter mudado desde o último
        registro. Uma falha em um repositório não interrompe os demais;
        o registro anterior desse repositório é mantido.
        """
        repos = self.get()

        for repo in repos:
            try:
                result = self.installer.install(repo.path)
            except (OSError, GitCollabError) as e:
                logger.error("Falha ao instalar hook em %s: %s", repo.path, e)
                continue

            repo.hooks_path = result.hooks_path or ""
            repo.is_valid = result.is_valid

        return self._persist(repos)

    def _persist(self, repos: List[Repository]) -> List[Repository]:
        repos = sorted(repos, key=lambda r: r.name)
        self.store.write({"repos": [r.to_dict() for r in repos]})
        return repos
