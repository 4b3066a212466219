"""
GIT-COLLAB - Git Identity Service
Configura autor, co-autores e o alias `git lg` no config global do git.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Union

from ..core.models import User
from ..hooks.paths import Runner
from ..utils.shell import run_command

logger = logging.getLogger(__name__)

CO_AUTHORS_KEY = "git-collab.co-authors"
CO_AUTHORS_SEPARATOR = ";"


class GitService:
    """Escreve a identidade do commit via `git config --global`."""

    def __init__(self, runner: Runner = run_command):
        self.runner = runner

    def set_author(self, name: str, email: str) -> None:
        self.runner(["git", "config", "--global", "user.name", name])
        self.runner(["git", "config", "--global", "user.email", email])

    def set_co_authors(self, co_authors: Sequence[User]) -> None:
        """Grava os co-autores como trailers separados por ';'."""
        value = CO_AUTHORS_SEPARATOR.join(u.co_author_trailer for u in co_authors)
        self.runner(["git", "config", "--global", CO_AUTHORS_KEY, value])

    def update_author_and_co_authors(self, users: Sequence[User]) -> None:
        """
        Define autor e co-autores a partir dos usuários ativos.

        O primeiro usuário ativo é o autor; os demais ativos são co-autores.
        Sem usuários ativos, nada é alterado.
        """
        active_users: List[User] = [u for u in users if u.active]
        if not active_users:
            return

        author = active_users.pop(0)
        logger.debug("Autor: %s <%s>", author.name, author.email)
        self.set_author(author.name, author.email)
        self.set_co_authors(active_users)

    def set_git_log_alias(self, script_path: Union[str, Path]) -> None:
        """Aponta `git lg` para o script de log com co-autores."""
        script = str(script_path).replace("\\", "/")
        self.runner(["git", "config", "--global", "alias.lg", f"!{script}"])
