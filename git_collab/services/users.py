"""
GIT-COLLAB - Users
Leitura dos usuários do config e rotação de autoria.
"""

import logging
from typing import List

from ..core.config_store import ConfigStore
from ..core.models import User
from .git import GitService

logger = logging.getLogger(__name__)


class UserService:
    """Usuários do config e rotação autor/co-autores."""

    def __init__(self, store: ConfigStore, git: GitService):
        self.store = store
        self.git = git

    def get(self) -> List[User]:
        return [User.from_dict(u) for u in self.store.read().get("users") or []]

    def active(self) -> List[User]:
        return [u for u in self.get() if u.active]

    def rotate(self) -> List[User]:
        """
        Rotaciona os usuários ativos e aplica a nova autoria.

        O primeiro usuário ativo vai para a última posição ativa;
        usuários inativos mantêm suas posições.

        Returns:
            Lista completa de usuários após a rotação
        """
        users = self.get()
        active_slots = [i for i, u in enumerate(users) if u.active]

        if len(active_slots) > 1:
            active = [users[i] for i in active_slots]
            for slot, user in zip(active_slots, active[1:] + active[:1]):
                users[slot] = user
            self.store.write({"users": [u.to_dict() for u in users]})
            logger.debug("Usuários rotacionados: %s", ", ".join(u.name for u in users if u.active))

        self.git.update_author_and_co_authors(users)
        return users
