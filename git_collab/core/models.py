"""
GIT-COLLAB - Core Data Models
Estruturas de dados de usuários, repositórios e hooks.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from enum import Enum


# =============================================================================
# Enums
# =============================================================================

class TrampolineKind(str, Enum):
    """Variantes reconhecidas de um script post-commit."""
    CURRENT = "current"
    LEGACY_OLD = "legacy-old"
    LEGACY_GIT_SWITCH = "legacy-git-switch"
    FOREIGN = "foreign"
    MISSING = "missing"


# =============================================================================
# Repository
# =============================================================================

@dataclass
class Repository:
    """Repositório registrado no config."""
    name: str
    path: str
    hooks_path: str = ""
    is_valid: bool = False

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Repository":
        """Cria Repository a partir do formato persistido (camelCase)."""
        return Repository(
            name=data.get("name", ""),
            path=data.get("path", ""),
            hooks_path=data.get("hooksPath") or "",
            is_valid=bool(data.get("isValid", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "hooksPath": self.hooks_path,
            "isValid": self.is_valid,
        }


# =============================================================================
# User
# =============================================================================

@dataclass
class User:
    """
    Usuário que pode ser autor ou co-autor.

    Campos desconhecidos do arquivo de config são mantidos em `extra`
    para não serem perdidos ao reescrever o config.
    """
    name: str
    email: str
    id: Optional[str] = None
    active: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "User":
        known = {"id", "name", "email", "active"}
        return User(
            name=data.get("name", ""),
            email=data.get("email", ""),
            id=data.get("id"),
            active=bool(data.get("active", False)),
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["name"] = self.name
        data["email"] = self.email
        data["active"] = self.active
        data.update(self.extra)
        return data

    @property
    def co_author_trailer(self) -> str:
        """Linha `Co-Authored-By` usada na mensagem de commit."""
        return f"Co-Authored-By: {self.name} <{self.email}>"


# =============================================================================
# Install Result
# =============================================================================

@dataclass
class InstallResult:
    """Resultado da instalação dos hooks em um repositório."""
    is_valid: bool
    hooks_path: Optional[str] = None

    @staticmethod
    def invalid() -> "InstallResult":
        return InstallResult(is_valid=False)

    def to_dict(self) -> Dict[str, Any]:
        if not self.is_valid:
            return {"isValid": False}
        return {"hooksPath": self.hooks_path, "isValid": True}
