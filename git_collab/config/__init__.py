"""Paths and configuration locations for GIT-COLLAB."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

HOME_ENV_VAR = "GIT_COLLAB_HOME"
DEFAULT_HOME = Path.home() / ".git-collab"

CONFIG_FILE_NAME = "config.yaml"
PAYLOAD_FILE_NAME = "post-commit"
GIT_LOG_FILE_NAME = "git-log-co-author"


@dataclass(frozen=True)
class CollabPaths:
    """
    Localização de todos os arquivos gerenciados pelo GIT-COLLAB.

    O diretório home é injetado (em vez de uma constante global) para que
    testes possam apontar para um diretório temporário.
    """
    home: Path
    git_switch_home: Optional[Path] = None

    @classmethod
    def default(cls) -> "CollabPaths":
        """Cria paths a partir de $GIT_COLLAB_HOME ou ~/.git-collab."""
        override = os.environ.get(HOME_ENV_VAR)
        home = Path(override).expanduser() if override else DEFAULT_HOME
        return cls(home=home, git_switch_home=Path.home() / ".git-switch")

    @property
    def config_file(self) -> Path:
        return self.home / CONFIG_FILE_NAME

    @property
    def payload_file(self) -> Path:
        """Script post-commit copiado para cada diretório de hooks."""
        return self.home / PAYLOAD_FILE_NAME

    @property
    def git_log_file(self) -> Path:
        return self.home / GIT_LOG_FILE_NAME

    @property
    def legacy_config_files(self) -> List[Path]:
        """Arquivos de config antigos, em ordem de preferência."""
        legacy = [self.home / "config.json"]
        if self.git_switch_home is not None:
            legacy.append(self.git_switch_home / "config.json")
        return legacy


__all__ = [
    "CollabPaths",
    "DEFAULT_HOME",
    "HOME_ENV_VAR",
]
