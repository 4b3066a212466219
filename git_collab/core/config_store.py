"""
GIT-COLLAB - Config Store
Lê e escreve usuários e repositórios no arquivo YAML de config.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..config import CollabPaths
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

HOME_MODE = 0o755
CONFIG_MODE = 0o644


class ConfigStore:
    """
    Persistência do config do GIT-COLLAB.

    Responsabilidades:
    - Criar o diretório home e o arquivo de config
    - Migrar configs antigos (config.json do GIT-COLLAB e do git-switch)
    - Ler/escrever o mapeamento {users: [...], repos: [...]}
    """

    def __init__(self, paths: CollabPaths):
        self.paths = paths

    @property
    def config_file(self) -> Path:
        return self.paths.config_file

    def ensure(self) -> None:
        """Cria home e arquivo de config se não existirem."""
        if not self.paths.home.exists():
            self.paths.home.mkdir(mode=HOME_MODE, parents=True)

        if self.config_file.exists():
            return

        logger.info("Instalando arquivo de config...")
        data = self._load_legacy() or {"users": [], "repos": []}
        self._dump(data)

    def _load_legacy(self) -> Optional[Dict[str, Any]]:
        """Carrega o primeiro config legado encontrado (JSON é YAML válido)."""
        for legacy_file in self.paths.legacy_config_files:
            if legacy_file.exists():
                logger.info("Migrando config de %s", legacy_file)
                return self._load(legacy_file)
        return None

    def read(self) -> Dict[str, Any]:
        """
        Lê o arquivo de config.

        Returns:
            Dicionário com o config ({} se o arquivo não existir)

        Raises:
            ConfigError: Se o arquivo for inválido
        """
        if not self.config_file.exists():
            return {}
        return self._load(self.config_file)

    def write(self, data: Dict[str, Any]) -> None:
        """Atualiza as chaves de primeiro nível informadas em `data`."""
        config = self.read()
        config.update(data)
        self._dump(config)

    def _load(self, filepath: Path) -> Dict[str, Any]:
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Erro ao parsear config {filepath}: {e}")
        except OSError as e:
            raise ConfigError(f"Erro ao ler config {filepath}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config deve conter um objeto no nível raiz: {filepath}")
        return data

    def _dump(self, data: Dict[str, Any]) -> None:
        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
        self.config_file.chmod(CONFIG_MODE)
