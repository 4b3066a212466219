"""
GIT-COLLAB - Exceptions
"""


class GitCollabError(Exception):
    """Base exception for GIT-COLLAB errors."""
    pass


class ConfigError(GitCollabError):
    """Erro ao ler ou escrever o arquivo de config."""
    pass
