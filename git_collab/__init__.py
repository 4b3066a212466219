"""
🤝 GIT-COLLAB - Rotating commit authorship

Ferramenta que mantém autor e co-autores rotativos em repositórios git,
instalando e mantendo um hook post-commit em cada repositório registrado.
"""

from .__version__ import __version__

__all__ = ["__version__"]
