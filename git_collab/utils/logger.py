"""
GIT-COLLAB - Logging
Configura o logging da CLI com saída formatada pelo rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "git_collab"


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """
    Configura o logger raiz do pacote.

    Chamado apenas pela CLI; o código de biblioteca só usa
    `logging.getLogger(__name__)`.

    Args:
        verbose: Se True, mostra mensagens de debug
        console: Console rich de destino (default: stderr)

    Returns:
        Logger do pacote
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger
