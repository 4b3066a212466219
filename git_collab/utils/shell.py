"""
GIT-COLLAB - Shell Runner
Executa comandos externos (git) e retorna o stdout.
"""

import shlex
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from ..core.exceptions import GitCollabError

Command = Union[str, Sequence[str]]


class ShellCommandError(GitCollabError):
    """Comando externo falhou ou não foi encontrado."""

    def __init__(self, command: str, message: str, returncode: Optional[int] = None):
        self.command = command
        self.returncode = returncode
        super().__init__(f"Comando falhou: {command}\n{message}".rstrip())


def run_command(command: Command, cwd: Optional[Union[str, Path]] = None) -> str:
    """
    Executa um comando e retorna o output.

    Args:
        command: String (separada com shlex) ou lista de argumentos
        cwd: Diretório de trabalho (default: diretório atual)

    Returns:
        Output do comando (stdout)

    Raises:
        ShellCommandError: Se o comando retornar código != 0
    """
    args = shlex.split(command) if isinstance(command, str) else list(command)
    display = command if isinstance(command, str) else " ".join(args)

    try:
        result = subprocess.run(
            args,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise ShellCommandError(display, f"Executável não encontrado no PATH: {args[0]}")

    if result.returncode != 0:
        raise ShellCommandError(display, result.stderr.strip(), result.returncode)

    return result.stdout
