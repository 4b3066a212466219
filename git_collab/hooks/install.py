"""
GIT-COLLAB - Git Hooks Installer
Instala e remove o hook post-commit do GIT-COLLAB, incluindo submódulos.
"""

import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..config import CollabPaths
from ..core.models import InstallResult, TrampolineKind
from ..utils.shell import run_command
from .paths import Runner, is_native_hooks_path, resolve_hooks_path
from .trampoline import LEGACY_SIBLING, classify, merge_trampoline, strip_trampoline

logger = logging.getLogger(__name__)

POST_COMMIT = "post-commit"
MANAGED_DIR = "git-collab"
HOOK_MODE = 0o755


# =============================================================================
# Hook Installer Class
# =============================================================================

class HookInstaller:
    """Gerencia instalação e remoção do hook post-commit."""

    def __init__(self, paths: CollabPaths, runner: Runner = run_command):
        """
        Inicializa o instalador.

        Args:
            paths: Localização do payload e demais arquivos do GIT-COLLAB
            runner: Executor de comandos (injetável para testes)
        """
        self.paths = paths
        self.runner = runner

    # =========================================================================
    # Install
    # =========================================================================

    def install(self, repo_path: Union[str, Path]) -> InstallResult:
        """
        Instala o hook em um repositório e em seus submódulos.

        Args:
            repo_path: Raiz do repositório

        Returns:
            InstallResult com o diretório de hooks resolvido.
            Paths inexistentes ou que não são repositórios git retornam
            is_valid=False (sem exceção).
        """
        repo_path = Path(repo_path)

        if not repo_path.exists():
            logger.error("Caminho não encontrado: %s", repo_path)
            return InstallResult.invalid()
        if not (repo_path / ".git").exists():
            logger.error("Caminho não é um repositório git: %s", repo_path)
            return InstallResult.invalid()

        logger.info("Escrevendo hook post-commit no repositório: %s", repo_path)

        hooks_path = resolve_hooks_path(repo_path, self.runner)
        self._install_into(hooks_path, native=is_native_hooks_path(hooks_path))
        self._install_into_submodules(repo_path)

        return InstallResult(is_valid=True, hooks_path=str(hooks_path))

    def _install_into(self, hooks_path: Path, native: bool) -> None:
        self._copy_payload(hooks_path, native)
        self._write_post_commit(hooks_path)

    def _copy_payload(self, hooks_path: Path, native: bool) -> None:
        """Copia o payload para `<hooks>/git-collab/post-commit`."""
        managed_dir = hooks_path / MANAGED_DIR
        managed_dir.mkdir(parents=True, exist_ok=True)

        destination = managed_dir / POST_COMMIT
        shutil.copyfile(self.paths.payload_file, destination)
        destination.chmod(HOOK_MODE)

        # Diretórios de hooks versionados (.husky, core.hooksPath custom)
        # não devem commitar o payload
        if not native:
            (managed_dir / ".gitignore").write_text("*", encoding="utf-8")

    def _write_post_commit(self, hooks_path: Path) -> None:
        """Escreve ou faz merge do trampoline em `<hooks>/post-commit`."""
        post_commit = hooks_path / POST_COMMIT
        existing = post_commit.read_text(encoding="utf-8") if post_commit.exists() else None

        result = merge_trampoline(existing)
        for orphan in result.orphaned:
            logger.debug("Removendo hook legado: %s", hooks_path / orphan)
            (hooks_path / orphan).unlink(missing_ok=True)

        post_commit.write_text(result.content, encoding="utf-8")
        post_commit.chmod(HOOK_MODE)

    def _install_into_submodules(self, repo_path: Path) -> None:
        modules_dir = repo_path / ".git" / "modules"
        if not modules_dir.exists():
            return

        for module_path in self._get_submodules(repo_path):
            hooks_path = modules_dir.joinpath(*module_path.split("/"), "hooks")
            logger.debug("Instalando hook no submódulo: %s", module_path)
            self._install_into(hooks_path, native=True)

    def _get_submodules(self, repo_path: Path) -> List[str]:
        """
        Lista submódulos via `git submodule status`.

        Formato de cada linha:
        +0a1b2c... path/do/modulo (heads/main)
        """
        output = self.runner(["git", "submodule", "status"], cwd=repo_path)
        return parse_submodule_status(output)

    # =========================================================================
    # Remove
    # =========================================================================

    def remove(self, repo_path: Union[str, Path], hooks_path: Union[str, Path]) -> None:
        """
        Remove o hook de um repositório e de seus submódulos.

        Args:
            repo_path: Raiz do repositório
            hooks_path: Diretório de hooks registrado na instalação
                (não é resolvido novamente)

        Raises:
            OSError: Erros de filesystem não são tratados
        """
        self._remove_from(Path(hooks_path))

        modules_dir = Path(repo_path) / ".git" / "modules"
        if modules_dir.exists():
            # Só as entradas diretas de .git/modules; submódulos aninhados
            # (ex.: .git/modules/subdir/mod2) mantêm seus arquivos
            for module_dir in sorted(modules_dir.iterdir()):
                self._remove_from(module_dir / "hooks")

    def _remove_from(self, hooks_path: Path) -> None:
        self._remove_post_commit(hooks_path)
        self._remove_payload(hooks_path)

    def _remove_post_commit(self, hooks_path: Path) -> None:
        post_commit = hooks_path / POST_COMMIT
        if not post_commit.exists():
            return

        content = strip_trampoline(post_commit.read_text(encoding="utf-8"))
        if content is None:
            post_commit.unlink()
        else:
            post_commit.write_text(content, encoding="utf-8")
            post_commit.chmod(HOOK_MODE)

    def _remove_payload(self, hooks_path: Path) -> None:
        managed_dir = hooks_path / MANAGED_DIR
        if managed_dir.exists():
            shutil.rmtree(managed_dir)

        legacy_file = hooks_path / LEGACY_SIBLING
        if legacy_file.exists():
            legacy_file.unlink()

    # =========================================================================
    # Status
    # =========================================================================

    def status(self, hooks_path: Union[str, Path]) -> Dict[str, Any]:
        """Retorna status detalhado do hook em um diretório de hooks."""
        hooks_path = Path(hooks_path)
        post_commit = hooks_path / POST_COMMIT

        content: Optional[str] = None
        if post_commit.exists():
            content = post_commit.read_text(encoding="utf-8")

        kind = classify(content)
        return {
            "hooks_dir": str(hooks_path),
            "kind": kind,
            "installed": kind is TrampolineKind.CURRENT,
            "executable": post_commit.exists() and post_commit.stat().st_mode & 0o111 != 0,
            "has_payload": (hooks_path / MANAGED_DIR / POST_COMMIT).exists(),
        }


# =============================================================================
# Helper Functions
# =============================================================================

def parse_submodule_status(output: Optional[str]) -> List[str]:
    """
    Extrai os paths dos submódulos do output de `git submodule status`.

    Args:
        output: Output do comando

    Returns:
        Lista de paths relativos (separados por '/')
    """
    modules = []
    for line in (output or "").strip().splitlines():
        parts = line.strip().split()
        if len(parts) >= 2:
            modules.append(parts[1])
    return modules


def print_status(statuses: Iterable[Dict[str, Any]]):
    """Printa status dos hooks (helper para CLI)."""
    from rich.console import Console
    from rich.table import Table

    console = Console()

    table = Table(title="Status dos Hooks")
    table.add_column("Repositório", style="cyan")
    table.add_column("Hooks dir")
    table.add_column("Variante", style="yellow")
    table.add_column("Instalado", style="green")
    table.add_column("Executável", style="magenta")
    table.add_column("Payload", style="blue")

    for status in statuses:
        kind = status.get("kind")
        table.add_row(
            status.get("name", ""),
            status.get("hooks_dir", ""),
            kind.value if kind else "-",
            "✅" if status.get("installed") else "❌",
            "✅" if status.get("executable") else "❌",
            "✅" if status.get("has_payload") else "❌",
        )

    console.print(table)
