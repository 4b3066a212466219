"""
GIT-COLLAB - Command Line Interface
Entry point principal para todos os comandos do GIT-COLLAB.
"""

from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from git_collab.__version__ import __version__
from git_collab.bootstrap import install as bootstrap_install
from git_collab.config import CollabPaths
from git_collab.core.config_store import ConfigStore
from git_collab.core.exceptions import GitCollabError
from git_collab.hooks.install import HookInstaller, print_status
from git_collab.services import GitService, RepoRegistry, UserService, normalize_path
from git_collab.utils.logger import setup_logging
from git_collab.utils.shell import run_command


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="git-collab",
    help="🤝 GIT-COLLAB - Rotating commit authorship",
    add_completion=True,
    rich_markup_mode="rich",
)

console = Console()


def _build() -> Tuple[RepoRegistry, UserService]:
    """Monta store e serviços a partir dos paths padrão."""
    paths = CollabPaths.default()
    store = ConfigStore(paths)
    store.ensure()

    installer = HookInstaller(paths, run_command)
    git = GitService(run_command)
    return RepoRegistry(store, installer), UserService(store, git)


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"🤝 GIT-COLLAB version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do GIT-COLLAB"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Mostra mensagens de debug"
    ),
):
    """
    🤝 GIT-COLLAB - Rotating commit authorship

    Mantém autor e co-autores rotativos nos seus repositórios git.
    """
    setup_logging(verbose)


# =============================================================================
# Command: install
# =============================================================================

@app.command()
def install(
    executable: Optional[str] = typer.Option(
        None,
        "--executable",
        help="Executável chamado pelo hook para rotacionar autores"
    ),
):
    """
    🪝 Instala/atualiza scripts e hooks de todos os repositórios

    Exemplo:

    \b
    git-collab install
    """

    try:
        bootstrap_install(CollabPaths.default(), executable=executable, runner=run_command)
        console.print("✅ GIT-COLLAB instalado", style="green")

    except (GitCollabError, OSError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)


# =============================================================================
# Command Group: repos
# =============================================================================

repos_app = typer.Typer(help="📁 Gerencia repositórios")
app.add_typer(repos_app, name="repos")


def _print_repos(repos):
    table = Table(show_header=True, title="Repositórios")
    table.add_column("Nome", style="cyan", no_wrap=True)
    table.add_column("Path")
    table.add_column("Hooks dir", style="magenta")
    table.add_column("Válido", style="green")

    for repo in repos:
        table.add_row(
            repo.name,
            repo.path,
            repo.hooks_path or "-",
            "✅" if repo.is_valid else "❌",
        )

    console.print(table)


@repos_app.command("add")
def repos_add(
    path: Path = typer.Argument(
        ...,
        help="Caminho do repositório"
    ),
):
    """
    ➕ Registra um repositório e instala o hook

    Exemplo:

    \b
    git-collab repos add ~/code/project
    """

    try:
        registry, _ = _build()
        repo_path = str(path.expanduser().absolute())
        repos = registry.add(repo_path)

        added = next(r for r in repos if r.path == normalize_path(repo_path))
        if not added.is_valid:
            console.print(f"⚠️  Repositório inválido: {added.path}", style="yellow")
            _print_repos(repos)
            raise typer.Exit(1)

        _print_repos(repos)

    except (GitCollabError, OSError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)


@repos_app.command("remove")
def repos_remove(
    path: Path = typer.Argument(
        ...,
        help="Caminho do repositório"
    ),
):
    """
    🗑️ Remove o hook e o repositório do registro
    """

    try:
        registry, _ = _build()
        repos = registry.remove(str(path.expanduser().absolute()))
        _print_repos(repos)

    except (GitCollabError, OSError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)


@repos_app.command("list")
def repos_list():
    """
    📋 Lista repositórios registrados
    """

    try:
        registry, _ = _build()
        _print_repos(registry.get())

    except GitCollabError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)


@repos_app.command("status")
def repos_status():
    """
    📊 Mostra status do hook em cada repositório
    """

    try:
        registry, _ = _build()
        installer = registry.installer

        statuses = []
        for repo in registry.get():
            if not repo.is_valid:
                statuses.append({"name": repo.name, "hooks_dir": "-"})
                continue
            status = installer.status(repo.hooks_path)
            status["name"] = repo.name
            statuses.append(status)

        print_status(statuses)

    except (GitCollabError, OSError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)


# =============================================================================
# Command Group: users
# =============================================================================

users_app = typer.Typer(help="👥 Autoria")
app.add_typer(users_app, name="users")


@users_app.command("rotate")
def users_rotate():
    """
    🔄 Rotaciona autor e co-autores

    Chamado pelo hook post-commit após cada commit.
    """

    try:
        _, users = _build()
        rotated = [u for u in users.rotate() if u.active]

        if rotated:
            console.print(f"✍️  Autor: {rotated[0].name} <{rotated[0].email}>")
            for user in rotated[1:]:
                console.print(f"   Co-autor: {user.name} <{user.email}>")

    except (GitCollabError, OSError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
