"""Pytest configuration and fixtures."""

import pytest

from git_collab.config import CollabPaths
from git_collab.utils.shell import ShellCommandError


HOOKS_PATH_COMMAND = "git config --local core.hooksPath"

PAYLOAD = "#!/usr/bin/env sh\n\n# do some git-collaborating\n"


class FakeRunner:
    """Runner de comandos que grava as chamadas e devolve respostas fixas."""

    def __init__(self, responses=None):
        # core.hooksPath não configurado por padrão
        self.responses = {
            HOOKS_PATH_COMMAND: ShellCommandError(HOOKS_PATH_COMMAND, "", 1),
        }
        self.responses.update(responses or {})
        self.calls = []

    def __call__(self, command, cwd=None):
        key = command if isinstance(command, str) else " ".join(command)
        self.calls.append((key, cwd))

        response = self.responses.get(key, "")
        if isinstance(response, Exception):
            raise response
        return response

    def commands(self):
        return [command for command, _ in self.calls]


@pytest.fixture
def runner():
    """Fixture com runner fake (core.hooksPath não configurado)."""
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory de runners fake com respostas customizadas."""
    return FakeRunner


@pytest.fixture
def collab_paths(tmp_path):
    """Home do GIT-COLLAB em diretório temporário, com payload."""
    home = tmp_path / "collab-home"
    home.mkdir()
    (home / "post-commit").write_text(PAYLOAD)

    return CollabPaths(home=home, git_switch_home=tmp_path / "git-switch-home")


@pytest.fixture
def fake_repo(tmp_path):
    """Repositório fake: diretório com `.git/hooks`."""
    repo_dir = tmp_path / "repo"
    (repo_dir / ".git" / "hooks").mkdir(parents=True)
    return repo_dir


@pytest.fixture
def temp_git_repo(tmp_path):
    """Cria repositório git temporário."""
    import subprocess

    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_dir,
        check=True
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_dir,
        check=True
    )

    return repo_dir
