"""Tests for git identity, repository registry and user rotation."""

import pytest

from git_collab.core.config_store import ConfigStore
from git_collab.core.models import Repository, User
from git_collab.hooks.install import HookInstaller
from git_collab.hooks.trampoline import POST_COMMIT_BASE
from git_collab.services import (
    GitService,
    RepoRegistry,
    UserService,
    name_from_path,
    normalize_path,
)


def make_users():
    return [
        User(name="First User", email="first@email.com", active=True),
        User(name="Second User", email="second@email.com", active=True),
        User(name="Third User", email="third@email.com", active=True),
        User(name="Fourth User", email="fourth@email.com", active=False),
    ]


@pytest.fixture
def store(collab_paths):
    store = ConfigStore(collab_paths)
    store.ensure()
    return store


# =============================================================================
# GitService
# =============================================================================

def test_set_author(runner):
    """Test author name and email are set globally."""
    GitService(runner).set_author("author-name", "author-email")

    assert runner.commands() == [
        "git config --global user.name author-name",
        "git config --global user.email author-email",
    ]


def test_set_co_authors(runner):
    """Test co-authors are joined with ';'."""
    users = make_users()[:2]

    GitService(runner).set_co_authors(users)

    assert runner.commands() == [
        "git config --global git-collab.co-authors "
        "Co-Authored-By: First User <first@email.com>;"
        "Co-Authored-By: Second User <second@email.com>"
    ]


def test_set_co_authors_empty(runner):
    """Test an empty co-author list clears the value."""
    GitService(runner).set_co_authors([])

    assert runner.calls[0][0] == "git config --global git-collab.co-authors "


def test_update_author_and_co_authors(runner):
    """Test first active user is author and the rest co-authors."""
    GitService(runner).update_author_and_co_authors(make_users())

    commands = runner.commands()
    assert "git config --global user.name First User" in commands
    assert commands[-1] == (
        "git config --global git-collab.co-authors "
        "Co-Authored-By: Second User <second@email.com>;"
        "Co-Authored-By: Third User <third@email.com>"
    )


def test_update_author_single_active_user(runner):
    """Test one active user gets empty co-authors."""
    GitService(runner).update_author_and_co_authors(make_users()[:1])

    assert runner.commands()[-1] == "git config --global git-collab.co-authors "


def test_update_author_nobody_active(runner):
    """Test no command runs when nobody is active."""
    GitService(runner).update_author_and_co_authors(make_users()[3:])

    assert runner.calls == []


def test_set_git_log_alias_converts_backslashes(runner):
    """Test windows paths use forward slashes in the alias."""
    GitService(runner).set_git_log_alias("windows\\style\\path\\to\\script")

    assert runner.calls[0][0] == "git config --global alias.lg !windows/style/path/to/script"


# =============================================================================
# RepoRegistry
# =============================================================================

def test_normalize_and_name():
    """Test trailing separators are removed and names derived."""
    assert normalize_path("/foo/bar/") == "/foo/bar"
    assert normalize_path("C:\\code\\proj\\") == "C:\\code\\proj"
    assert name_from_path("/foo/bar") == "bar"
    assert name_from_path("C:\\code\\proj") == "proj"


@pytest.fixture
def registry(store, collab_paths, runner):
    return RepoRegistry(store, HookInstaller(collab_paths, runner))


def test_add_valid_repo(registry, fake_repo):
    """Test adding a repo installs the hook and records it."""
    repos = registry.add(str(fake_repo) + "/")

    assert repos == [Repository(
        name="repo",
        path=str(fake_repo),
        hooks_path=str(fake_repo / ".git" / "hooks"),
        is_valid=True,
    )]
    assert (fake_repo / ".git" / "hooks" / "post-commit").read_text() == POST_COMMIT_BASE
    assert registry.get() == repos


def test_add_invalid_repo(registry, tmp_path):
    """Test invalid paths are recorded as invalid with empty hooksPath."""
    missing = str(tmp_path / "missing")

    repos = registry.add(missing)

    assert repos == [Repository(name="missing", path=missing, hooks_path="", is_valid=False)]
    assert registry.store.read()["repos"] == [
        {"name": "missing", "path": missing, "hooksPath": "", "isValid": False}
    ]


def test_add_sorts_by_name_and_replaces_existing(registry, store, fake_repo):
    """Test re-adding replaces the record and keeps name order."""
    store.write({"repos": [
        {"name": "zeta", "path": "/zeta", "hooksPath": "", "isValid": False},
        {"name": "repo", "path": str(fake_repo), "hooksPath": "", "isValid": False},
    ]})

    repos = registry.add(str(fake_repo))

    assert [r.name for r in repos] == ["repo", "zeta"]
    assert repos[0].is_valid


def test_remove_unknown_path(registry, store):
    """Test removing an unregistered path changes nothing."""
    store.write({"repos": [{"name": "a", "path": "/a", "hooksPath": "", "isValid": False}]})

    repos = registry.remove("/unknown")

    assert [r.path for r in repos] == ["/a"]


def test_remove_uninstalls_hook(registry, fake_repo):
    """Test removing a valid repo tears down its hook."""
    registry.add(str(fake_repo))

    repos = registry.remove(str(fake_repo))

    assert repos == []
    assert not (fake_repo / ".git" / "hooks" / "post-commit").exists()
    assert registry.get() == []


def test_remove_invalid_repo_skips_uninstall(registry, store, tmp_path):
    """Test invalid records are dropped without touching the filesystem."""
    store.write({"repos": [{"name": "gone", "path": str(tmp_path / "gone"), "hooksPath": "", "isValid": False}]})

    assert registry.remove(str(tmp_path / "gone")) == []


def test_remove_valid_record_without_hooks_path(store, collab_paths, runner, monkeypatch):
    """Test a valid record with empty hooksPath is dropped without uninstalling."""
    installer = HookInstaller(collab_paths, runner)
    registry = RepoRegistry(store, installer)
    store.write({"repos": [{"name": "odd", "path": "/odd", "hooksPath": "", "isValid": True}]})

    def fail(*args):
        raise AssertionError("remove should not run")

    monkeypatch.setattr(installer, "remove", fail)

    assert registry.remove("/odd") == []
    assert registry.get() == []


def test_remove_failure_keeps_record(store, collab_paths, runner, fake_repo, monkeypatch):
    """Test teardown errors propagate and the config is not updated."""
    installer = HookInstaller(collab_paths, runner)
    registry = RepoRegistry(store, installer)
    registry.add(str(fake_repo))

    def fail(*args):
        raise PermissionError("denied")

    monkeypatch.setattr(installer, "remove", fail)

    with pytest.raises(PermissionError):
        registry.remove(str(fake_repo))

    assert [r.path for r in registry.get()] == [str(fake_repo)]


def test_reconcile_updates_records(registry, store, fake_repo, tmp_path):
    """Test reconcile re-installs and refreshes validity."""
    store.write({"repos": [
        {"name": "repo", "path": str(fake_repo), "hooksPath": "", "isValid": False},
        {"name": "gone", "path": str(tmp_path / "gone"), "hooksPath": "/old", "isValid": True},
    ]})

    repos = registry.reconcile()

    assert repos[0] == Repository(name="gone", path=str(tmp_path / "gone"), hooks_path="", is_valid=False)
    assert repos[1].is_valid
    assert repos[1].hooks_path == str(fake_repo / ".git" / "hooks")


def test_reconcile_continues_after_failure(store, collab_paths, runner, fake_repo, tmp_path, monkeypatch):
    """Test one failing repo keeps its record and others still install."""
    installer = HookInstaller(collab_paths, runner)
    registry = RepoRegistry(store, installer)
    broken = {"name": "broken", "path": "/broken", "hooksPath": "/broken/.git/hooks", "isValid": True}
    store.write({"repos": [broken, {"name": "repo", "path": str(fake_repo), "hooksPath": "", "isValid": False}]})

    original_install = installer.install

    def install(path):
        if str(path) == "/broken":
            raise PermissionError("denied")
        return original_install(path)

    monkeypatch.setattr(installer, "install", install)

    repos = registry.reconcile()

    assert repos[0].to_dict() == broken
    assert repos[1].is_valid


# =============================================================================
# UserService
# =============================================================================

def test_rotate_moves_first_active_user_last(store, runner):
    """Test rotation keeps inactive users in place."""
    users = [make_users()[3]] + make_users()[:3]
    store.write({"users": [u.to_dict() for u in users]})

    rotated = UserService(store, GitService(runner)).rotate()

    assert [u.name for u in rotated] == ["Fourth User", "Second User", "Third User", "First User"]
    assert [u["name"] for u in store.read()["users"]] == [u.name for u in rotated]
    assert "git config --global user.name Second User" in runner.commands()


def test_rotate_single_active_user(store, runner):
    """Test a single active user is re-applied without reorder."""
    store.write({"users": [make_users()[0].to_dict()]})

    rotated = UserService(store, GitService(runner)).rotate()

    assert [u.name for u in rotated] == ["First User"]
    assert "git config --global user.name First User" in runner.commands()


def test_user_extra_fields_survive_rotation(store, runner):
    """Test unknown user keys are written back unchanged."""
    store.write({"users": [
        {"id": "1", "name": "A", "email": "a@x", "active": True, "rsaKeyPath": "/k/a"},
        {"id": "2", "name": "B", "email": "b@x", "active": True},
    ]})

    UserService(store, GitService(runner)).rotate()

    assert store.read()["users"] == [
        {"id": "2", "name": "B", "email": "b@x", "active": True},
        {"id": "1", "name": "A", "email": "a@x", "active": True, "rsaKeyPath": "/k/a"},
    ]
