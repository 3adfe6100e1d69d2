"""Shared pytest fixtures for n tests."""

import os
import stat
import sys

import pytest

from nrun.core.models import PackageManager


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's N_* variables out of tests."""
    for key in ("N_LOG_LEVEL", "N_SEARCH_DEPTH", "N_QUIET"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_project(tmp_path):
    """
    Factory for a project root with an optional lock file.

    Returns a working directory ``depth`` levels below the root.
    """

    def _make(lock_file=None, depth=0):
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        if lock_file:
            (root / lock_file).write_text("")

        cwd = root
        for level in range(depth):
            cwd = cwd / f"level{level + 1}"
        cwd.mkdir(parents=True, exist_ok=True)
        return cwd

    return _make


@pytest.fixture
def yarn_project(make_project):
    """Directory containing yarn.lock."""
    return make_project("yarn.lock")


@pytest.fixture
def npm_project(make_project):
    """Directory containing package-lock.json."""
    return make_project("package-lock.json")


@pytest.fixture
def pnpm_project(make_project):
    """Directory containing pnpm-lock.yaml."""
    return make_project("pnpm-lock.yaml")


@pytest.fixture
def bare_project(make_project):
    """Directory with no lock file anywhere in the searched range."""
    return make_project(depth=6)


class FakeRunner:
    """Records commands instead of spawning processes."""

    def __init__(self, exit_codes=None):
        self.calls = []
        self.exit_codes = list(exit_codes or [])

    def __call__(self, manager: PackageManager, args: list[str]) -> int:
        self.calls.append((manager, list(args)))
        return self.exit_codes.pop(0) if self.exit_codes else 0


@pytest.fixture
def fake_runner():
    """Runner that always succeeds."""
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for runners with scripted exit codes."""
    return FakeRunner


@pytest.fixture
def fake_subprocess(monkeypatch):
    """
    Replace subprocess.Popen in the runner module.

    Commands are recorded in ``.calls``; exit codes are taken from
    ``.returncodes`` in order (0 once exhausted).
    """

    class FakeProcess:
        def __init__(self, returncode):
            self.returncode = returncode

        def wait(self):
            return self.returncode

    class FakePopen:
        def __init__(self):
            self.calls = []
            self.returncodes = []

        def __call__(self, cmd):
            self.calls.append(list(cmd))
            code = self.returncodes.pop(0) if self.returncodes else 0
            return FakeProcess(code)

    fake = FakePopen()
    monkeypatch.setattr("nrun.core.runner.subprocess.Popen", fake)
    monkeypatch.setattr("nrun.core.runner.shutil.which", lambda name: None)
    return fake


@pytest.fixture
def stub_manager(tmp_path, monkeypatch):
    """
    Factory installing a real shell script as a package manager on PATH.

    ``stub_manager("yarn", "exit 3")`` writes ``bin/yarn`` running the given
    script body and returns its path.
    """
    if sys.platform == "win32":
        pytest.skip("shell script stubs need a POSIX system")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def _install(name, body):
        path = bin_dir / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _install
