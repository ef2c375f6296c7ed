"""Shared test fixtures for prustbowo."""

from pathlib import Path

import pytest

from prustbowo.commands.runner import CommandError
from prustbowo.templates import PROJECT_TREE


class FakeRunner:
    """Records invocations instead of launching processes.

    ``fail`` holds program names (argv[0]) that should raise CommandError;
    ``outputs`` maps program names to stdout returned by ``read``.
    """

    def __init__(self, fail=(), outputs=None):
        self.calls = []
        self.fail = set(fail)
        self.outputs = outputs or {}

    def _check(self, argv):
        if argv[0] in self.fail:
            raise CommandError(argv, 1, "boom")

    def run(self, argv, cwd, quiet=False):
        self.calls.append((list(argv), Path(cwd)))
        self._check(argv)

    def read(self, argv, cwd):
        self.calls.append((list(argv), Path(cwd)))
        self._check(argv)
        return self.outputs.get(argv[0], "")

    @property
    def argvs(self):
        return [argv for argv, _ in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def project(tmp_path):
    """An extracted (unsubstituted) project tree without git."""
    root = tmp_path / "demo-api"
    root.mkdir()
    PROJECT_TREE.extract(root)
    return root


@pytest.fixture
def make_runner():
    """Factory for FakeRunner with failing programs or canned output."""
    return FakeRunner
