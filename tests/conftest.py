"""
Shared fixtures for the bundler tests.
"""
import itertools
import os
import sys
import tempfile

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch):
    """Keep a real ~/.luabundle/config.json from leaking into tests."""
    with tempfile.TemporaryDirectory() as home:
        monkeypatch.setenv("HOME", home)
        yield home


@pytest.fixture
def project():
    """A temporary Lua project directory with a write(relpath, content) helper."""
    with tempfile.TemporaryDirectory() as tmpdir:
        class Project:
            root = tmpdir

            def write(self, relpath, content):
                path = os.path.join(tmpdir, *relpath.split('/'))
                os.makedirs(os.path.dirname(path), exist_ok=True)
                with open(path, 'w', encoding='utf-8') as f:
                    f.write(content)
                return path

            def path(self, relpath):
                return os.path.join(tmpdir, *relpath.split('/'))

        yield Project()


@pytest.fixture
def sequential_ids():
    """Deterministic module id factory: m1, m2, ..."""
    counter = itertools.count(1)
    return lambda: f"m{next(counter)}"
