"""
Unit tests for packer.py - the bundling entry points.
"""
import os

import pytest

import packer
from luabundle.errors import BundleConstructionError, LuaBundleError, ResolutionError


class TestPack:
    """Tests for pack()."""

    def test_returns_bundle_text(self, project):
        """pack() bundles the entry and its requires."""
        project.write('main.lua', 'print(require("greet").hello)')
        project.write('greet.lua', 'return { hello = "hi" }')
        result = packer.pack(project.path('main.lua'), project.root)
        assert result.startswith('local modules = {}\n')
        assert 'return { hello = "hi" }' in result
        assert '"greet"' not in result

    def test_missing_entry(self, project):
        """A missing entry propagates BundleConstructionError."""
        with pytest.raises(BundleConstructionError):
            packer.pack(project.path('main.lua'), project.root)

    def test_invalid_utf8_is_wrapped(self, project):
        """Undecodable sources become a LuaBundleError."""
        path = project.path('main.lua')
        with open(path, 'wb') as f:
            f.write(b'print("\xff\xfe")')
        with pytest.raises(LuaBundleError) as exc_info:
            packer.pack(path, project.root)
        assert 'UTF-8' in str(exc_info.value)

    def test_unreadable_config_is_wrapped(self, project, monkeypatch):
        """An OSError while loading configuration becomes a LuaBundleError."""
        project.write('main.lua', 'print(1)')
        config_path = project.path('luabundle.json')

        def deny(base_dir=None):
            raise PermissionError(13, 'Permission denied', config_path)

        monkeypatch.setattr('luabundle.bundle.load_bundle_config', deny)
        with pytest.raises(LuaBundleError) as exc_info:
            packer.pack(project.path('main.lua'), project.root)
        assert exc_info.value.path == config_path
        assert 'Permission denied' in str(exc_info.value)


class TestPackToFile:
    """Tests for pack_to_file()."""

    def test_writes_output(self, project):
        """The bundle is written and the path returned."""
        project.write('main.lua', 'print(1)')
        out = project.path('dist/bundle.lua')
        assert packer.pack_to_file(project.path('main.lua'), out, project.root) == out
        with open(out, 'r', encoding='utf-8') as f:
            assert f.read().endswith('print(1)\n')

    def test_nothing_written_on_failure(self, project):
        """A failed bundle leaves no output file."""
        project.write('main.lua', 'require("missing")')
        out = project.path('dist/bundle.lua')
        with pytest.raises(ResolutionError):
            packer.pack_to_file(project.path('main.lua'), out, project.root)
        assert not os.path.exists(out)


class TestVerbose:
    """Tests for debug logging."""

    def test_debug_output_on_stderr(self, project, capsys):
        """Verbose mode logs discovery to stderr."""
        project.write('main.lua', 'require("a")')
        project.write('a.lua', 'return 1')
        packer.set_verbose(True)
        try:
            packer.pack(project.path('main.lua'), project.root)
        finally:
            packer.set_verbose(False)
        err = capsys.readouterr().err
        assert 'DEBUG:' in err
        assert "Discovered 'a'" in err

    def test_quiet_by_default(self, project, capsys):
        """Nothing is logged unless verbose is on."""
        project.write('main.lua', 'print(1)')
        packer.pack(project.path('main.lua'), project.root)
        assert capsys.readouterr().err == ''
