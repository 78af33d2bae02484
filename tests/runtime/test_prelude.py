"""
Unit tests for the runtime prelude.
"""
from luabundle.runtime import get_prelude


class TestGetPrelude:
    """Tests for get_prelude()."""

    def test_plain_prelude(self):
        """The default prelude re-runs the module on every call."""
        prelude = get_prelude()
        assert prelude.startswith('local modules = {}\n')
        assert 'local require = function(name)' in prelude
        assert 'return modules[name]()' in prelude
        assert 'loaded' not in prelude

    def test_memoized_prelude(self):
        """The memoized prelude caches each module's first result."""
        prelude = get_prelude(memoize=True)
        assert prelude.startswith('local modules = {}\n')
        assert 'local loaded = {}' in prelude
        assert 'loaded[name] = entry' in prelude
        assert 'return entry.value' in prelude
