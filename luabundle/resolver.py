"""
Resolves dotted require references to files under a base directory.
"""
import os

from luabundle.log import debug_log

DEFAULT_EXTENSIONS = (".lua", ".luau")


class PathResolver:
    """Maps "a.b.c" to <base_dir>/a/b/c.lua, falling back to .luau."""

    def __init__(self, base_dir, extensions=DEFAULT_EXTENSIONS):
        self.base_dir = os.path.abspath(base_dir)
        self.extensions = tuple(extensions)

    def candidates(self, reference):
        """Paths probed for reference, in probe order."""
        joined = os.path.join(self.base_dir, *reference.split("."))
        return [joined + ext for ext in self.extensions]

    def resolve(self, reference):
        """
        Resolve a reference to an absolute path.

        Returns:
            The first candidate that exists as a file, or None when none does
        """
        for candidate in self.candidates(reference):
            if os.path.isfile(candidate):
                return os.path.abspath(candidate)
        debug_log(f"Unresolved reference '{reference}'")
        return None
