"""
Module registry: deduplicates discovered requires into bundle modules.
"""
import uuid
from typing import List

from pydantic import BaseModel

from luabundle.config import BundleConfig, DedupKey
from luabundle.extractor import read_source
from luabundle.log import debug_log


class Module(BaseModel):
    """A Lua source file wrapped into the bundle under an opaque id."""
    reference: str      # Lua path used in `require`
    resolved_path: str  # Absolute file path
    unique_id: str
    content: str


def new_module_id():
    return str(uuid.uuid4())


class ModuleRegistry:
    """Ordered, deduplicated set of modules for one bundle."""

    def __init__(self, config=None, id_factory=new_module_id):
        self.config = config or BundleConfig()
        self.id_factory = id_factory
        self.modules: List[Module] = []
        self._keys = set()

    def _key(self, reference, resolved_path):
        if self.config.dedup_key == DedupKey.PATH:
            return resolved_path
        return reference

    def register(self, requires) -> List[Module]:
        """
        Register each require not seen before, in order.

        Content is read from disk once per registered module.
        """
        for req in requires:
            key = self._key(req.reference, req.resolved_path)
            if key in self._keys:
                continue
            self._keys.add(key)
            module = Module(
                reference=req.reference,
                resolved_path=req.resolved_path,
                unique_id=self.id_factory(),
                content=read_source(req.resolved_path),
            )
            debug_log(f"Registered '{module.reference}' as {module.unique_id}")
            self.modules.append(module)
        return self.modules

    def find_by_path(self, resolved_path):
        """First registered module loaded from resolved_path, or None."""
        for module in self.modules:
            if module.resolved_path == resolved_path:
                return module
        return None

    def __len__(self):
        return len(self.modules)

    def __iter__(self):
        return iter(self.modules)
