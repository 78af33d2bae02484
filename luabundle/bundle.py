"""
Bundle assembly.

Combines discovery, registration and remapping into a single Lua script:
the runtime prelude, one wrapped function per module, then the entry body.
"""
import os

from luabundle.config import load_bundle_config
from luabundle.errors import BundleConstructionError, LuaBundleError
from luabundle.extractor import RequireExtractor, read_source
from luabundle.log import debug_log
from luabundle.registry import ModuleRegistry, new_module_id
from luabundle.remapper import RequireRemapper
from luabundle.resolver import PathResolver
from luabundle.runtime import get_prelude
from luabundle.scanner import RequireScanner


class LuaBundle:
    """
    A single bundling operation for one entry script.

    The entry file must exist when the bundle is created. bundle() may only
    be called once; modules is filled in by that call.
    """

    def __init__(self, entry_path, base_dir=None, config=None, id_factory=new_module_id):
        if not os.path.isfile(entry_path):
            raise BundleConstructionError(
                "Entry file does not exist",
                path=entry_path,
                suggestion="Check the entry path",
            )
        self.entry_path = os.path.abspath(entry_path)
        self.base_dir = os.path.abspath(base_dir or "./")
        self.config = config if config is not None else load_bundle_config(self.base_dir)

        self.resolver = PathResolver(self.base_dir, self.config.extensions)
        self.scanner = RequireScanner()
        self.registry = ModuleRegistry(self.config, id_factory=id_factory)
        self._bundled = False

    @property
    def modules(self):
        return self.registry.modules

    def wrap_module(self, module, remapper):
        body = remapper.remap(module.content, source_path=module.resolved_path)
        return f'modules["{module.unique_id}"] = function()\n{body}\nend'

    def bundle(self):
        """
        Build the bundled script.

        Returns:
            The complete Lua source

        Raises:
            LuaBundleError: On any failure; nothing is produced in that case
        """
        if self._bundled:
            raise LuaBundleError("bundle() already ran for this entry", path=self.entry_path)
        self._bundled = True

        debug_log(f"Bundling {self.entry_path} (base: {self.base_dir})")
        main = read_source(self.entry_path)

        extractor = RequireExtractor(self.resolver, self.scanner, self.config)
        requires = extractor.extract(main, origin=self.entry_path)
        self.registry.register(requires)
        debug_log(f"{len(requires)} require(s), {len(self.registry)} module(s)")

        remapper = RequireRemapper(self.resolver, self.registry, self.scanner)
        parts = [get_prelude(self.config.memoize).rstrip("\n")]
        parts.extend(self.wrap_module(module, remapper) for module in self.modules)
        parts.append(remapper.remap(main, source_path=self.entry_path))

        return "\n".join(parts) + "\n"
