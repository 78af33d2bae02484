# luabundle - Lua Bundler Components
"""
Core modules for the Lua bundler:
- errors: Bundling exceptions with formatted messages
- config: Bundling policies (extensions, dedup key, cycles, memoization)
- grammar: Lark token grammar for Lua
- scanner: Literal require call detection
- resolver: Dotted reference to file path resolution
- extractor: Transitive require discovery
- registry: Module deduplication and opaque ids
- remapper: Require call rewriting
- runtime: Runtime prelude for bundled output
- bundle: Final script assembly
"""

from .errors import (
    LuaBundleError,
    BundleConstructionError,
    ResolutionError,
    RegistryInconsistency,
    CycleDetected,
    ConfigError,
)
from .config import BundleConfig, CyclePolicy, DedupKey, load_bundle_config
from .resolver import PathResolver
from .scanner import RequireScanner
from .extractor import RequireExtractor
from .registry import Module, ModuleRegistry
from .remapper import RequireRemapper
from .bundle import LuaBundle

__all__ = [
    'LuaBundleError',
    'BundleConstructionError',
    'ResolutionError',
    'RegistryInconsistency',
    'CycleDetected',
    'ConfigError',
    'BundleConfig',
    'CyclePolicy',
    'DedupKey',
    'load_bundle_config',
    'PathResolver',
    'RequireScanner',
    'RequireExtractor',
    'Module',
    'ModuleRegistry',
    'RequireRemapper',
    'LuaBundle',
]
