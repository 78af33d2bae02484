# Lua Runtime Shim
"""
Runtime prelude placed at the top of every bundle.

The shim is kept in real .lua files so it can be linted and run on its
own, and is read from disk at bundle time.
"""

import os


def get_prelude(memoize=False):
    """
    Read the runtime prelude.

    Args:
        memoize: If True, use the prelude that runs each module once and
                 caches its result. Otherwise every require call re-runs
                 the module body.
    """
    runtime_dir = os.path.dirname(__file__)
    name = 'prelude_memoized.lua' if memoize else 'prelude.lua'
    with open(os.path.join(runtime_dir, name), 'r', encoding='utf-8') as f:
        return f.read()
