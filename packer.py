import os

from luabundle.bundle import LuaBundle
from luabundle.errors import LuaBundleError
from luabundle.log import debug_log, set_verbose

__all__ = ['pack', 'pack_to_file', 'set_verbose']


def pack(entry_path, base_dir=None, config=None):
    """
    Bundle a Lua entry script and its requires into one script.

    Args:
        entry_path: The script to run first
        base_dir: Directory dotted references resolve against (default: cwd)
        config: Optional BundleConfig. If None, luabundle.json is looked up.

    Raises:
        LuaBundleError: If the entry is missing or any require can't be bundled
    """
    try:
        bundler = LuaBundle(entry_path, base_dir, config)
        return bundler.bundle()
    except LuaBundleError:
        raise  # Re-raise our custom errors
    except UnicodeDecodeError as e:
        raise LuaBundleError(
            message=f"Source is not valid UTF-8: {e.reason}",
            suggestion="Save the file as UTF-8",
        ) from e
    except OSError as e:
        raise LuaBundleError(
            message=f"Could not read file: {e.strerror or e}",
            path=e.filename,
        ) from e


def pack_to_file(entry_path, output_path, base_dir=None, config=None):
    """Bundle entry_path and write the result to output_path. Returns output_path."""
    code = pack(entry_path, base_dir, config)

    out_dir = os.path.dirname(output_path)
    if out_dir and not os.path.exists(out_dir):
        os.makedirs(out_dir)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(code)
    debug_log(f"Wrote bundle to {output_path}")

    return output_path
