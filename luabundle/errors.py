"""
Error handling utilities for the Lua bundler.
"""


class LuaBundleError(Exception):
    """Base exception for bundling failures, with the offending reference and hints."""
    def __init__(self, message, reference=None, path=None, line_number=None, context=None, suggestion=None):
        self.message = message
        self.reference = reference
        self.path = path
        self.line_number = line_number
        self.context = context  # The offending line
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with location, context and suggestion."""
        lines = ["\n❌ Bundle Error"]
        if self.path:
            lines.append(f" in {self.path}")
        if self.line_number:
            lines.append(f" at line {self.line_number}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.context:
            lines.append(f"   > {self.context}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


class BundleConstructionError(LuaBundleError):
    """The entry file of a bundle does not exist."""


class ResolutionError(LuaBundleError):
    """A literal require reference does not resolve to a file."""


class RegistryInconsistency(LuaBundleError):
    """A resolved reference has no registered module. Indicates a bundler bug."""


class CycleDetected(LuaBundleError):
    """A module requires one of the modules that is still loading it."""
    def __init__(self, chain, reference=None):
        self.chain = list(chain)
        super().__init__(
            "Require cycle detected: " + " -> ".join(self.chain),
            reference=reference,
            path=self.chain[-2] if len(self.chain) > 1 else None,
            suggestion="Break the cycle, or set \"cycle_policy\": \"skip\" to bundle it anyway",
        )


class ConfigError(LuaBundleError):
    """The bundler configuration file could not be read or validated."""


def get_line_context(source_code, line_number):
    """Extract the line of code from source by line number (1-based)."""
    if not source_code or line_number is None:
        return None
    source_lines = source_code.split('\n')
    if 0 < line_number <= len(source_lines):
        return source_lines[line_number - 1].strip()
    return None
