"""
Rewrites literal require calls to use registered module ids.
"""
from luabundle.errors import RegistryInconsistency, ResolutionError, get_line_context
from luabundle.scanner import RequireScanner


class RequireRemapper:
    """
    Replaces the string literal of every literal require call with the
    unique id of the module it resolves to. Only the literal changes; the
    rest of the text is kept as is.
    """

    def __init__(self, resolver, registry, scanner=None):
        self.resolver = resolver
        self.registry = registry
        self.scanner = scanner or RequireScanner()

    def remap(self, text, source_path=None):
        """
        Remap all literal require calls in text.

        Args:
            text: Lua source
            source_path: Where text came from, used in error messages

        Raises:
            ResolutionError: If a reference does not resolve to a file
            RegistryInconsistency: If a resolved file was never registered
        """
        parts = []
        cursor = 0
        for call in self.scanner.scan(text):
            resolved = self.resolver.resolve(call.reference)
            if resolved is None:
                raise ResolutionError(
                    f"Module \"{call.reference}\" not found",
                    reference=call.reference,
                    path=source_path,
                    line_number=call.line,
                    context=get_line_context(text, call.line),
                    suggestion="Tried: " + ", ".join(self.resolver.candidates(call.reference)),
                )
            module = self.registry.find_by_path(resolved)
            if module is None:
                raise RegistryInconsistency(
                    f"Module \"{call.reference}\" resolved to {resolved} but was never registered",
                    reference=call.reference,
                    path=source_path,
                    line_number=call.line,
                    context=get_line_context(text, call.line),
                )
            parts.append(text[cursor:call.start])
            parts.append(f"{call.quote}{module.unique_id}{call.quote}")
            cursor = call.end
        parts.append(text[cursor:])
        return "".join(parts)
