"""
Require discovery.

Walks the require graph from a piece of source text and returns every
(reference, resolved path) edge in depth-first pre-order.
"""
import os
from typing import List

from pydantic import BaseModel

from luabundle.config import BundleConfig, CyclePolicy
from luabundle.errors import CycleDetected, ResolutionError
from luabundle.log import debug_log
from luabundle.scanner import RequireScanner


class Require(BaseModel):
    """A discovered dependency edge."""
    reference: str
    resolved_path: str


def read_source(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


class RequireExtractor:
    """
    Collects the transitive literal requires of a source text.

    The walk is iterative: a stack of (path, pending calls) frames replaces
    recursion. A file that is fully walked is never walked again, but every
    edge to it is still reported, so the result can hold the same reference
    more than once. Requiring a file that is still on the stack is a cycle.
    """

    def __init__(self, resolver, scanner=None, config=None):
        self.resolver = resolver
        self.scanner = scanner or RequireScanner()
        self.config = config or BundleConfig()

    def extract(self, text, origin=None) -> List[Require]:
        """
        Extract requires from text and, transitively, from the files they resolve to.

        Args:
            text: Lua source to scan
            origin: Path text was read from, if any. Requiring it back is a cycle.

        Returns:
            Flattened list of Require edges in discovery order

        Raises:
            CycleDetected: On a require cycle when cycle_policy is "error"
            ResolutionError: On an unresolved reference when strict_discovery is set
        """
        found = []
        origin = os.path.abspath(origin) if origin else None
        chain = [origin] if origin else []
        finished = set()
        stack = [(origin, iter(self.scanner.scan(text)))]

        while stack:
            path, calls = stack[-1]
            call = next(calls, None)
            if call is None:
                stack.pop()
                if path:
                    chain.pop()
                    finished.add(path)
                continue

            resolved = self.resolver.resolve(call.reference)
            if resolved is None:
                if self.config.strict_discovery:
                    raise ResolutionError(
                        f"Module \"{call.reference}\" not found",
                        reference=call.reference,
                        path=path,
                        line_number=call.line,
                        suggestion="Tried: " + ", ".join(self.resolver.candidates(call.reference)),
                    )
                debug_log(f"Skipping unresolved require '{call.reference}'")
                continue

            found.append(Require(reference=call.reference, resolved_path=resolved))

            if resolved in chain:
                if self.config.cycle_policy == CyclePolicy.ERROR:
                    cycle = chain[chain.index(resolved):] + [resolved]
                    raise CycleDetected(cycle, reference=call.reference)
                debug_log(f"Cycle through {resolved} skipped")
                continue
            if resolved in finished:
                continue

            debug_log(f"Discovered '{call.reference}' -> {resolved}")
            chain.append(resolved)
            stack.append((resolved, iter(self.scanner.scan(read_source(resolved)))))

        return found
