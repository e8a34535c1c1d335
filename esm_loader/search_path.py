"""Internal module search path.

Bases are probed in insertion order, so a base added earlier shadows a
same-named module under a later one.
"""

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)

ESM_MODULES_BASE = "resource:///esm_loader/modules/esm/"
CORE_MODULES_BASE = "resource:///esm_loader/modules/core/"

# ESM variants must shadow core variants of the same bare name.
DEFAULT_SEARCH_BASES = (ESM_MODULES_BASE, CORE_MODULES_BASE)


class ModuleSearchPath:
    """Insertion-ordered set of base URIs for bare-name lookup."""

    def __init__(self, bases: list[str] | tuple[str, ...] | None = None):
        self._bases: dict[str, None] = {}
        for base in bases or ():
            self.add_search_base(base)

    def add_search_base(self, uri: str) -> None:
        """Append a base URI. Re-adding an existing base keeps its original position."""
        if uri in self._bases:
            return
        self._bases[uri] = None
        logger.debug(f"Added module search base {uri}")

    @property
    def bases(self) -> list[str]:
        return list(self._bases)

    def candidate_uris(self, specifier: str) -> list[str]:
        """Build the probe list for a bare specifier, one URI per base.

        Candidates are not guaranteed to exist.
        """
        candidates = []
        for base in self._bases:
            prefix = base[:-1] if base.endswith("/") else base
            candidate = f"{prefix}/{specifier}.js"
            logger.debug(f"Built internal URI {candidate} with {specifier} for {base}")
            candidates.append(candidate)
        return candidates

    def __len__(self) -> int:
        return len(self._bases)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._bases))

    def __repr__(self) -> str:
        return f"ModuleSearchPath({self.bases})"
