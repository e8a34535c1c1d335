"""Scheme registry - loader plugins keyed by URI scheme.

Loader plugins register at startup:

    context.register_scheme("file", "resource") \\
        .relative_resolver(resolve_relative) \\
        .loader(load_sync) \\
        .async_loader(load_async)

Each scheme may carry any subset of the three capabilities. Later
registrations for the same capability replace earlier ones.
"""

import logging
from collections.abc import Awaitable
from collections.abc import Callable

from .specifiers import ModuleURI

logger = logging.getLogger(__name__)

RelativeResolver = Callable[[ModuleURI, str], str]
Loader = Callable[[ModuleURI], str | None]
AsyncLoader = Callable[[ModuleURI], Awaitable[str | None]]


class SchemeBuilder:
    """Applies capability registrations to every scheme it was created for."""

    def __init__(self, registry: "SchemeRegistry", schemes: tuple[str, ...]):
        self._registry = registry
        self.schemes = schemes

    def relative_resolver(self, handler: RelativeResolver) -> "SchemeBuilder":
        """Register a relative-path resolver and allow relative imports from these schemes."""
        self._registry._set("relative_resolver", self.schemes, handler)
        return self

    def loader(self, handler: Loader) -> "SchemeBuilder":
        """Register a synchronous loader."""
        self._registry._set("loader", self.schemes, handler)
        return self

    def async_loader(self, handler: AsyncLoader) -> "SchemeBuilder":
        """Register an asynchronous loader."""
        self._registry._set("async_loader", self.schemes, handler)
        return self

    def __repr__(self) -> str:
        return f"SchemeBuilder({', '.join(self.schemes)})"


class SchemeRegistry:
    """Capability tables for scheme loader plugins.

    Absence of a capability is a normal outcome; lookups return None.
    """

    def __init__(self) -> None:
        self._relative_resolvers: dict[str, RelativeResolver] = {}
        self._loaders: dict[str, Loader] = {}
        self._async_loaders: dict[str, AsyncLoader] = {}
        self._tables: dict[str, dict] = {
            "relative_resolver": self._relative_resolvers,
            "loader": self._loaders,
            "async_loader": self._async_loaders,
        }

    def register(self, *schemes: str) -> SchemeBuilder:
        """Start a registration for one or more schemes.

        Raises:
            ValueError: No scheme names given
        """
        if not schemes:
            raise ValueError("register() requires at least one scheme name")
        return SchemeBuilder(self, tuple(s.lower() for s in schemes))

    def _set(self, capability: str, schemes: tuple[str, ...], handler) -> None:
        table = self._tables[capability]
        for scheme in schemes:
            table[scheme] = handler
        logger.debug(f"Registered {capability} for {', '.join(schemes)}")

    def relative_resolver_for(self, scheme: str) -> RelativeResolver | None:
        return self._relative_resolvers.get(scheme)

    def loader_for(self, scheme: str) -> Loader | None:
        return self._loaders.get(scheme)

    def async_loader_for(self, scheme: str) -> AsyncLoader | None:
        return self._async_loaders.get(scheme)

    @property
    def allowed_relative_schemes(self) -> list[str]:
        """Schemes relative imports may be resolved against, in registration order."""
        return list(self._relative_resolvers)

    @property
    def schemes(self) -> list[str]:
        """Every scheme with at least one registered capability."""
        seen: dict[str, None] = {}
        for table in self._tables.values():
            for scheme in table:
                seen.setdefault(scheme, None)
        return list(seen)

    def capabilities(self, scheme: str) -> dict[str, bool]:
        """Report which capabilities a scheme has."""
        return {capability: scheme in table for capability, table in self._tables.items()}
