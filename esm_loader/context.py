"""Resolver context - the single per-process home of loader state.

Startup code builds one context, lets loader plugins register their
schemes on it, and hands it to the host bridge.
"""

import logging

from .host import ModuleHost
from .schemes import SchemeBuilder
from .schemes import SchemeRegistry
from .search_path import DEFAULT_SEARCH_BASES
from .search_path import ModuleSearchPath
from .settings import LoaderSettings

logger = logging.getLogger(__name__)


class ResolverContext:
    """Owns the scheme registry, the internal search path and the host.

    Attributes:
        host: Host engine collaborator
        schemes: Scheme loader registry
        search_path: Internal module search path
    """

    def __init__(
        self,
        host: ModuleHost,
        schemes: SchemeRegistry | None = None,
        search_path: ModuleSearchPath | None = None,
    ):
        self.host = host
        self.schemes = schemes or SchemeRegistry()
        self.search_path = search_path if search_path is not None else ModuleSearchPath(DEFAULT_SEARCH_BASES)

    def register_scheme(self, *schemes: str) -> SchemeBuilder:
        """Register loader capabilities for one or more URI schemes."""
        return self.schemes.register(*schemes)

    def add_search_base(self, uri: str) -> None:
        """Declare a base URI for built-in modules."""
        self.search_path.add_search_base(uri)

    def __repr__(self) -> str:
        return f"ResolverContext(schemes={self.schemes.schemes}, search_path={self.search_path.bases})"


def build_search_path(settings: LoaderSettings) -> ModuleSearchPath:
    """Build the search path from settings: defaults first, then configured bases."""
    bases: list[str] = []
    if settings.include_default_search_paths:
        bases.extend(DEFAULT_SEARCH_BASES)
    bases.extend(settings.search_paths)
    return ModuleSearchPath(bases)


def create_context(host: ModuleHost, settings: LoaderSettings | None = None) -> ResolverContext:
    """Create a resolver context from settings.

    Args:
        host: Host engine collaborator
        settings: Loader settings (default: LoaderSettings())

    Returns:
        ResolverContext with its search path populated
    """
    settings = settings or LoaderSettings()
    search_path = build_search_path(settings)
    logger.debug(f"Created resolver context with {len(search_path)} search bases")
    return ResolverContext(host, search_path=search_path)
