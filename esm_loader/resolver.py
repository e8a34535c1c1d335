"""Module resolution - sync path for static imports, async path for dynamic imports.

Resolution order (first match wins):
1. Module cache (absolute URI or already-registered specifier)
2. Internal module cache (bare name)
3. Relative path or URI, loaded through the scheme's loader
4. Internal search path, probed base by base
"""

import inspect
import logging
from typing import Any

from .context import ResolverContext
from .errors import ImportErrorKind
from .errors import ModuleImportError
from .specifiers import ModuleURI
from .specifiers import is_relative_path
from .specifiers import parse_uri

logger = logging.getLogger(__name__)

RESOURCE_SCHEME = "resource"


class ModuleResolver:
    """Resolves specifiers to registered modules against a ResolverContext."""

    def __init__(self, context: ResolverContext):
        self.context = context
        self.host = context.host
        self.schemes = context.schemes
        self.search_path = context.search_path

    # ----- Specifier to URI -----

    def resolve_relative_path(self, module_uri: str | None, relative_path: str) -> str:
        """Resolve a relative path against the referencing module's URI.

        Raises:
            ModuleImportError: Referencing URI unknown or invalid, or its
                scheme has no relative resolver
        """
        if not module_uri:
            raise ModuleImportError(
                ImportErrorKind.UNKNOWN_REFERENCING_PATH,
                "Cannot import from relative path when module path is unknown.",
                specifier=relative_path,
            )

        logger.debug(f"moduleURI: {module_uri}")

        parsed = parse_uri(module_uri)
        if parsed is None:
            raise ModuleImportError(
                ImportErrorKind.INVALID_MODULE_URI,
                f"Module has invalid URI: {module_uri}",
                specifier=relative_path,
            )

        resolver = self.schemes.relative_resolver_for(parsed.scheme)
        if resolver is None:
            allowed = ", ".join(f"{s}://" for s in self.schemes.allowed_relative_schemes)
            raise ModuleImportError(
                ImportErrorKind.UNSUPPORTED_RELATIVE_SCHEME,
                f"Relative imports can only occur from the following URI schemes: {allowed}",
                specifier=relative_path,
            )

        return resolver(parsed, relative_path)

    def resolve_specifier(self, specifier: str, module_uri: str | None = None) -> ModuleURI | None:
        """Turn a relative or URI specifier into a ModuleURI.

        Returns:
            ModuleURI, or None for a bare specifier
        """
        if is_relative_path(specifier):
            resolved = self.resolve_relative_path(module_uri, specifier)
            parsed = parse_uri(resolved)
            if parsed is None:
                raise ModuleImportError(
                    ImportErrorKind.INVALID_MODULE_URI,
                    f"Relative import {specifier} from {module_uri} resolved to invalid URI: {resolved}",
                    specifier=specifier,
                )
            return parsed

        return parse_uri(specifier)

    # ----- Loading -----

    def load_uri(self, uri: ModuleURI) -> str | None:
        """Load source text through the scheme's synchronous loader."""
        logger.debug(f"URI: {uri.raw}")

        loader = self.schemes.loader_for(uri.scheme)
        if loader is None:
            raise ModuleImportError(
                ImportErrorKind.NO_LOADER_FOR_SCHEME,
                f"No resolver found for URI: {uri.raw}",
            )
        return loader(uri)

    async def load_uri_async(self, uri: ModuleURI) -> str | None:
        """Load source text through the scheme's asynchronous loader."""
        logger.debug(f"URI: {uri.raw}")

        loader = self.schemes.async_loader_for(uri.scheme)
        if loader is None:
            raise ModuleImportError(
                ImportErrorKind.NO_LOADER_FOR_SCHEME,
                f"No resolver found for URI: {uri.raw}",
            )
        return await loader(uri)

    def _cached(self, specifier: str) -> Any | None:
        module = self.host.lookup_module(specifier)
        if module is not None:
            return module
        return self.host.lookup_internal_module(specifier)

    # ----- Static imports -----

    def resolve(self, specifier: str, module_uri: str | None = None) -> Any | None:
        """Resolve a static import to a registered module handle.

        Args:
            specifier: Import specifier
            module_uri: URI of the importing module, if known

        Returns:
            Module handle, or None when the loader produced no source or the
            host rejected an internal module

        Raises:
            ModuleImportError: Resolution failed
        """
        logger.debug(f"Resolving: {specifier}")

        cached = self._cached(specifier)
        if cached is not None:
            return cached

        parsed = self.resolve_specifier(specifier, module_uri)
        if parsed is not None:
            uri = parsed.raw
            logger.debug(f"Full path found: {uri}")

            # A relative import may land on a module that is already loaded
            module = self.host.lookup_module(uri)
            if module is not None:
                return module

            text = self.load_uri(parsed)
            if not text:
                return None

            if not self.host.register_module(uri, uri, text, compile_immediately=False):
                raise ModuleImportError(
                    ImportErrorKind.REGISTRATION_FAILURE,
                    f"Failed to register module: {uri}",
                    specifier=specifier,
                )
            return self.host.lookup_module(uri)

        return self._resolve_internal(specifier)

    def _resolve_internal(self, specifier: str) -> Any | None:
        exists = self.host.resource_exists
        uri = next((c for c in self.search_path.candidate_uris(specifier) if exists(c)), None)
        if uri is None:
            raise ModuleImportError(
                ImportErrorKind.UNREGISTERED_BARE_MODULE,
                f"Attempted to load unregistered global module: {specifier}",
                specifier=specifier,
            )

        # Internal modules always live behind the resource scheme
        loader = self.schemes.loader_for(RESOURCE_SCHEME)
        if loader is None:
            raise ModuleImportError(
                ImportErrorKind.NO_LOADER_FOR_SCHEME,
                f"No resolver found for URI: {uri}",
                specifier=specifier,
            )
        text = loader(parse_uri(uri) or ModuleURI(raw=uri, scheme=RESOURCE_SCHEME))
        if not text:
            return None

        if not self.host.register_internal_module(specifier, uri, text):
            logger.debug(f"Host rejected internal module {specifier} at {uri}")
            return None

        return self.host.lookup_internal_module(specifier)

    # ----- Dynamic imports -----

    async def resolve_async(self, specifier: str, module_uri: str | None = None) -> None:
        """Resolve, register and compile a dynamic import.

        Completes without a value; the caller re-queries the host registry.

        Raises:
            ModuleImportError: Resolution, registration or compilation failed
        """
        logger.debug(f"Resolving (asynchronously): {specifier}...")

        if self._cached(specifier) is not None:
            return

        parsed = self.resolve_specifier(specifier, module_uri)
        if parsed is None:
            await self._resolve_internal_async(specifier)
            return

        uri = parsed.raw
        if self.host.lookup_module(uri) is not None:
            return

        text = await self.load_uri_async(parsed)
        if not text:
            return

        if not self.host.register_module(uri, uri, text):
            raise ModuleImportError(
                ImportErrorKind.REGISTRATION_FAILURE,
                f"Failed to register module: {uri}",
                specifier=specifier,
            )

        if self.host.lookup_module(uri) is None:
            raise ModuleImportError(
                ImportErrorKind.GENERIC_DYNAMIC_IMPORT_FAILURE,
                "Unknown dynamic import error occurred.",
                specifier=specifier,
            )

        compiled = self.host.compile_and_eval_module(uri)
        if inspect.isawaitable(compiled):
            compiled = await compiled
        if not compiled:
            raise ModuleImportError(
                ImportErrorKind.COMPILE_FAILURE,
                f"Failed to compile and evaluate module {uri}.",
                specifier=specifier,
            )

    async def _resolve_internal_async(self, specifier: str) -> None:
        # Sequential probe: the first base that loads wins
        for candidate in self.search_path.candidate_uris(specifier):
            try:
                parsed = parse_uri(candidate)
                if parsed is None:
                    raise ModuleImportError(
                        ImportErrorKind.INVALID_MODULE_URI,
                        f"Module has invalid URI: {candidate}",
                        specifier=specifier,
                    )

                text = await self.load_uri_async(parsed)
                if not text:
                    raise ModuleImportError(
                        ImportErrorKind.UNREGISTERED_BARE_MODULE,
                        f"Empty source for internal module: {specifier} at {candidate}.",
                        specifier=specifier,
                    )

                if not self.host.register_internal_module(specifier, candidate, text):
                    raise ModuleImportError(
                        ImportErrorKind.REGISTRATION_FAILURE,
                        f"Failed to register internal module: {specifier} at {candidate}.",
                        specifier=specifier,
                    )

                if self.host.lookup_internal_module(specifier) is not None:
                    return
            except Exception as e:
                logger.debug(f"Failed to load {candidate}: {e}")

        raise ModuleImportError(
            ImportErrorKind.UNREGISTERED_BARE_MODULE,
            f"Attempted to load unregistered global module: {specifier}",
            specifier=specifier,
        )
