"""Host bridge - the two hooks the host engine calls into.

- resolve_hook: static imports, synchronous, returns the module handle
- dynamic_import_hook: dynamic imports, schedules resolution on the event
  loop and completes the host's pending import when it finishes
"""

import asyncio
import logging
from typing import Any

from .context import ResolverContext
from .errors import DynamicImportError
from .errors import ModuleImportError
from .host import HookInstaller
from .resolver import ModuleResolver
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)


class HostBridge:
    """Adapts ModuleResolver to the host engine's hook mechanism."""

    def __init__(self, context: ResolverContext, resolver: ModuleResolver | None = None):
        self.context = context
        self.host = context.host
        self.resolver = resolver or ModuleResolver(context)

    def _referencing_uri(self, referencing_info: Any) -> str | None:
        uri = self.host.get_module_uri(referencing_info)
        if uri:
            logger.debug(f"Found base URI: {uri}")
        return uri

    def resolve_hook(self, referencing_info: Any, specifier: str) -> Any | None:
        """Resolve a static import. Errors propagate to the host."""
        logger.debug("Starting module import...")
        uri = self._referencing_uri(referencing_info)
        return self.resolver.resolve(specifier, uri)

    async def import_dynamic(self, referencing_info: Any, specifier: str, promise: Any) -> None:
        """Resolve a dynamic import and hand the result back to the host.

        Raises:
            DynamicImportError: Any failure, wrapped; finish_dynamic_import is
                not called in that case
        """
        logger.debug("Starting dynamic import...")
        uri = self._referencing_uri(referencing_info)

        try:
            await self.resolver.resolve_async(specifier, uri)
        except Exception as e:
            cause_kind = e.kind if isinstance(e, ModuleImportError) else None
            raise DynamicImportError(
                f"Dynamic module import failed: {format_error_message(e)}",
                specifier=specifier,
                cause_kind=cause_kind,
            ) from e

        logger.debug("Successfully imported module!")
        self.host.finish_dynamic_import(referencing_info, specifier, promise)

    def dynamic_import_hook(self, referencing_info: Any, specifier: str, promise: Any) -> asyncio.Task:
        """Schedule a dynamic import on the running event loop.

        Must be called from within the loop. The returned task always has
        its outcome observed, so a failure is logged even if nobody awaits it.
        """
        task = asyncio.get_running_loop().create_task(self.import_dynamic(referencing_info, specifier, promise))
        task.add_done_callback(self._log_dynamic_import_failure)
        return task

    @staticmethod
    def _log_dynamic_import_failure(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(format_error_message(error), exc_info=error)

    def install(self, installer: HookInstaller) -> None:
        """Register both hooks with the host's hook mechanism."""
        installer.set_module_resolve_hook(self.resolve_hook)
        installer.set_module_dynamic_import_hook(self.dynamic_import_hook)
        logger.debug("Installed module resolve and dynamic import hooks")
