"""Host engine collaborator contract.

The resolver never owns module objects. It asks the host engine to look
modules up, register source text, and compile. The kernel only defines the
contract; the host engine provides the implementation.
"""

from collections.abc import Awaitable
from typing import Any
from typing import Protocol


class ModuleHost(Protocol):
    """Protocol for the host engine's module registry and hook plumbing.

    Handles returned by lookups are opaque to the resolver.
    """

    def lookup_module(self, key: str) -> Any | None:
        """Return the registered module for a URI or specifier, or None."""
        ...

    def register_module(self, key: str, human_id: str, source: str, compile_immediately: bool = False) -> bool:
        """Register module source under key. Returns False if the host rejects it."""
        ...

    def lookup_internal_module(self, name: str) -> Any | None:
        """Return the registered internal module for a bare name, or None."""
        ...

    def register_internal_module(self, name: str, uri: str, source: str) -> bool:
        """Register an internal module under its bare name. Returns False on rejection."""
        ...

    def compile_and_eval_module(self, key: str) -> bool | Awaitable[bool]:
        """Compile and evaluate a registered module."""
        ...

    def get_module_uri(self, referencing_info: Any) -> str | None:
        """Extract the URI of the referencing module, if known."""
        ...

    def finish_dynamic_import(self, referencing_info: Any, specifier: str, promise: Any) -> None:
        """Complete a pending dynamic import."""
        ...

    def resource_exists(self, uri: str) -> bool:
        """Check whether a resource URI exists."""
        ...


class HookInstaller(Protocol):
    """The host's hook registration mechanism."""

    def set_module_resolve_hook(self, hook: Any) -> None: ...

    def set_module_dynamic_import_hook(self, hook: Any) -> None: ...
