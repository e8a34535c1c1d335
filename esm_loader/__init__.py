"""esm-loader - module resolution and loading engine.

Resolves import specifiers (relative paths, URIs and bare names) to module
identities registered with a host engine, through scheme loader plugins and
an internal module search path.
"""

from .bridge import HostBridge
from .context import ResolverContext
from .context import create_context
from .errors import DynamicImportError
from .errors import ImportErrorKind
from .errors import ModuleImportError
from .host import HookInstaller
from .host import ModuleHost
from .resolver import ModuleResolver
from .schemes import SchemeBuilder
from .schemes import SchemeRegistry
from .search_path import DEFAULT_SEARCH_BASES
from .search_path import ModuleSearchPath
from .settings import LoaderSettings
from .settings import load_settings
from .specifiers import ModuleURI
from .specifiers import SpecifierKind
from .specifiers import classify
from .specifiers import parse_uri

__all__ = [
    "DEFAULT_SEARCH_BASES",
    "DynamicImportError",
    "HookInstaller",
    "HostBridge",
    "ImportErrorKind",
    "LoaderSettings",
    "ModuleHost",
    "ModuleImportError",
    "ModuleResolver",
    "ModuleSearchPath",
    "ModuleURI",
    "ResolverContext",
    "SchemeBuilder",
    "SchemeRegistry",
    "SpecifierKind",
    "classify",
    "create_context",
    "load_settings",
    "parse_uri",
]
