"""Import error taxonomy for module resolution.

Every failure surfaced by the resolver is a ModuleImportError carrying an
ImportErrorKind, so callers can tell an unregistered bare module from a
compile failure without matching on message text.
"""

from enum import Enum


class ImportErrorKind(str, Enum):
    """Kinds of import failure.

    Kinds:
    - UNKNOWN_REFERENCING_PATH: relative import with no referencing module URI
    - INVALID_MODULE_URI: a module URI has no parseable scheme
    - UNSUPPORTED_RELATIVE_SCHEME: referencing scheme has no relative resolver
    - NO_LOADER_FOR_SCHEME: no loader registered for the resolved scheme
    - REGISTRATION_FAILURE: host registry rejected the module
    - UNREGISTERED_BARE_MODULE: no search path candidate could be used
    - COMPILE_FAILURE: compile-and-evaluate of a dynamic import failed
    - GENERIC_DYNAMIC_IMPORT_FAILURE: any other dynamic import failure
    """

    UNKNOWN_REFERENCING_PATH = "unknown_referencing_path"
    INVALID_MODULE_URI = "invalid_module_uri"
    UNSUPPORTED_RELATIVE_SCHEME = "unsupported_relative_scheme"
    NO_LOADER_FOR_SCHEME = "no_loader_for_scheme"
    REGISTRATION_FAILURE = "registration_failure"
    UNREGISTERED_BARE_MODULE = "unregistered_bare_module"
    COMPILE_FAILURE = "compile_failure"
    GENERIC_DYNAMIC_IMPORT_FAILURE = "generic_dynamic_import_failure"


class ModuleImportError(ImportError):
    """Raised when a module specifier cannot be resolved, loaded or registered."""

    def __init__(self, kind: ImportErrorKind, message: str, *, specifier: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.specifier = specifier

    def __repr__(self) -> str:
        return f"ModuleImportError({self.kind.value}: {self.msg})"


class DynamicImportError(ModuleImportError):
    """Wraps any failure surfaced through the dynamic import hook.

    The kind is always GENERIC_DYNAMIC_IMPORT_FAILURE; the kind of the
    underlying ModuleImportError, if there was one, is kept in cause_kind.
    """

    def __init__(self, message: str, *, specifier: str | None = None, cause_kind: ImportErrorKind | None = None):
        super().__init__(ImportErrorKind.GENERIC_DYNAMIC_IMPORT_FAILURE, message, specifier=specifier)
        self.cause_kind = cause_kind
