"""Safe error message formatting utilities.

Import failures reach users through log lines and the CLI. Some exceptions
(TimeoutError, CancelledError) have an empty str(), which would render as
"Error: " with nothing after it; this module always produces a message.
"""

from __future__ import annotations

import asyncio

from rich.markup import escape as _escape_markup

from ..errors import ModuleImportError

# Friendly messages for exception types known to have empty str()
FRIENDLY_MESSAGES: dict[type, str] = {
    TimeoutError: "Loader timed out.",
    asyncio.CancelledError: "Import was cancelled.",
    FileNotFoundError: "Module source not found.",
    PermissionError: "Module source is not readable.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a useful display message.

    Args:
        e: The exception to format
        include_type: Whether to include the exception type name

    Returns:
        A non-empty message

    Examples:
        >>> format_error_message(TimeoutError())
        'TimeoutError: Loader timed out.'

        >>> format_error_message(ValueError("invalid input"), include_type=False)
        'invalid input'
    """
    error_str = str(e)
    error_type = type(e).__name__

    if error_str:
        # The kind already names an import failure precisely
        if isinstance(e, ModuleImportError):
            return f"[{e.kind.value}] {error_str}" if include_type else error_str
        if include_type and error_type not in error_str:
            return f"{error_type}: {error_str}"
        return error_str

    for exc_type, friendly_msg in FRIENDLY_MESSAGES.items():
        if isinstance(e, exc_type):
            return f"{error_type}: {friendly_msg}"

    return f"{error_type}: (no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    Specifiers and URIs can contain brackets that Rich would read as tags.
    """
    return _escape_markup(str(value))
