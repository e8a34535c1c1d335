"""Specifier classification and URI parsing.

A specifier is what importing code writes after `from`:
- "./util" or "../lib/x.js" - relative to the importing module
- "file:///app/main.js", "resource:///core/x.js" - absolute URI
- "widgets" - bare name, found through the internal search path
"""

import re
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


class SpecifierKind(str, Enum):
    """How a specifier will be resolved."""

    RELATIVE = "relative"
    URI = "uri"
    BARE = "bare"


@dataclass(frozen=True)
class ModuleURI:
    """A parsed module URI.

    Attributes:
        raw: The original string, unmodified
        scheme: Lowercase scheme token
    """

    raw: str
    scheme: str = field(compare=False)

    def __str__(self) -> str:
        return self.raw


def parse_scheme(text: str) -> str | None:
    """Extract the lowercase scheme of a URI string, or None if it has none."""
    match = _SCHEME_RE.match(text)
    if match is None:
        return None
    return match.group(1).lower()


def parse_uri(text: str | None) -> ModuleURI | None:
    """Parse a URI string into a ModuleURI.

    Returns:
        ModuleURI, or None when the string has no scheme
    """
    if not text:
        return None
    scheme = parse_scheme(text)
    if scheme is None:
        return None
    return ModuleURI(raw=text, scheme=scheme)


def is_relative_path(specifier: str) -> bool:
    """Check whether a specifier is a relative path."""
    return specifier.startswith("./") or specifier.startswith("../")


def classify(specifier: str) -> SpecifierKind:
    """Classify a specifier. Never raises.

    Relative paths win over everything else; anything that is neither
    relative nor scheme-prefixed is a bare name.
    """
    if is_relative_path(specifier):
        return SpecifierKind.RELATIVE
    if parse_scheme(specifier) is not None:
        return SpecifierKind.URI
    return SpecifierKind.BARE
