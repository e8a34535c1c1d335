"""Tests for error message formatting."""

import asyncio

from esm_loader.errors import DynamicImportError
from esm_loader.errors import ImportErrorKind
from esm_loader.errors import ModuleImportError
from esm_loader.utils.error_format import escape_markup
from esm_loader.utils.error_format import format_error_message


class TestFormatErrorMessage:
    def test_module_import_error_shows_kind(self):
        error = ModuleImportError(ImportErrorKind.UNREGISTERED_BARE_MODULE, "Attempted to load unregistered global module: x")

        assert format_error_message(error) == (
            "[unregistered_bare_module] Attempted to load unregistered global module: x"
        )
        assert format_error_message(error, include_type=False) == "Attempted to load unregistered global module: x"

    def test_plain_exception(self):
        assert format_error_message(ValueError("bad")) == "ValueError: bad"

    def test_empty_message_uses_friendly_fallback(self):
        assert format_error_message(TimeoutError()) == "TimeoutError: Loader timed out."
        assert format_error_message(asyncio.CancelledError()) == "CancelledError: Import was cancelled."

    def test_empty_unknown_exception(self):
        assert format_error_message(RuntimeError()) == "RuntimeError: (no additional details)"


class TestImportErrors:
    def test_module_import_error_is_import_error(self):
        error = ModuleImportError(ImportErrorKind.COMPILE_FAILURE, "boom", specifier="x")

        assert isinstance(error, ImportError)
        assert error.kind is ImportErrorKind.COMPILE_FAILURE
        assert error.specifier == "x"
        assert str(error) == "boom"

    def test_dynamic_import_error_kind(self):
        error = DynamicImportError("failed", cause_kind=ImportErrorKind.COMPILE_FAILURE)

        assert error.kind is ImportErrorKind.GENERIC_DYNAMIC_IMPORT_FAILURE
        assert error.cause_kind is ImportErrorKind.COMPILE_FAILURE


def test_escape_markup():
    assert escape_markup("[red]x") == "\\[red]x"
