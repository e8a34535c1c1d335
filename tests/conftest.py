"""Pytest configuration for esm-loader tests."""

from dataclasses import dataclass
from dataclasses import field
from typing import Any

import pytest

from esm_loader.context import ResolverContext
from esm_loader.search_path import ModuleSearchPath


@dataclass
class RegisteredModule:
    key: str
    human_id: str
    source: str


@dataclass
class FakeHost:
    """In-memory ModuleHost that records every call."""

    resources: set[str] = field(default_factory=set)
    modules: dict[str, RegisteredModule] = field(default_factory=dict)
    internal_modules: dict[str, RegisteredModule] = field(default_factory=dict)
    referencing: dict[Any, str] = field(default_factory=dict)
    reject_registration: bool = False
    compile_result: bool = True
    compiled: list[str] = field(default_factory=list)
    finished: list[tuple[Any, str, Any]] = field(default_factory=list)
    register_calls: list[tuple[str, str, str, bool]] = field(default_factory=list)

    def lookup_module(self, key):
        return self.modules.get(key)

    def register_module(self, key, human_id, source, compile_immediately=False):
        self.register_calls.append((key, human_id, source, compile_immediately))
        if self.reject_registration:
            return False
        self.modules[key] = RegisteredModule(key, human_id, source)
        return True

    def lookup_internal_module(self, name):
        return self.internal_modules.get(name)

    def register_internal_module(self, name, uri, source):
        if self.reject_registration:
            return False
        self.internal_modules[name] = RegisteredModule(name, uri, source)
        return True

    def compile_and_eval_module(self, key):
        self.compiled.append(key)
        return self.compile_result

    def get_module_uri(self, referencing_info):
        return self.referencing.get(referencing_info)

    def finish_dynamic_import(self, referencing_info, specifier, promise):
        self.finished.append((referencing_info, specifier, promise))

    def resource_exists(self, uri):
        return uri in self.resources


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def context(host):
    """Context with an empty search path; tests add the bases they need."""
    return ResolverContext(host, search_path=ModuleSearchPath())
