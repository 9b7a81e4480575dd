"""Pytest plugin that clears bindings between tests.

Requires pytest (install ``locator-tool[pytest]``). Enable it from a
conftest with::

    pytest_plugins = ["locator_lib.testing"]

Every test then starts with an empty process-wide registry, so each test
may call `configure_bindings` without clearing first. For other test
runners call `clear_bindings()` from a teardown hook.
"""
import pytest

from locator_lib.services import Registry, clear_bindings


@pytest.fixture(autouse=True)
def clear_bindings_after_test():
    yield
    clear_bindings()


@pytest.fixture
def registry():
    """A private registry, independent of the process-wide one."""
    reg = Registry()
    yield reg
    reg.clear_bindings()
