"""The autouse fixture from `locator_lib.testing` clears bindings after each test.

If it did not, every parametrized run after the first would fail with
AlreadyConfiguredError.
"""
import pytest

from locator_lib import configure_bindings, get_registry, inject
from tests.helpers import FileSystem


@pytest.mark.parametrize('run', range(3))
def test_bindings_are_cleared_between_tests(run):
    assert get_registry().is_configured() is False
    file_system = FileSystem()
    configure_bindings(lambda b: b.bind_singleton(file_system))
    assert inject(FileSystem) is file_system


def test_registry_fixture_is_cleared_at_teardown(registry):
    configure_bindings(lambda b: b.bind_singleton(FileSystem()), registry)
    assert registry.is_configured() is True
