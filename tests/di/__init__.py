"""Test doubles for the DI container.

Importing this package registers ``MockPersistenceProvider`` as the
in-memory variant of the persistence component.
"""

from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = ["MockPersistenceProvider", "build_test_container"]
