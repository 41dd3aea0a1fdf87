"""Provider base class and swappable component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components whose provider has a production and an in-memory variant
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base of every provider in the wishes container.

    A provider class with subclasses is a swappable component: it names the
    component in ``__mock_component__`` and each subclass declares whether
    it is the in-memory variant through ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
