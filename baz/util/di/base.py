"""Provider base class shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for in-memory doubles
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider tagged for prod/mock selection.

    A provider class that has subclasses is a swappable component: one
    subclass is the production implementation, another (``__is_mock__ =
    True``) lives under ``tests/di``. A provider without subclasses is used
    as is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())
