"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["persistence", "email", "realtime"]

COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider with subclasses is a swappable component: exactly one
    subclass per ``__is_mock__`` value implements it.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mock: bool) -> type["ProviderBase"]:
        """Pick the subclass implementing this component.

        Concrete providers (no subclasses) return themselves.

        Raises:
            ValueError: If no subclass matches ``mock``
        """
        candidates = cls.__subclasses__()
        if not candidates:
            return cls

        for candidate in candidates:
            if candidate.__is_mock__ == mock:
                return candidate

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
