from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers
from dependency_injector.providers import Provider

from kanjiten.core import Container, container
from kanjiten.database import DatabaseSession

T = TypeVar("T")


def _provider_name(provider: Provider[T]) -> str:
    for name, declared in container.providers.items():
        if declared is provider:
            return name
    raise ValueError(f"Provider is not declared on the container: {provider!r}")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Every call builds its own container bound to the request-scoped session,
    so requests served concurrently never share a db override. The shared
    ``container`` is only used to name the provider.
    """
    name = _provider_name(provider)

    def dependency(db: DatabaseSession) -> T:
        request_container = Container(db=providers.Object(db))
        request_provider: Provider[T] = getattr(request_container, name)
        return request_provider()

    return dependency
