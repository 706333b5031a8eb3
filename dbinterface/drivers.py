"""Driver registry

Maps a driver tag, such as `"sqlite"`, to the factory that opens a connection for that driver. This lets
`dbinterface.connect("sqlite", ...)` find a driver without the caller importing it. Drivers register themselves with
the `register_driver` decorator, which accepts either a connection class exposing a `connect` classmethod or a plain
factory function.

Drivers bundled with dbinterface are imported the first time their tag is looked up.
"""
import importlib
import logging
from typing import Any, Callable, TypeAlias, TypeVar

from dbinterface.exceptions import OperationNotImplemented


logger = logging.getLogger(__name__)

DriverTag: TypeAlias = str
ConnectFactory: TypeAlias = Callable[..., Any]
D = TypeVar("D")

__drivers__: dict[DriverTag, ConnectFactory] = {}

_bundled_drivers: dict[DriverTag, str] = {
    "sqlite": "dbinterface.ext.drivers.sqlite",
}


def add_driver(tag: DriverTag, factory: ConnectFactory):
    """Registers a connect factory under a driver tag, replacing any factory already using that tag."""
    if tag in __drivers__ and __drivers__[tag] != factory:
        logger.debug("Replacing the connect factory registered for driver %r", tag)

    __drivers__[tag] = factory


def disable_driver(tag: DriverTag):
    """Removes a driver tag from the registry. Unknown tags are ignored."""
    __drivers__.pop(tag, None)


def register_driver(tag: DriverTag) -> Callable[[D], D]:
    """Decorator that registers a connection class or a connect function under a driver tag.

    Example:
        ```python
        @register_driver("memory")
        class MemoryConnection:
            @classmethod
            def connect(cls, name: str) -> "MemoryConnection":
                ...
        ```
    """
    def register(driver: D) -> D:
        factory = getattr(driver, "connect", None) if isinstance(driver, type) else driver
        if not callable(factory):
            raise OperationNotImplemented("connect", driver)

        add_driver(tag, factory)
        return driver

    return register


def get_driver(tag: DriverTag) -> ConnectFactory:
    """Looks up the connect factory for a driver tag, importing bundled drivers on demand.

    Raises:
        OperationNotImplemented: If no driver is registered under the tag.
    """
    if tag not in __drivers__ and tag in _bundled_drivers:
        importlib.import_module(_bundled_drivers[tag])

    try:
        return __drivers__[tag]
    except KeyError:
        raise OperationNotImplemented("connect", tag) from None
