"""Registry for pivot strategy implementations.

Uses a decorator pattern for registration, enabling both built-in and
third-party strategies to register themselves at import time. The
``build()`` method passes the config to strategies whose constructor
accepts one (e.g. the seeded random strategy).
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from qselect.pivot.base import PivotStrategy

logger = logging.getLogger("qselect")


class PivotStrategyRegistry:
    """Registry mapping string names to PivotStrategy classes.

    Built-in strategies register via the ``@PivotStrategyRegistry.register()``
    decorator. The ``build()`` class method instantiates the strategy named
    by the config's ``pivot_strategy`` field.
    """

    _registry: ClassVar[dict[str, type[PivotStrategy]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[PivotStrategy]], type[PivotStrategy]]:
        """Decorator that registers a PivotStrategy class under *name*.

        Args:
            name: Identifier used in config ``pivot_strategy``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[PivotStrategy]) -> type[PivotStrategy]:
            if name in cls._registry:
                raise ValueError(f"Pivot strategy '{name}' is already registered")
            cls._registry[name] = klass
            logger.debug("Registered pivot strategy %r -> %s", name, klass.__name__)
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[PivotStrategy]:
        """Return the strategy class registered under *name*.

        Args:
            name: Identifier to look up.

        Returns:
            The registered PivotStrategy subclass.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown pivot strategy '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: Any) -> PivotStrategy:
        """Instantiate the strategy specified by *config.pivot_strategy*.

        Args:
            config: A SelectConfig (or compatible object) with a
                ``pivot_strategy`` attribute.

        Returns:
            A fully constructed PivotStrategy instance.
        """
        klass = cls.get(config.pivot_strategy)
        if "config" in inspect.signature(klass).parameters:
            return klass(config=config)  # type: ignore[call-arg]
        return klass()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry)
