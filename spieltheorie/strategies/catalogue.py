"""Name-keyed catalogue of strategy factories."""

from __future__ import annotations

import random
from typing import Callable, Dict, Iterator, List, Sequence, Type

from ..errors import UnknownStrategyError
from .base import BaseStrategy

StrategyClass = Type[BaseStrategy]
StrategyFactory = Callable[[], BaseStrategy]


def canon(name: str) -> str:
    """Normalize a strategy name for comparisons."""
    return "".join(ch for ch in name.lower() if ch.isalnum())


class StrategyCatalogue:
    """Ordered mapping from display name to a zero-argument factory.

    Stateless strategies are built once and the factory hands back that
    instance every time. Strategies flagged ``stateful`` get a brand-new
    instance per call, so every match starts from a clean slate.
    """

    def __init__(self, classes: Sequence[StrategyClass] = (), rng: random.Random | None = None):
        self._rng = rng
        self._factories: Dict[str, StrategyFactory] = {}
        self._classes: Dict[str, StrategyClass] = {}
        for cls in classes:
            self.register(cls)

    def register(self, cls: StrategyClass) -> StrategyFactory:
        rng = self._rng
        if cls.stateful:
            def factory() -> BaseStrategy:
                return cls(rng=rng)
            name = factory().name()
        else:
            shared = cls(rng=rng)
            def factory() -> BaseStrategy:
                return shared
            name = shared.name()
        if name in self._factories:
            raise ValueError(f"Duplicate strategy name: {name}")
        self._factories[name] = factory
        self._classes[name] = cls
        return factory

    def names(self) -> List[str]:
        return list(self._factories)

    def factories(self) -> List[StrategyFactory]:
        return list(self._factories.values())

    def resolve(self, name: str) -> str:
        """Return the catalogue's spelling of ``name``."""
        if name in self._factories:
            return name
        wanted = canon(name)
        for known in self._factories:
            if canon(known) == wanted:
                return known
        raise UnknownStrategyError(f"Unknown strategy: {name!r}")

    def factory(self, name: str) -> StrategyFactory:
        return self._factories[self.resolve(name)]

    def create(self, name: str) -> BaseStrategy:
        return self.factory(name)()

    def describe(self, name: str) -> str:
        return (self._classes[self.resolve(name)].__doc__ or "").strip()

    def subset(self, names: Sequence[str]) -> "StrategyCatalogue":
        """Catalogue restricted to ``names``, kept in this catalogue's order."""
        keep = {self.resolve(n) for n in names}
        sub = StrategyCatalogue(rng=self._rng)
        for name, cls in self._classes.items():
            if name in keep:
                sub._factories[name] = self._factories[name]
                sub._classes[name] = cls
        return sub

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            self.resolve(name)
        except UnknownStrategyError:
            return False
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
