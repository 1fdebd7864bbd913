"""
Layered secret sources.

A ``SecretLayer`` holds the key/value data fetched for one context. A
``CompositeSecretSource`` stacks layers in precedence order: the first layer
containing a key wins.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class SecretLayer(Mapping[str, Any]):
    """Read-only key/value data fetched for a single context."""

    def __init__(self, name: str, data: Mapping[str, Any] | None = None):
        self.name = name
        self._data = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        # Keys only, values are secrets
        return f"SecretLayer(name={self.name!r}, keys={sorted(self._data)!r})"


class CompositeSecretSource:
    """Ordered stack of layers with first-match-wins lookup."""

    def __init__(self, name: str):
        self.name = name
        self._layers: list[SecretLayer] = []

    def add_layer(self, layer: SecretLayer) -> None:
        """Append a layer with lower precedence than those already added."""
        self._layers.append(layer)

    @property
    def layers(self) -> tuple[SecretLayer, ...]:
        return tuple(self._layers)

    def get(self, key: str, default: Any = None) -> Any:
        for layer in self._layers:
            if key in layer:
                return layer[key]
        return default

    def find_layer(self, key: str) -> SecretLayer | None:
        """Return the layer that supplies ``key``, if any."""
        for layer in self._layers:
            if key in layer:
                return layer
        return None

    def property_names(self) -> list[str]:
        """All keys across layers, in first-seen order."""
        names: dict[str, None] = {}
        for layer in self._layers:
            for key in layer:
                names.setdefault(key, None)
        return list(names)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a plain dict honouring layer precedence."""
        return {key: self.get(key) for key in self.property_names()}

    def __contains__(self, key: object) -> bool:
        return any(key in layer for layer in self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __repr__(self) -> str:
        names = [layer.name for layer in self._layers]
        return f"CompositeSecretSource(name={self.name!r}, layers={names!r})"


__all__ = ["SecretLayer", "CompositeSecretSource"]
