"""Read-only parameter holding the live sum of its children."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from svgfixture.params.parameter import MutableParameter, Parameter


class SumParameter(MutableParameter):
    def __init__(self, label: str, description: str = "") -> None:
        super().__init__(label, 0.0, description)
        self._children: list[Parameter] = []

    @property
    def children(self) -> tuple[Parameter, ...]:
        return tuple(self._children)

    def set_value(self, value: Any, origin: Any = None) -> SumParameter:
        raise TypeError(f"{self.label} is computed from its children and cannot be set")

    def add_child(self, parameter: Parameter) -> SumParameter:
        if self.has_child(parameter):
            raise ValueError(f"Child parameter already exists in collection: {parameter!r}")
        self._children.append(parameter)
        parameter.add_listener(self._child_changed)
        self._refresh()
        return self

    def has_child(self, parameter: Parameter) -> bool:
        return any(c is parameter for c in self._children)

    def remove_child(self, parameter: Parameter) -> bool:
        for i, c in enumerate(self._children):
            if c is parameter:
                del self._children[i]
                parameter.remove_listener(self._child_changed)
                self._refresh()
                return True
        return False

    def _child_changed(self, parameter: Parameter, origin: Any) -> None:
        self._refresh()

    def _refresh(self) -> None:
        super().set_value(self.compute_group(self._children), origin=self)

    def compute_group(self, parameters: Sequence[Parameter]) -> float:
        """Summary of the children. Override for min/max/mean style groups."""
        return float(sum(p.value for p in parameters))

    def dispose(self) -> None:
        for child in list(self._children):
            self.remove_child(child)
        super().dispose()
