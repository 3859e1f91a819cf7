"""Group proxy parameter.

While enabled, changes to the lead parameter are pushed to every child. If a child
is changed by anyone else, sync turns itself off to signal an out-of-sync group.
Pushes are tagged with this object as their origin, which is how child listeners
recognise them; no reentrancy flag is needed.
"""

from __future__ import annotations

import logging
from typing import Any

from svgfixture.params.parameter import BooleanParameter, Parameter

logger = logging.getLogger(__name__)


class SyncParameter:
    def __init__(self, parameter: Parameter, enabled: bool = True) -> None:
        self.parameter = parameter
        self.enabled = BooleanParameter(
            "Enabled",
            enabled,
            description="Whether changes to this parameter are pushed to child parameters",
        )
        self._children: list[Parameter] = []
        self.parameter.add_listener(self._lead_changed)
        self.enabled.add_listener(self._enabled_changed)

    @property
    def label(self) -> str:
        return self.parameter.label

    @property
    def children(self) -> tuple[Parameter, ...]:
        return tuple(self._children)

    def add_child(self, child: Parameter) -> SyncParameter:
        if any(c is child for c in self._children):
            raise ValueError(f"Child parameter already exists in collection: {child!r}")
        if type(child) is not type(self.parameter):
            raise TypeError(
                f"Cannot sync {type(child).__name__} to {type(self.parameter).__name__}"
            )
        self._children.append(child)
        if self.enabled.is_on:
            child.set_value(self.parameter.value, origin=self)
        child.add_listener(self._child_changed)
        return self

    def remove_child(self, child: Parameter) -> bool:
        for i, c in enumerate(self._children):
            if c is child:
                del self._children[i]
                child.remove_listener(self._child_changed)
                return True
        return False

    def _push_to_children(self) -> None:
        value = self.parameter.value
        for child in self._children:
            child.set_value(value, origin=self)

    def _lead_changed(self, parameter: Parameter, origin: Any) -> None:
        if self.enabled.is_on:
            self._push_to_children()

    def _enabled_changed(self, parameter: Parameter, origin: Any) -> None:
        if self.enabled.is_on:
            # Sync was turned on. Bring the children back in line.
            self._push_to_children()

    def _child_changed(self, parameter: Parameter, origin: Any) -> None:
        if origin is not self and self.enabled.is_on:
            logger.debug("%s out of sync: %s changed independently", self.label, parameter.label)
            self.enabled.set_value(False, origin=self)

    def dispose(self) -> None:
        for child in list(self._children):
            self.remove_child(child)
        self.parameter.remove_listener(self._lead_changed)
        self.enabled.remove_listener(self._enabled_changed)
