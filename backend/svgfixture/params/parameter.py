"""Observable parameters.

A closed set of kinds (boolean, discrete, bounded, enum, mutable) sharing one base.
Listeners are called as ``listener(parameter, origin)`` after the value actually
changes; ``origin`` is whatever the caller of ``set_value`` passed, so a listener can
tell its own writes apart from everyone else's.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

Listener = Callable[["Parameter", Any], None]
E = TypeVar("E", bound=enum.Enum)


class Parameter:
    """Base observable value."""

    def __init__(self, label: str, value: Any, description: str = "") -> None:
        self.label = label
        self.description = description
        self._value = self._coerce(value)
        self._default = self._value
        self._listeners: list[Listener] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r}, {self._value!r})"

    @property
    def value(self) -> Any:
        return self._value

    @property
    def default(self) -> Any:
        return self._default

    def _coerce(self, value: Any) -> Any:
        return value

    def set_value(self, value: Any, origin: Any = None) -> Parameter:
        coerced = self._coerce(value)
        if coerced == self._value:
            return self
        self._value = coerced
        for listener in list(self._listeners):
            listener(self, origin)
        return self

    def reset(self, origin: Any = None) -> Parameter:
        return self.set_value(self._default, origin)

    def add_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            raise ValueError(f"Listener already registered on {self.label}")
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def dispose(self) -> None:
        self._listeners.clear()


class BooleanParameter(Parameter):
    def __init__(self, label: str, value: bool = False, description: str = "") -> None:
        super().__init__(label, value, description)

    def _coerce(self, value: Any) -> bool:
        return bool(value)

    @property
    def is_on(self) -> bool:
        return self._value


class DiscreteParameter(Parameter):
    """Integer value clamped to an inclusive range."""

    def __init__(
        self, label: str, value: int, min_value: int, max_value: int, description: str = ""
    ) -> None:
        if min_value > max_value:
            raise ValueError(f"{label}: empty range {min_value}..{max_value}")
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(label, value, description)

    def _coerce(self, value: Any) -> int:
        return min(max(int(round(value)), self.min_value), self.max_value)


class BoundedParameter(Parameter):
    """Float value clamped to an inclusive range."""

    def __init__(
        self, label: str, value: float, min_value: float, max_value: float, description: str = ""
    ) -> None:
        if min_value > max_value:
            raise ValueError(f"{label}: empty range {min_value}..{max_value}")
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(label, value, description)

    def _coerce(self, value: Any) -> float:
        return min(max(float(value), self.min_value), self.max_value)


class EnumParameter(Parameter, Generic[E]):
    """One member of an enum. Accepts members, member names or member values.

    ``option_labels`` replaces the members' ``str()`` as the display text of each
    choice, in member order.
    """

    def __init__(
        self, label: str, value: E, description: str = "", option_labels: list[str] | None = None
    ) -> None:
        self.enum_type: type[E] = type(value)
        if option_labels is not None and len(option_labels) != len(self.enum_type):
            raise ValueError(f"{label}: expected {len(self.enum_type)} option labels, got {len(option_labels)}")
        self._option_labels = option_labels
        super().__init__(label, value, description)

    def _coerce(self, value: Any) -> E:
        if isinstance(value, self.enum_type):
            return value
        if isinstance(value, str) and value.upper() in self.enum_type.__members__:
            return self.enum_type[value.upper()]
        try:
            return self.enum_type(value)
        except ValueError:
            raise ValueError(f"{self.label}: {value!r} is not a valid {self.enum_type.__name__}") from None

    @property
    def options(self) -> list[E]:
        return list(self.enum_type)

    @property
    def option_labels(self) -> list[str]:
        if self._option_labels is not None:
            return list(self._option_labels)
        return [str(option) for option in self.options]


class MutableParameter(Parameter):
    """Unbounded float, typically written by code rather than by a user."""

    def __init__(self, label: str, value: float = 0.0, description: str = "") -> None:
        super().__init__(label, value, description)

    def _coerce(self, value: Any) -> float:
        return float(value)
