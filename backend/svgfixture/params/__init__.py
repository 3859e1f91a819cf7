"""Observable parameters and the group collaborators built on them."""

from svgfixture.params.parameter import (
    BooleanParameter,
    BoundedParameter,
    DiscreteParameter,
    EnumParameter,
    MutableParameter,
    Parameter,
)
from svgfixture.params.sum import SumParameter
from svgfixture.params.sync import SyncParameter

__all__ = [
    "BooleanParameter",
    "BoundedParameter",
    "DiscreteParameter",
    "EnumParameter",
    "MutableParameter",
    "Parameter",
    "SumParameter",
    "SyncParameter",
]
