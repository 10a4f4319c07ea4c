"""Small expression tree for derived query fields.

Nodes render to the semantic layer's expression syntax, e.g.
``coalesce(if(${orders.price} <= 11, 0, null), ...)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union


class Expression(ABC):
    @abstractmethod
    def render(self) -> str:
        ...

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class FieldRef(Expression):
    name: str

    def render(self) -> str:
        return "${" + self.name + "}"


@dataclass(frozen=True)
class NumberLiteral(Expression):
    value: Union[int, float]

    def render(self) -> str:
        if isinstance(self.value, float) and self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


@dataclass(frozen=True)
class Null(Expression):
    def render(self) -> str:
        return "null"


@dataclass(frozen=True)
class LessOrEqual(Expression):
    left: Expression
    right: Expression

    def render(self) -> str:
        return f"{self.left.render()} <= {self.right.render()}"


@dataclass(frozen=True)
class If(Expression):
    condition: Expression
    then: Expression
    otherwise: Expression

    def render(self) -> str:
        return (
            f"if({self.condition.render()}, "
            f"{self.then.render()}, {self.otherwise.render()})"
        )


@dataclass(frozen=True)
class Coalesce(Expression):
    """First non-null argument wins."""

    arguments: Tuple[Expression, ...]

    def render(self) -> str:
        return "coalesce(" + ", ".join(a.render() for a in self.arguments) + ")"


def bin_boundaries(minimum: float, maximum: float, bin_count: int) -> List[float]:
    """Return ``bin_count + 1`` ascending edges spanning [minimum, maximum].

    The last edge is pinned to ``maximum`` so float drift cannot leave the
    top of the range uncovered.
    """
    size = abs(maximum - minimum) / bin_count
    edges = [minimum + size * i for i in range(bin_count)]
    edges.append(maximum)
    return edges


def bin_expression(field_name: str, upper_bounds: Sequence[float]) -> Coalesce:
    """Map a field value to the index of the first bin whose upper bound holds it."""
    ref = FieldRef(field_name)
    return Coalesce(
        tuple(
            If(LessOrEqual(ref, NumberLiteral(bound)), NumberLiteral(index), Null())
            for index, bound in enumerate(upper_bounds)
        )
    )
