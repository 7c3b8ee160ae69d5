"""What an expression evaluates to.

A Value is either a Monomial (a constant, or a constant times ONE variable to the first power) or a Sum of
values. Anything of a higher degree can't be represented, so the evaluator has to fail before it would build one.

Sums are not flattened or combined here: a Sum may contain other Sums and like terms. That's the
canonicalizer's job. Values are never mutated after construction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from .latex import bracketfy, format_number, latex_term


class Value(ABC):
    @abstractmethod
    def negate(self) -> "Value":
        pass

    @abstractmethod
    def as_list(self) -> List["Value"]:
        """The terms of a sum. A monomial is a sum of one term."""
        pass

    @abstractmethod
    def latex(self) -> str:
        pass

    def __neg__(self) -> "Value":
        return self.negate()


@dataclass(frozen=True)
class Monomial(Value):
    coefficient: float
    variable: Optional[str] = None

    @property
    def is_constant(self) -> bool:
        return self.variable is None

    def negate(self) -> "Monomial":
        return Monomial(-self.coefficient, self.variable)

    def as_list(self) -> List[Value]:
        return [self]

    def __repr__(self) -> str:
        return format_number(self.coefficient) + (self.variable or "")

    def latex(self) -> str:
        return latex_term(self.coefficient, self.variable)


@dataclass(frozen=True)
class Sum(Value):
    values: List[Value]

    def negate(self) -> "Sum":
        return Sum([v.negate() for v in self.values])

    def as_list(self) -> List[Value]:
        return list(self.values)

    def __repr__(self) -> str:
        if not self.values:
            return "0"
        return " + ".join([repr(self.values[0])] + [f"({v!r})" for v in self.values[1:]])

    def latex(self) -> str:
        return " + ".join(v.latex() if isinstance(v, Monomial) else bracketfy(v.latex()) for v in self.values)

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)
