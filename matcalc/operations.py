"""Composable operations on square matrices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from matcalc.matrix import SquareMatrix


class Operation(ABC):
    """An operation taking a number of matrices and producing one."""

    @abstractmethod
    def input_count(self) -> int:
        """Number of input matrices compute() expects."""

    @abstractmethod
    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        """Apply the operation to its inputs."""

    @abstractmethod
    def describe(self, top_level: bool = False) -> str:
        """Return the textual form of the operation."""

    def describe_with_inputs(self, inputs: Sequence[SquareMatrix]) -> str:
        """Return the operation followed by each of its input matrices."""
        parts = [self.describe()]
        parts.extend(f"(\n{matrix})" for matrix in inputs[: self.input_count()])
        return "".join(parts)


class UnaryOperation(Operation):
    """An operation on a single matrix."""

    def input_count(self) -> int:
        return 1


class BinaryOperation(Operation):
    """An operation combining two sub-operations."""

    symbol = ""

    def __init__(self, first: Operation, second: Operation) -> None:
        self.first = first
        self.second = second

    def input_count(self) -> int:
        return self.first.input_count() + self.second.input_count()

    def describe(self, top_level: bool = False) -> str:
        body = f"{self.first.describe()} {self.symbol} {self.second.describe()}"
        return body if top_level else f"({body})"

    def _split(self, inputs: Sequence[SquareMatrix]):
        left = self.first.compute(inputs)
        rest = list(inputs[self.first.input_count():])
        return left, rest


class Add(BinaryOperation):
    """Sum of two operations' results."""

    symbol = "+"

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        left, rest = self._split(inputs)
        return left + self.second.compute(rest)


class Sub(BinaryOperation):
    """Difference of two operations' results."""

    symbol = "-"

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        left, rest = self._split(inputs)
        return left - self.second.compute(rest)


class Comp(BinaryOperation):
    """Composition: the first result becomes the second's first input."""

    symbol = " -> "

    def input_count(self) -> int:
        return self.first.input_count() + self.second.input_count() - 1

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        left, rest = self._split(inputs)
        return self.second.compute([left, *rest])


class Identity(UnaryOperation):
    """Returns its input unchanged."""

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        return inputs[0]

    def describe(self, top_level: bool = False) -> str:
        return "id"


class Scalar(UnaryOperation):
    """Multiplies its input by a fixed integer."""

    def __init__(self, scalar: int) -> None:
        self.scalar = scalar

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        return inputs[0] * self.scalar

    def describe(self, top_level: bool = False) -> str:
        return f"scal {self.scalar}"


class Transpose(UnaryOperation):
    """Transposes its input."""

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        return inputs[0].transpose()

    def describe(self, top_level: bool = False) -> str:
        return "tran"