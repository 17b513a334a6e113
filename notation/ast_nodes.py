# notation/ast_nodes.py
# This file is part of Seqex - Sequence Expression Matching
#
# Abstract Syntax Tree node classes for pattern representation

"""AST node classes for parsed patterns.

Node Types:
    Value: Number or string literal
    ValueSet: Set of literal values ({1, 2, 'a'})
    Name: Reference to a builtin, a predicate or a definition
    Call: Builtin applied to arguments (seq(...), exactly(3), ...)
    Not, And, Or: Boolean operators
    Definition: Named expression (name = expr;)
    Program: Definitions followed by the main expression

Nodes are immutable and hashable, and their string form parses back to an
equal tree. All nodes support the visitor design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern."""

    def visit_value(self, n: Value): ...

    def visit_value_set(self, n: ValueSet): ...

    def visit_name(self, n: Name): ...

    def visit_call(self, n: Call): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    return str(value)


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression nodes."""

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Value(Expr):
    """Number or string matched by equality.

    Attributes:
        value: The literal value
    """

    value: Any

    def accept(self, v: Visitor):
        return v.visit_value(self)

    def __str__(self) -> str:
        return _format_value(self.value)


@dataclass(frozen=True, slots=True)
class ValueSet(Expr):
    """Set of values matched by membership.

    Attributes:
        values: Literal values in source order
    """

    values: Tuple[Any, ...]

    def accept(self, v: Visitor):
        return v.visit_value_set(self)

    def __str__(self) -> str:
        return "{" + ", ".join(_format_value(value) for value in self.values) + "}"


@dataclass(frozen=True, slots=True)
class Name(Expr):
    """Bare identifier."""

    name: str

    def accept(self, v: Visitor):
        return v.visit_name(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Call(Expr):
    """Builtin applied to argument expressions.

    Attributes:
        name: Builtin name
        args: Argument expressions
    """

    name: str
    args: Tuple[Expr, ...]

    def accept(self, v: Visitor):
        return v.visit_call(self)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(arg) for arg in self.args)})"


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Coarse negation of its operand."""

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Conjunction: both operands must match."""

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Disjunction: either operand may match."""

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} | {self.right})"


@dataclass(frozen=True, slots=True)
class Definition:
    """Named expression introduced with ``name = expr;``."""

    name: str
    expr: Expr

    def __str__(self) -> str:
        return f"{self.name} = {self.expr};"


@dataclass(frozen=True, slots=True)
class Program:
    """Definitions followed by the expression to match.

    Attributes:
        definitions: Named expressions, in source order
        expr: Main expression
    """

    definitions: Tuple[Definition, ...]
    expr: Expr

    def __str__(self) -> str:
        return " ".join([str(d) for d in self.definitions] + [str(self.expr)])
