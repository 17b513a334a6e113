# notation/compiler.py
# This file is part of Seqex - Sequence Expression Matching
#
# Compilation of pattern ASTs into matcher trees

"""Compiler from pattern ASTs to matcher trees.

Names resolve in this order: definitions of the program, builtin matchers,
predicates (caller-supplied first, then builtin). References to definitions
compile to lazy matchers, so definitions may refer to each other, to
themselves, and to definitions that appear later in the source.

Builtin names:
    exactly_one, optional, zero_or_more, one_or_more, varying, ascending,
    unique; predicates even, odd, number, text

Builtin calls:
    exactly(k), between(n, m), index_range(n), seq(e, ...),
    serial(superior, e, ...), gt/ge/eq/le/lt(v), rng(low, high),
    project(function, e)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from core import (
    Matcher,
    any_of,
    ascending,
    between,
    eq,
    exactly,
    exactly_one,
    ge,
    gt,
    index_range,
    lazy,
    le,
    literal,
    logical_and,
    logical_not,
    logical_or,
    lt,
    one_or_more,
    optional,
    predicate,
    project,
    rng,
    seq,
    serial,
    unique,
    varying,
    zero_or_more,
)
from core.exceptions import MatcherDefinitionError
from utils.logger import get_logger

from .ast_nodes import And, Call, Expr, Name, Not, Or, Program, Value, ValueSet
from .exceptions import CompileError


def _is_integer(token: Any) -> bool:
    return isinstance(token, int) and not isinstance(token, bool)


def _is_number(token: Any) -> bool:
    return isinstance(token, (int, float)) and not isinstance(token, bool)


BUILTIN_MATCHERS: Dict[str, Matcher] = {
    "exactly_one": exactly_one,
    "optional": optional,
    "zero_or_more": zero_or_more,
    "one_or_more": one_or_more,
    "varying": varying,
    "ascending": ascending,
    "unique": unique,
}

BUILTIN_PREDICATES: Dict[str, Callable[[Any], bool]] = {
    "even": lambda token: _is_integer(token) and token % 2 == 0,
    "odd": lambda token: _is_integer(token) and token % 2 == 1,
    "number": _is_number,
    "text": lambda token: isinstance(token, str),
}

BUILTIN_FUNCTIONS: Dict[str, Callable[[Any], Any]] = {
    "abs": abs,
    "len": len,
    "lower": str.lower,
    "upper": str.upper,
    "str": str,
    "int": int,
}

_COMPARISONS = {"gt": gt, "ge": ge, "eq": eq, "le": le, "lt": lt}


class PatternCompiler:
    """Visitor turning a :class:`Program` into a matcher tree.

    Args:
        predicates: Extra named predicates, overriding builtin ones
        functions: Extra named projection functions, overriding builtin ones
    """

    def __init__(
        self,
        predicates: Optional[Mapping[str, Callable[[Any], Any]]] = None,
        functions: Optional[Mapping[str, Callable[[Any], Any]]] = None,
    ):
        self.predicates = dict(BUILTIN_PREDICATES)
        self.predicates.update(predicates or {})
        self.functions = dict(BUILTIN_FUNCTIONS)
        self.functions.update(functions or {})
        self._definitions: Dict[str, Expr] = {}
        self._compiled: Dict[str, Matcher] = {}
        self._references: Dict[str, Matcher] = {}

    def compile(self, program: Program) -> Matcher:
        """Compile every definition and return the main expression's matcher.

        Raises:
            CompileError: The program cannot be turned into a matcher
        """
        logger = get_logger()
        self._definitions = {}
        self._compiled = {}
        self._references = {}

        for definition in program.definitions:
            if definition.name in self._definitions:
                raise CompileError(f"Duplicate definition of '{definition.name}'")
            self._definitions[definition.name] = definition.expr

        self._check_alias_cycles()

        for name, expr in self._definitions.items():
            self._compiled[name] = expr.accept(self)
            logger.debug(f"Compiled definition '{name}'")

        return program.expr.accept(self)

    def _check_alias_cycles(self) -> None:
        # A definition that only renames another one never consumes a token,
        # so a cycle of renames would recurse forever on first use
        for start in self._definitions:
            seen = [start]
            expr = self._definitions[start]
            while isinstance(expr, Name) and expr.name in self._definitions:
                if expr.name in seen:
                    cycle = " -> ".join(seen + [expr.name])
                    raise CompileError(f"Definition cycle without any matcher: {cycle}")
                seen.append(expr.name)
                expr = self._definitions[expr.name]

    def _reference(self, name: str) -> Matcher:
        reference = self._references.get(name)
        if reference is None:
            reference = lazy(lambda: self._compiled[name])
            self._references[name] = reference
        return reference

    def visit_value(self, n: Value) -> Matcher:
        return literal(n.value)

    def visit_value_set(self, n: ValueSet) -> Matcher:
        return any_of(n.values)

    def visit_name(self, n: Name) -> Matcher:
        if n.name in self._definitions:
            return self._reference(n.name)
        if n.name in BUILTIN_MATCHERS:
            return BUILTIN_MATCHERS[n.name]
        if n.name in self.predicates:
            return predicate(self.predicates[n.name])
        raise CompileError(f"Unknown name '{n.name}'")

    def visit_not(self, n: Not) -> Matcher:
        return logical_not(n.operand.accept(self))

    def visit_and(self, n: And) -> Matcher:
        return logical_and(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: Or) -> Matcher:
        return logical_or(n.left.accept(self), n.right.accept(self))

    def visit_call(self, n: Call) -> Matcher:
        handler = getattr(self, f"_call_{n.name}", None)
        if n.name in _COMPARISONS:
            self._expect_arity(n, 1)
            return _COMPARISONS[n.name](self._value(n, 0))
        if handler is None:
            raise CompileError(f"Unknown function '{n.name}'")
        try:
            return handler(n)
        except MatcherDefinitionError as exc:
            raise CompileError(f"{n}: {exc}") from exc

    # Builtin calls

    def _call_exactly(self, n: Call) -> Matcher:
        self._expect_arity(n, 1)
        return exactly(self._integer(n, 0))

    def _call_between(self, n: Call) -> Matcher:
        self._expect_arity(n, 2)
        return between(self._integer(n, 0), self._integer(n, 1))

    def _call_index_range(self, n: Call) -> Matcher:
        self._expect_arity(n, 1)
        return index_range(self._integer(n, 0))

    def _call_seq(self, n: Call) -> Matcher:
        return seq(*(arg.accept(self) for arg in n.args))

    def _call_serial(self, n: Call) -> Matcher:
        if not n.args:
            raise CompileError(f"{n}: serial() needs a superior matcher")
        superior, *inferiors = (arg.accept(self) for arg in n.args)
        return serial(superior, *inferiors)

    def _call_rng(self, n: Call) -> Matcher:
        self._expect_arity(n, 2)
        return rng(self._value(n, 0), self._value(n, 1))

    def _call_project(self, n: Call) -> Matcher:
        self._expect_arity(n, 2)
        function = n.args[0]
        if not isinstance(function, Name) or function.name not in self.functions:
            raise CompileError(f"{n}: unknown projection function '{function}'")
        return project(self.functions[function.name], n.args[1].accept(self))

    # Argument helpers

    @staticmethod
    def _expect_arity(n: Call, count: int) -> None:
        if len(n.args) != count:
            raise CompileError(
                f"{n.name}() takes {count} argument(s), got {len(n.args)}"
            )

    @staticmethod
    def _value(n: Call, index: int) -> Any:
        arg = n.args[index]
        if not isinstance(arg, Value):
            raise CompileError(f"{n.name}() argument {index + 1} must be a number or string, got {arg}")
        return arg.value

    @classmethod
    def _integer(cls, n: Call, index: int) -> int:
        value = cls._value(n, index)
        if not isinstance(value, int):
            raise CompileError(f"{n.name}() argument {index + 1} must be an integer, got {value!r}")
        return value


def compile_program(
    program: Program,
    predicates: Optional[Mapping[str, Callable[[Any], Any]]] = None,
    functions: Optional[Mapping[str, Callable[[Any], Any]]] = None,
) -> Matcher:
    """Compile a parsed program into a matcher tree."""
    return PatternCompiler(predicates, functions).compile(program)
