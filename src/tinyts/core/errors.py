"""Error types for the type checker."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinyts.core.types import ObjectType, Type, TypeTag
from tinyts.utils.location import Span

if TYPE_CHECKING:
    from tinyts.core.ast import Term
    from tinyts.core.levels import Level


_KIND_MESSAGES: dict[TypeTag, str] = {
    TypeTag.BOOLEAN: "boolean expected",
    TypeTag.NUMBER: "number expected",
    TypeTag.FUNC: "function type expected",
    TypeTag.OBJECT: "object type expected",
}


class TypeCheckError(Exception):
    """Base class for checking errors.

    Carries the offending term, when known, and its source span.
    """

    term: Term | None
    location: Span | None

    def __init__(self, message: str, term: Term | None = None):
        super().__init__(message)
        self.message = message
        self.term = term
        self.location = term.loc if term is not None else None

    def describe(self, *, show_term: bool = False) -> str:
        """Render the message with its location and, optionally, the term."""
        text = self.message
        if self.location is not None:
            text = f"{self.location}: {text}"
        if show_term and self.term is not None:
            text = f"{text} at {self.term}"
        return text


class TypeMismatch(TypeCheckError):
    """Two types were required to be equal but differ."""

    def __init__(
        self,
        expected: Type,
        actual: Type,
        reason: str = "type mismatch",
        term: Term | None = None,
    ):
        self.expected = expected
        self.actual = actual
        self.reason = reason
        super().__init__(f"{reason}: expected {expected}, but got {actual}", term)


class KindExpected(TypeCheckError):
    """A type of one shape was required but another was found."""

    def __init__(self, expected: TypeTag, actual: Type, term: Term | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{_KIND_MESSAGES[expected]}, but got {actual}", term)


class UnknownVariable(TypeCheckError):
    """Variable not bound in the type environment."""

    def __init__(self, name: str, term: Term | None = None):
        self.name = name
        super().__init__(f"unknown variable: {name}", term)


class UnknownProperty(TypeCheckError):
    """Property not present in an object type."""

    def __init__(self, name: str, object_type: ObjectType, term: Term | None = None):
        self.name = name
        self.object_type = object_type
        super().__init__(f"unknown property: {name} in {object_type}", term)


class ArityMismatch(TypeCheckError):
    """Argument count differs from parameter count."""

    def __init__(self, expected: int, actual: int, term: Term | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"wrong number of arguments: expected {expected}, but got {actual}", term
        )


class UnsupportedConstruct(TypeCheckError):
    """Term shape not handled by the checker at its configured level."""

    def __init__(self, term: Term, level: Level | None = None):
        self.level = level
        message = f"not implemented yet: {type(term).__name__}"
        if level is not None:
            message = f"{message} (language level {level.value})"
        super().__init__(message, term)


class EmptySequenceResult(TypeCheckError):
    """Statement sequence without a statement that yields a value."""

    def __init__(self, term: Term | None = None):
        super().__init__("statement sequence has no result expression", term)


class DuplicateProperty(TypeCheckError):
    """Object literal names the same property twice."""

    def __init__(self, name: str, term: Term | None = None):
        self.name = name
        super().__init__(f"duplicate property: {name}", term)


class NestingTooDeep(TypeCheckError):
    """Term nesting exhausted the interpreter stack."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"term nesting too deep (recursion limit {limit})")
