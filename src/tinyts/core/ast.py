"""Term AST for the checked expression language."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from tinyts.core.types import Param
from tinyts.utils.location import Span


class Term:
    """Base class for terms.

    Every concrete term carries an optional source span in `loc`. The span
    is keyword-only and excluded from equality and from positional
    pattern matching. `tag` is the node name used by the parser output.
    """

    tag: str
    loc: Span | None


@dataclass(frozen=True)
class TrueLit(Term):
    """Boolean literal `true`."""

    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "true"

    def __str__(self) -> str:
        return "true"


@dataclass(frozen=True)
class FalseLit(Term):
    """Boolean literal `false`."""

    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "false"

    def __str__(self) -> str:
        return "false"


@dataclass(frozen=True)
class NumberLit(Term):
    """Numeric literal."""

    n: float
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "number"

    def __str__(self) -> str:
        return str(self.n)


@dataclass(frozen=True)
class If(Term):
    """Conditional: cond ? thn : els."""

    cond: Term
    thn: Term
    els: Term
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "if"

    def __str__(self) -> str:
        return f"({self.cond} ? {self.thn} : {self.els})"


@dataclass(frozen=True)
class Add(Term):
    """Numeric addition: left + right."""

    left: Term
    right: Term
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "add"

    def __str__(self) -> str:
        return f"({self.left} + {self.right})"


@dataclass(frozen=True)
class Var(Term):
    """Variable reference by name."""

    name: str
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "var"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Func(Term):
    """Function literal: (x: σ, y: τ) => body.

    Parameter types are declared, never inferred.
    """

    params: tuple[Param, ...]
    body: Term
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "func"

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.params)
        return f"(({params}) => {self.body})"


@dataclass(frozen=True)
class Call(Term):
    """Function application: func(arg, ...)."""

    func: Term
    args: tuple[Term, ...]
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "call"

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.args)
        return f"{self.func}({args})"


@dataclass(frozen=True)
class Seq(Term):
    """Sequencing: body; rest. The type of body is discarded."""

    body: Term
    rest: Term
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "seq"

    def __str__(self) -> str:
        return f"{self.body}; {self.rest}"


@dataclass(frozen=True)
class Const(Term):
    """Lexical binding: const name = init; rest.

    The binding is only visible inside rest.
    """

    name: str
    init: Term
    rest: Term
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "const"

    def __str__(self) -> str:
        return f"const {self.name} = {self.init}; {self.rest}"


@dataclass(frozen=True)
class Const2(Term):
    """Statement binding inside a Seq2: const name = init;

    Only meaningful as a statement of a Seq2, where the binding stays in
    scope for every later statement of the same sequence.
    """

    name: str
    init: Term
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "const2"

    def __str__(self) -> str:
        return f"const {self.name} = {self.init};"


@dataclass(frozen=True)
class Seq2(Term):
    """Batched statements. The last non-binding statement gives the type."""

    body: tuple[Term, ...]
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "seq2"

    def __str__(self) -> str:
        parts = []
        for stmt in self.body:
            match stmt:
                case Const2():
                    parts.append(str(stmt))
                case _:
                    parts.append(f"{stmt};")
        return " ".join(parts)


@dataclass(frozen=True)
class PropertyTerm:
    """Property of an object literal: name: term."""

    name: str
    term: Term

    def __str__(self) -> str:
        return f"{self.name}: {self.term}"


@dataclass(frozen=True)
class ObjectNew(Term):
    """Object literal: { foo: t1, bar: t2 }."""

    props: tuple[PropertyTerm, ...]
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "objectNew"

    def __str__(self) -> str:
        if not self.props:
            return "{}"
        props = ", ".join(str(p) for p in self.props)
        return f"{{ {props} }}"


@dataclass(frozen=True)
class ObjectGet(Term):
    """Property projection: obj.prop_name."""

    obj: Term
    prop_name: str
    loc: Span | None = field(default=None, compare=False, repr=False, kw_only=True)

    tag = "objectGet"

    def __str__(self) -> str:
        return f"{self.obj}.{self.prop_name}"


# Export the term union for type checking
TermRepr = Union[
    TrueLit,
    FalseLit,
    NumberLit,
    If,
    Add,
    Var,
    Func,
    Call,
    Seq,
    Const,
    Const2,
    Seq2,
    ObjectNew,
    ObjectGet,
]
