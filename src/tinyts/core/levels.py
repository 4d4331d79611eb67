"""Language levels: which term shapes each variant of the language accepts."""

from enum import Enum

from tinyts.core.ast import (
    Add,
    Call,
    Const,
    Const2,
    FalseLit,
    Func,
    If,
    NumberLit,
    ObjectGet,
    ObjectNew,
    Seq,
    Seq2,
    Term,
    TrueLit,
    Var,
)


class Level(str, Enum):
    """Cumulative language levels, smallest first."""

    ARITH = "arith"
    BASIC = "basic"
    BATCH = "batch"
    OBJ = "obj"

    @property
    def terms(self) -> frozenset[type[Term]]:
        """Term classes accepted at this level."""
        return _LEVEL_TERMS[self]


# Shapes introduced by each level; a level accepts its own and all earlier ones.
_INTRODUCED: list[tuple[Level, tuple[type[Term], ...]]] = [
    (Level.ARITH, (TrueLit, FalseLit, NumberLit, If, Add)),
    (Level.BASIC, (Var, Func, Call, Seq, Const)),
    (Level.BATCH, (Seq2, Const2)),
    (Level.OBJ, (ObjectNew, ObjectGet)),
]


def _build_level_terms() -> dict[Level, frozenset[type[Term]]]:
    result: dict[Level, frozenset[type[Term]]] = {}
    accepted: frozenset[type[Term]] = frozenset()
    for level, introduced in _INTRODUCED:
        accepted = accepted | frozenset(introduced)
        result[level] = accepted
    return result


_LEVEL_TERMS = _build_level_terms()
