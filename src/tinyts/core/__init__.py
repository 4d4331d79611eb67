"""Core language: AST, types, environments and the type checker."""

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
    PropertyTerm,
    Seq,
    Seq2,
    Term,
    TrueLit,
    Var,
)
from tinyts.core.checker import TypeChecker, typecheck
from tinyts.core.env import TypeEnv
from tinyts.core.errors import (
    ArityMismatch,
    DuplicateProperty,
    EmptySequenceResult,
    KindExpected,
    NestingTooDeep,
    TypeCheckError,
    TypeMismatch,
    UnknownProperty,
    UnknownVariable,
    UnsupportedConstruct,
)
from tinyts.core.levels import Level
from tinyts.core.types import (
    BooleanType,
    FuncType,
    NumberType,
    ObjectType,
    Param,
    PropertyType,
    Type,
    TypeTag,
    type_eq,
)

__all__ = [
    # AST
    "Term",
    "TrueLit",
    "FalseLit",
    "NumberLit",
    "If",
    "Add",
    "Var",
    "Func",
    "Call",
    "Seq",
    "Const",
    "Seq2",
    "Const2",
    "ObjectNew",
    "ObjectGet",
    "PropertyTerm",
    # Types
    "Type",
    "TypeTag",
    "BooleanType",
    "NumberType",
    "FuncType",
    "ObjectType",
    "Param",
    "PropertyType",
    "type_eq",
    # Environment
    "TypeEnv",
    # Levels
    "Level",
    # Errors
    "TypeCheckError",
    "TypeMismatch",
    "KindExpected",
    "UnknownVariable",
    "UnknownProperty",
    "ArityMismatch",
    "UnsupportedConstruct",
    "EmptySequenceResult",
    "DuplicateProperty",
    "NestingTooDeep",
    # Type Checker
    "TypeChecker",
    "typecheck",
]
