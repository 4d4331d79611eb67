"""Static type checker for a tiny TypeScript subset."""

from tinyts.core import (
    Level,
    Type,
    TypeChecker,
    TypeCheckError,
    TypeEnv,
    type_eq,
    typecheck,
)

__version__ = "0.1.0"

__all__ = [
    "Level",
    "Type",
    "TypeCheckError",
    "TypeChecker",
    "TypeEnv",
    "type_eq",
    "typecheck",
]
