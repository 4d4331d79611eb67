"""Syntax-directed type checker."""

import sys

from loguru import logger

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
    PropertyType,
    Type,
    TypeTag,
    type_eq,
)


class TypeChecker:
    """Syntax-directed type checker for one language level."""

    def __init__(self, level: Level = Level.OBJ):
        """Initialize for a language level.

        Args:
            level: Terms introduced above this level are rejected with
                UnsupportedConstruct.
        """
        self.level = level
        self._accepted = level.terms

    def typecheck(self, term: Term, env: TypeEnv) -> Type:
        """Compute the type of a term in an environment.

        Args:
            term: Term to check
            env: Types of the names in scope

        Returns:
            The type of the term

        Raises:
            TypeCheckError: On the first rule the term violates
        """
        if type(term) not in self._accepted:
            raise UnsupportedConstruct(term, self.level)

        match term:
            case TrueLit() | FalseLit():
                return BooleanType()

            case NumberLit():
                return NumberType()

            case If(cond, thn, els):
                cond_type = self.typecheck(cond, env)
                if not isinstance(cond_type, BooleanType):
                    raise KindExpected(TypeTag.BOOLEAN, cond_type, cond)
                thn_type = self.typecheck(thn, env)
                els_type = self.typecheck(els, env)
                if not type_eq(thn_type, els_type):
                    raise TypeMismatch(
                        thn_type, els_type, "then and else must have the same type", term
                    )
                return thn_type

            case Add(left, right):
                for operand in (left, right):
                    operand_type = self.typecheck(operand, env)
                    if not isinstance(operand_type, NumberType):
                        raise KindExpected(TypeTag.NUMBER, operand_type, operand)
                return NumberType()

            case Var(name):
                try:
                    return env.lookup(name)
                except KeyError as e:
                    raise UnknownVariable(name, term) from e

            case Func(params, body):
                # Declared parameter types are trusted and shadow outer names
                body_env = env.extend_many((p.name, p.type) for p in params)
                ret_type = self.typecheck(body, body_env)
                return FuncType(params, ret_type)

            case Call(func, args):
                return self._check_call(term, func, args, env)

            case Seq(body, rest):
                self.typecheck(body, env)
                return self.typecheck(rest, env)

            case Const(name, init, rest):
                init_type = self.typecheck(init, env)
                return self.typecheck(rest, env.extend(name, init_type))

            case Seq2(body):
                return self._check_statements(term, body, env)

            case ObjectNew(props):
                seen: set[str] = set()
                prop_types = []
                for prop in props:
                    if prop.name in seen:
                        raise DuplicateProperty(prop.name, term)
                    seen.add(prop.name)
                    prop_types.append(PropertyType(prop.name, self.typecheck(prop.term, env)))
                return ObjectType(tuple(prop_types))

            case ObjectGet(obj, prop_name):
                obj_type = self.typecheck(obj, env)
                if not isinstance(obj_type, ObjectType):
                    raise KindExpected(TypeTag.OBJECT, obj_type, obj)
                prop_type = obj_type.lookup(prop_name)
                if prop_type is None:
                    raise UnknownProperty(prop_name, obj_type, term)
                return prop_type

            case _:
                # Const2 outside of a Seq2 lands here as well
                raise UnsupportedConstruct(term)

    def _check_call(self, term: Call, func: Term, args: tuple[Term, ...], env: TypeEnv) -> Type:
        func_type = self.typecheck(func, env)
        if not isinstance(func_type, FuncType):
            raise KindExpected(TypeTag.FUNC, func_type, func)
        if len(func_type.params) != len(args):
            raise ArityMismatch(len(func_type.params), len(args), term)
        for arg, param in zip(args, func_type.params):
            arg_type = self.typecheck(arg, env)
            if not type_eq(arg_type, param.type):
                raise TypeMismatch(param.type, arg_type, "parameter type mismatch", arg)
        return func_type.ret_type

    def _check_statements(self, term: Seq2, body: tuple[Term, ...], env: TypeEnv) -> Type:
        """Check a statement sequence, threading bindings forward.

        A Const2 binding stays visible for the rest of the sequence but never
        leaves it, since only the local `env` is rebound.
        """
        last_type: Type | None = None
        for stmt in body:
            match stmt:
                case Const2(name, init):
                    init_type = self.typecheck(init, env)
                    env = env.extend(name, init_type)
                case _:
                    last_type = self.typecheck(stmt, env)
        if last_type is None:
            raise EmptySequenceResult(term)
        return last_type


def typecheck(term: Term, env: TypeEnv | None = None, *, level: Level = Level.OBJ) -> Type:
    """Type check a whole term.

    Args:
        term: Term to check
        env: Initial environment; empty when omitted
        level: Language level to accept

    Returns:
        The type of the term

    Raises:
        TypeCheckError: If the term is ill-typed
    """
    checker = TypeChecker(level)
    logger.debug("typecheck.start level={} root={}", level.value, type(term).__name__)
    try:
        ty = checker.typecheck(term, env if env is not None else TypeEnv.empty())
    except RecursionError as e:
        raise NestingTooDeep(sys.getrecursionlimit()) from e
    except TypeCheckError as e:
        logger.debug("typecheck.error {}: {}", type(e).__name__, e.describe())
        raise
    logger.debug("typecheck.done type={}", ty)
    return ty
