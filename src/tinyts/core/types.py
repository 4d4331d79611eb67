"""Type representations and structural type equality."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class TypeTag(str, Enum):
    """Tag naming the shape of a type."""

    BOOLEAN = "Boolean"
    NUMBER = "Number"
    FUNC = "Func"
    OBJECT = "Object"


class Type:
    """Base class for types."""

    tag: TypeTag


@dataclass(frozen=True)
class BooleanType(Type):
    """The type of `true` and `false`."""

    tag = TypeTag.BOOLEAN

    def __str__(self) -> str:
        return "boolean"


@dataclass(frozen=True)
class NumberType(Type):
    """The type of numeric literals and sums."""

    tag = TypeTag.NUMBER

    def __str__(self) -> str:
        return "number"


@dataclass(frozen=True)
class Param:
    """Function parameter: name plus declared type.

    Shared by function terms and function types. The name is kept for
    display only; it never takes part in type equality.
    """

    name: str
    type: Type

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass(frozen=True)
class FuncType(Type):
    """Function type: (x: σ, y: τ) => ρ."""

    params: tuple[Param, ...]
    ret_type: Type

    tag = TypeTag.FUNC

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.params)
        return f"({params}) => {self.ret_type}"


@dataclass(frozen=True)
class PropertyType:
    """Property of an object type."""

    name: str
    type: Type

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass(frozen=True)
class ObjectType(Type):
    """Structural object type: { foo: σ; bar: τ }.

    Property order is kept as written but is irrelevant to equality.
    """

    props: tuple[PropertyType, ...]

    tag = TypeTag.OBJECT

    def __str__(self) -> str:
        if not self.props:
            return "{}"
        props = "; ".join(str(p) for p in self.props)
        return f"{{ {props} }}"

    def lookup(self, name: str) -> Type | None:
        """Return the type of the first property called `name`, if any."""
        for prop in self.props:
            if prop.name == name:
                return prop.type
        return None


# Export the type union for type checking
TypeRepr = Union[BooleanType, NumberType, FuncType, ObjectType]


def type_eq(ty1: Type, ty2: Type) -> bool:
    """Structural equality of two types.

    Dispatches on the shape of `ty2`, then requires `ty1` to have the same
    shape. Function parameters are compared by position and their names are
    ignored. Object properties are compared by name regardless of order.

    Raises:
        ValueError: If `ty2` is not one of the known type shapes.
    """
    match ty2:
        case BooleanType():
            return isinstance(ty1, BooleanType)
        case NumberType():
            return isinstance(ty1, NumberType)
        case FuncType(params2, ret2):
            if not isinstance(ty1, FuncType):
                return False
            if len(ty1.params) != len(params2):
                return False
            for p1, p2 in zip(ty1.params, params2):
                if not type_eq(p1.type, p2.type):
                    return False
            return type_eq(ty1.ret_type, ret2)
        case ObjectType(props2):
            if not isinstance(ty1, ObjectType):
                return False
            if len(ty1.props) != len(props2):
                return False
            for prop2 in props2:
                prop1_type = ty1.lookup(prop2.name)
                if prop1_type is None:
                    return False
                if not type_eq(prop1_type, prop2.type):
                    return False
            return True
        case _:
            raise ValueError(f"Unknown type shape: {ty2!r}")
