"""Decode parser output into core terms and types.

The TypeScript subset parser emits plain JSON objects tagged by a `tag`
field, e.g. ``{"tag": "add", "left": {...}, "right": {...}}``. Nodes may
carry a ``loc`` with ``start``/``end`` positions, which is kept as a Span.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from tinyts.core import ast as core
from tinyts.core.env import TypeEnv
from tinyts.core.types import (
    BooleanType,
    FuncType,
    NumberType,
    ObjectType,
    Param,
    PropertyType,
    Type,
)
from tinyts.utils.location import Location, Span


class DecodeError(ValueError):
    """Input is not a well-formed term or type tree."""

    def __init__(self, message: str, path: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class Decoder:
    """Decodes tagged JSON nodes into terms and types.

    Args:
        file: Source file name recorded in decoded locations
    """

    def __init__(self, file: str | None = None):
        self.file = file

    def term(self, data: Any, path: str = "$") -> core.Term:
        """Decode a term node."""
        loc = self._loc(data, path)
        match data:
            case {"tag": "true"}:
                return core.TrueLit(loc=loc)
            case {"tag": "false"}:
                return core.FalseLit(loc=loc)
            case {"tag": "number", "n": int() | float() as n} if not isinstance(n, bool):
                return core.NumberLit(n, loc=loc)
            case {"tag": "if", "cond": cond, "thn": thn, "els": els}:
                return core.If(
                    self.term(cond, f"{path}.cond"),
                    self.term(thn, f"{path}.thn"),
                    self.term(els, f"{path}.els"),
                    loc=loc,
                )
            case {"tag": "add", "left": left, "right": right}:
                return core.Add(
                    self.term(left, f"{path}.left"),
                    self.term(right, f"{path}.right"),
                    loc=loc,
                )
            case {"tag": "var", "name": str() as name}:
                return core.Var(name, loc=loc)
            case {"tag": "func", "params": list() as params, "body": body}:
                return core.Func(
                    self._params(params, f"{path}.params"),
                    self.term(body, f"{path}.body"),
                    loc=loc,
                )
            case {"tag": "call", "func": func, "args": list() as args}:
                return core.Call(
                    self.term(func, f"{path}.func"),
                    tuple(self.term(arg, f"{path}.args[{i}]") for i, arg in enumerate(args)),
                    loc=loc,
                )
            case {"tag": "seq", "body": body, "rest": rest}:
                return core.Seq(
                    self.term(body, f"{path}.body"),
                    self.term(rest, f"{path}.rest"),
                    loc=loc,
                )
            case {"tag": "const", "name": str() as name, "init": init, "rest": rest}:
                return core.Const(
                    name,
                    self.term(init, f"{path}.init"),
                    self.term(rest, f"{path}.rest"),
                    loc=loc,
                )
            case {"tag": "seq2", "body": list() as body}:
                return core.Seq2(
                    tuple(self.term(stmt, f"{path}.body[{i}]") for i, stmt in enumerate(body)),
                    loc=loc,
                )
            case {"tag": "const2", "name": str() as name, "init": init}:
                return core.Const2(name, self.term(init, f"{path}.init"), loc=loc)
            case {"tag": "objectNew", "props": list() as props}:
                return core.ObjectNew(self._prop_terms(props, f"{path}.props"), loc=loc)
            case {"tag": "objectGet", "obj": obj, "propName": str() as prop_name}:
                return core.ObjectGet(self.term(obj, f"{path}.obj"), prop_name, loc=loc)
            case {"tag": str() as tag}:
                raise DecodeError(f"malformed or unknown term node '{tag}'", path)
            case _:
                raise DecodeError("expected a tagged term object", path)

    def type(self, data: Any, path: str = "$") -> Type:
        """Decode a type node."""
        match data:
            case {"tag": "Boolean"}:
                return BooleanType()
            case {"tag": "Number"}:
                return NumberType()
            case {"tag": "Func", "params": list() as params, "retType": ret_type}:
                return FuncType(
                    self._params(params, f"{path}.params"),
                    self.type(ret_type, f"{path}.retType"),
                )
            case {"tag": "Object", "props": list() as props}:
                prop_types = []
                for i, prop in enumerate(props):
                    match prop:
                        case {"name": str() as name, "type": ty}:
                            prop_types.append(PropertyType(name, self.type(ty, f"{path}.props[{i}].type")))
                        case _:
                            raise DecodeError("expected {name, type}", f"{path}.props[{i}]")
                return ObjectType(tuple(prop_types))
            case {"tag": str() as tag}:
                raise DecodeError(f"malformed or unknown type node '{tag}'", path)
            case _:
                raise DecodeError("expected a tagged type object", path)

    def _params(self, params: list[Any], path: str) -> tuple[Param, ...]:
        result = []
        for i, param in enumerate(params):
            match param:
                case {"name": str() as name, "type": ty}:
                    result.append(Param(name, self.type(ty, f"{path}[{i}].type")))
                case _:
                    raise DecodeError("expected {name, type}", f"{path}[{i}]")
        return tuple(result)

    def _prop_terms(self, props: list[Any], path: str) -> tuple[core.PropertyTerm, ...]:
        result = []
        for i, prop in enumerate(props):
            match prop:
                case {"name": str() as name, "term": term}:
                    result.append(core.PropertyTerm(name, self.term(term, f"{path}[{i}].term")))
                case _:
                    raise DecodeError("expected {name, term}", f"{path}[{i}]")
        return tuple(result)

    def _loc(self, data: Any, path: str) -> Span | None:
        match data:
            case {"loc": {"start": start, "end": end}}:
                return Span(self._position(start, f"{path}.loc.start"), self._position(end, f"{path}.loc.end"))
            case {"loc": _}:
                raise DecodeError("expected {start, end}", f"{path}.loc")
            case _:
                return None

    def _position(self, data: Any, path: str) -> Location:
        match data:
            case {"line": int() as line, "column": int() as column}:
                return Location(line, column, self.file)
            case _:
                raise DecodeError("expected {line, column}", path)


def decode_term(data: Any, file: str | None = None) -> core.Term:
    """Decode a JSON-shaped term tree."""
    return Decoder(file).term(data)


def decode_type(data: Any) -> Type:
    """Decode a JSON-shaped type."""
    return Decoder().type(data)


def decode_env(data: Any) -> TypeEnv:
    """Decode a JSON object mapping variable names to types."""
    if not isinstance(data, dict):
        raise DecodeError("expected an object mapping names to types", "$")
    decoder = Decoder()
    return TypeEnv({name: decoder.type(ty, f"$.{name}") for name, ty in data.items()})


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})", "$") from e
    except RecursionError as e:
        raise DecodeError("term nesting too deep", "$") from e


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"not UTF-8 text: {e.reason} at byte {e.start}", "$") from e


def loads_term(text: str, file: str | None = None) -> core.Term:
    """Decode a term from JSON text.

    Raises:
        DecodeError: If the text is not JSON, not a term tree, or nested
            deeper than the interpreter stack allows
    """
    data = _parse_json(text)
    try:
        return decode_term(data, file)
    except RecursionError as e:
        raise DecodeError("term nesting too deep", "$") from e


def load_term(path: Path) -> core.Term:
    """Read and decode a term file."""
    logger.debug("decode.load path={}", str(path))
    return loads_term(_read_text(path), file=str(path))


def load_env(path: Path) -> TypeEnv:
    """Read and decode an environment file."""
    logger.debug("decode.load_env path={}", str(path))
    data = _parse_json(_read_text(path))
    try:
        return decode_env(data)
    except RecursionError as e:
        raise DecodeError("type nesting too deep", "$") from e
