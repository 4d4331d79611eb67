"""Tests for type environments."""

from dataclasses import FrozenInstanceError

import pytest

from tinyts.core.env import TypeEnv
from tinyts.core.types import BooleanType, NumberType

class TestEnvCreation:
    """Tests for environment creation."""

    def test_empty_env(self):
        env = TypeEnv.empty()
        assert len(env) == 0
        assert "x" not in env

    def test_env_with_bindings(self):
        env = TypeEnv({"x": NumberType(), "y": BooleanType()})
        assert len(env) == 2
        assert set(env) == {"x", "y"}

    def test_constructor_copies_bindings(self):
        """Mutating the source dict later does not leak into the env."""
        source = {"x": NumberType()}
        env = TypeEnv(source)
        source["y"] = BooleanType()
        assert "y" not in env

    def test_bindings_are_read_only(self):
        env = TypeEnv({"x": NumberType()})
        with pytest.raises(TypeError):
            env.bindings["y"] = BooleanType()
        assert "y" not in env

    def test_env_is_frozen(self):
        env = TypeEnv({"x": NumberType()})
        with pytest.raises(FrozenInstanceError):
            env.bindings = {}
        assert env.lookup("x") == NumberType()


class TestEnvLookup:
    """Tests for environment lookup."""

    def test_lookup(self):
        env = TypeEnv({"x": NumberType()})
        assert env.lookup("x") == NumberType()

    def test_lookup_missing(self):
        with pytest.raises(KeyError):
            TypeEnv.empty().lookup("x")


class TestEnvExtension:
    """Tests for copy-on-extend."""

    def test_extend(self):
        env = TypeEnv.empty()
        extended = env.extend("x", NumberType())
        assert extended.lookup("x") == NumberType()
        # Original unchanged
        assert "x" not in env

    def test_extend_shadows(self):
        env = TypeEnv({"x": NumberType()})
        extended = env.extend("x", BooleanType())
        assert extended.lookup("x") == BooleanType()
        assert env.lookup("x") == NumberType()

    def test_extend_many_later_wins(self):
        env = TypeEnv.empty().extend_many([("x", NumberType()), ("x", BooleanType())])
        assert env.lookup("x") == BooleanType()
        assert len(env) == 1

    def test_siblings_do_not_see_each_other(self):
        base = TypeEnv({"x": NumberType()})
        left = base.extend("y", BooleanType())
        right = base.extend("z", NumberType())
        assert "z" not in left
        assert "y" not in right


class TestEnvStr:
    """Tests for string representation."""

    def test_str(self):
        env = TypeEnv({"x": NumberType(), "b": BooleanType()})
        assert str(env) == "TypeEnv(x: number, b: boolean)"

    def test_str_empty(self):
        assert str(TypeEnv.empty()) == "TypeEnv()"
