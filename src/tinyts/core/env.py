"""Type environments mapping variable names to types."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from tinyts.core.types import Type


@dataclass(frozen=True)
class TypeEnv:
    """Typing environment Γ: the statically known type of each name in scope.

    Environments are never mutated once built. `bindings` is a read-only
    view over a private copy, and every scope-introducing construct extends
    a new environment, so sibling branches and enclosing scopes never
    observe bindings made in a nested scope.
    """

    bindings: Mapping[str, Type] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    @staticmethod
    def empty() -> "TypeEnv":
        """Create an empty environment."""
        return TypeEnv()

    def lookup(self, name: str) -> Type:
        """Look up the type bound to a name.

        Raises:
            KeyError: If the name is not bound
        """
        return self.bindings[name]

    def extend(self, name: str, ty: Type) -> "TypeEnv":
        """Return a new environment with `name` bound to `ty`.

        An existing binding of the same name is shadowed in the result only.
        """
        return self.extend_many([(name, ty)])

    def extend_many(self, pairs: Iterable[tuple[str, Type]]) -> "TypeEnv":
        """Return a new environment with every pair bound, later pairs winning."""
        new_bindings = dict(self.bindings)
        for name, ty in pairs:
            new_bindings[name] = ty
        return TypeEnv(new_bindings)

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        """Return the number of bound names."""
        return len(self.bindings)

    def __str__(self) -> str:
        items = ", ".join(f"{name}: {ty}" for name, ty in self.bindings.items())
        return f"TypeEnv({items})"
