"""Flag type handlers for GraphQL scalars.

Maps the named base type of an operation variable to the oclif flag
constructor used for it, and optionally to a parse expression that coerces the
raw command-line value.

Example usage:
    from gql_oclif.core.scalars import ScalarRegistry, IntegerHandler

    # Use built-in handlers
    registry = ScalarRegistry()
    registry.kind_for("Float")      # FlagKind.INTEGER
    registry.parser_for("Float")    # "input => Number(input)"

    # Map a custom scalar
    registry.register("BigInt", IntegerHandler())
"""

from typing import Protocol, runtime_checkable

from graphql import GraphQLEnumType, GraphQLSchema, NamedTypeNode

from .errors import UnsupportedFlagTypeError
from .ir import FlagKind


@runtime_checkable
class FlagTypeHandler(Protocol):
    """Protocol for scalar flag handlers.

    Attributes:
        kind: The oclif flag constructor to use
        parser: TypeScript expression passed as ``parse``, or None
    """

    kind: FlagKind
    parser: str | None


class BooleanHandler:
    """Handler for Boolean scalars."""

    kind = FlagKind.BOOLEAN
    parser = None


class IntegerHandler:
    """Handler for Int scalars."""

    kind = FlagKind.INTEGER
    parser = None


class FloatHandler:
    """Handler for Float scalars.

    oclif's ``integer`` flag accepts any number; the parser keeps the
    fractional part instead of truncating it.
    """

    kind = FlagKind.INTEGER
    parser = "input => Number(input)"


class StringHandler:
    """Handler for String, ID and any unregistered scalar."""

    kind = FlagKind.STRING
    parser = None


HANDLERS_BY_KIND: dict[FlagKind, type] = {
    FlagKind.BOOLEAN: BooleanHandler,
    FlagKind.INTEGER: IntegerHandler,
    FlagKind.STRING: StringHandler,
}


class ScalarRegistry:
    """Registry for scalar flag handlers.

    Unregistered names fall back to ``StringHandler``.

    Example:
        registry = ScalarRegistry()
        registry.register("BigInt", IntegerHandler())

        registry.kind_for("BigInt")  # FlagKind.INTEGER
    """

    def __init__(self):
        self._handlers: dict[str, FlagTypeHandler] = {}
        self._fallback = StringHandler()
        self._register_defaults()

    def _register_defaults(self):
        """Register built-in default handlers."""
        self.register("Boolean", BooleanHandler())
        self.register("Int", IntegerHandler())
        self.register("Float", FloatHandler())
        self.register("String", StringHandler())
        self.register("ID", StringHandler())

    @classmethod
    def from_mapping(cls, scalars: dict[str, FlagKind]) -> "ScalarRegistry":
        """Build a registry with extra ``{scalar name: flag kind}`` entries."""
        registry = cls()
        for scalar_name, kind in scalars.items():
            handler_cls = HANDLERS_BY_KIND.get(FlagKind(kind))
            if handler_cls is None:
                raise UnsupportedFlagTypeError(scalar_name, f"no handler for '{FlagKind(kind).value}' flags")
            registry.register(scalar_name, handler_cls())
        return registry

    def register(self, scalar_name: str, handler: FlagTypeHandler):
        """Register a handler for a scalar type."""
        self._handlers[scalar_name] = handler

    def get(self, scalar_name: str) -> FlagTypeHandler:
        """Get the handler for a scalar type, falling back to strings."""
        return self._handlers.get(scalar_name, self._fallback)

    def has(self, scalar_name: str) -> bool:
        """Check if a handler is registered for a scalar type."""
        return scalar_name in self._handlers

    def kind_for(self, scalar_name: str) -> FlagKind:
        return self.get(scalar_name).kind

    def parser_for(self, scalar_name: str) -> str | None:
        return self.get(scalar_name).parser


_default_registry = ScalarRegistry()


def map_base_type(
    base_type: NamedTypeNode,
    schema: GraphQLSchema | None = None,
    registry: ScalarRegistry | None = None,
    enums_as_strings: bool = False,
) -> FlagKind:
    """Map a named type to the oclif flag kind used for it.

    Enums are looked up through the schema handle. They have no flag mapping
    yet, so they raise unless ``enums_as_strings`` asks for plain strings.
    """
    name = base_type.name.value
    if schema is not None and isinstance(schema.get_type(name), GraphQLEnumType):
        if enums_as_strings:
            return FlagKind.STRING
        raise UnsupportedFlagTypeError(name)
    return (registry or _default_registry).kind_for(name)


def get_parser(base_type: NamedTypeNode, registry: ScalarRegistry | None = None) -> str | None:
    """Return the ``parse`` expression for a named type, if it needs one."""
    return (registry or _default_registry).parser_for(base_type.name.value)
