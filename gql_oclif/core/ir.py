"""Intermediate Representation (IR) for oclif command generation.

This module defines dataclasses that sit between the graphql-core AST and the
generated TypeScript: the collected operation, the unwrapped shape of a
variable type, the decoded @oclif directive and the flag declarations.
"""

import re
from dataclasses import dataclass
from enum import Enum

from graphql import NamedTypeNode, OperationDefinitionNode


def to_snake_case(name: str) -> str:
    """Convert camelCase to snake_case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def to_pascal_case(name: str) -> str:
    """Convert snake_case or camelCase to PascalCase."""
    snake = to_snake_case(name)
    return "".join(word.capitalize() for word in snake.split("_"))


@dataclass(frozen=True)
class Operation:
    """A single operation collected from a document, plus its derived names.

    Names follow the graphql-codegen client-side convention, e.g. for
    ``query listWidgets``:

        document_variable_name:    ListWidgetsDocument
        operation_type:            Query
        operation_result_type:     ListWidgetsQuery
        operation_variables_types: ListWidgetsQueryVariables
    """
    node: OperationDefinitionNode
    document_variable_name: str
    operation_type: str  # 'Query', 'Mutation' or 'Subscription'
    operation_result_type: str
    operation_variables_types: str

    @classmethod
    def from_node(cls, node: OperationDefinitionNode) -> "Operation":
        base_name = to_pascal_case(node.name.value) if node.name else ""
        operation_type = node.operation.value.capitalize()
        return cls(
            node=node,
            document_variable_name=f"{base_name}Document",
            operation_type=operation_type,
            operation_result_type=f"{base_name}{operation_type}",
            operation_variables_types=f"{base_name}{operation_type}Variables",
        )

    @property
    def name(self) -> str | None:
        """The operation name as written in the document."""
        return self.node.name.value if self.node.name else None


@dataclass(frozen=True)
class TypeShape:
    """The unwrapped form of a variable type reference.

    ``is_required`` only reflects a NonNull wrapper at the outermost level, so
    ``[Int!]`` is an optional list. ``is_item_required`` records the NonNull
    directly inside a list, which oclif has no way to express.
    """
    base_type: NamedTypeNode
    is_list: bool = False
    is_required: bool = False
    is_item_required: bool = False

    @property
    def base_name(self) -> str:
        return self.base_type.name.value


@dataclass
class DirectiveConfig:
    """Values read off the @oclif directive.

    Both fields stay None when the directive is absent, so nothing is
    generated for them.
    """
    description: str | None = None
    examples: list[str] | None = None

    @property
    def is_empty(self) -> bool:
        return self.description is None and self.examples is None


class FlagKind(str, Enum):
    """oclif flag constructors a variable can map to."""
    BOOLEAN = "boolean"
    INTEGER = "integer"
    STRING = "string"
    ENUM = "enum"  # reserved, never emitted


@dataclass
class FlagDeclaration:
    """One oclif flag, derived from one operation variable."""
    name: str
    kind: FlagKind
    multiple: bool = False
    required: bool = False
    parser: str | None = None

    def to_typescript(self) -> str:
        """Render as ``name: flags.kind({ ... })``."""
        lines = [
            f"{self.name}: flags.{self.kind.value}({{",
            f"  multiple: {_ts_bool(self.multiple)},",
            f"  required: {_ts_bool(self.required)},",
        ]
        if self.parser:
            lines.append(f"  parse: {self.parser}")
        lines.append("})")
        return "\n".join(lines)


def _ts_bool(value: bool) -> str:
    return "true" if value else "false"
