"""Variable type unwrapping and flag derivation."""

from graphql import (
    GraphQLSchema,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    TypeNode,
    VariableDefinitionNode,
)

from .ir import FlagDeclaration, TypeShape
from .scalars import ScalarRegistry, get_parser, map_base_type


def unwrap_type(type_node: TypeNode) -> TypeShape:
    """Walk List/NonNull wrappers down to the named base type.

    Only a NonNull at the outermost level makes the flag required:

        Int      -> is_list=False, is_required=False
        [Int]!   -> is_list=True,  is_required=True
        [Int!]   -> is_list=True,  is_required=False, is_item_required=True
    """
    is_list = False
    is_required = False
    is_item_required = False
    outermost = True

    while not isinstance(type_node, NamedTypeNode):
        if isinstance(type_node, ListTypeNode):
            is_list = True
        elif isinstance(type_node, NonNullTypeNode):
            if outermost:
                is_required = True
            elif is_list:
                is_item_required = True
        outermost = False
        type_node = type_node.type

    return TypeShape(
        base_type=type_node,
        is_list=is_list,
        is_required=is_required,
        is_item_required=is_item_required,
    )


def flag_for_variable(
    definition: VariableDefinitionNode,
    schema: GraphQLSchema | None = None,
    registry: ScalarRegistry | None = None,
    enums_as_strings: bool = False,
) -> FlagDeclaration:
    """Build the flag declaration for one operation variable."""
    shape = unwrap_type(definition.type)
    return FlagDeclaration(
        name=definition.variable.name.value,
        kind=map_base_type(shape.base_type, schema, registry, enums_as_strings),
        multiple=shape.is_list,
        required=shape.is_required,
        parser=get_parser(shape.base_type, registry),
    )
