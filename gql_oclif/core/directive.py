"""The @oclif directive: decoding its arguments and stripping it.

The directive is client-only. It is read to build the command metadata and
removed from the operation before the operation is sent to a server, which
does not declare it.

    query ListWidgets($limit: Int)
      @oclif(description: "List widgets", example: "list-widgets --limit 5") {
      ...
    }
"""

from collections.abc import Sequence

from graphql import (
    DirectiveNode,
    ListValueNode,
    OperationDefinitionNode,
    StringValueNode,
    ValueNode,
)

from .errors import InvalidDirectiveValueError, UnknownDirectiveArgumentError
from .ir import DirectiveConfig

OCLIF_DIRECTIVE = "oclif"

OCLIF_DIRECTIVE_SDL = (
    f"directive @{OCLIF_DIRECTIVE}(description: String, example: [String!]) "
    "on QUERY | MUTATION | SUBSCRIPTION"
)


def find_directive(
    directives: Sequence[DirectiveNode] | None, directive_name: str = OCLIF_DIRECTIVE
) -> DirectiveNode | None:
    """Return the first directive with the given name, if any."""
    for directive in directives or ():
        if directive.name.value == directive_name:
            return directive
    return None


def extract_directive_config(
    directives: Sequence[DirectiveNode] | None, directive_name: str = OCLIF_DIRECTIVE
) -> DirectiveConfig:
    """Decode the @oclif directive into a DirectiveConfig.

    Args:
        directives: The operation's directive list
        directive_name: Name of the reserved directive

    Returns:
        An empty config when the directive is absent. Otherwise ``examples``
        is always a list (possibly empty) and ``description`` is set if given.

    Raises:
        UnknownDirectiveArgumentError: for any argument other than
            ``description`` or ``example``
        InvalidDirectiveValueError: for non-string literal values
    """
    directive = find_directive(directives, directive_name)
    if directive is None:
        return DirectiveConfig()

    description = None
    examples: list[str] = []
    for argument in directive.arguments or ():
        name = argument.name.value
        if name == "description":
            description = _string_value(name, argument.value, directive_name)
        elif name == "example":
            examples.extend(_string_values(name, argument.value, directive_name))
        else:
            raise UnknownDirectiveArgumentError(name, directive_name)

    return DirectiveConfig(description=description, examples=examples)


def _string_value(name: str, value: ValueNode, directive_name: str) -> str:
    if isinstance(value, StringValueNode):
        return value.value
    raise InvalidDirectiveValueError(name, value.kind, directive_name)


def _string_values(name: str, value: ValueNode, directive_name: str) -> list[str]:
    # example: "a" and example: ["a", "b"] are both accepted
    if isinstance(value, ListValueNode):
        return [_string_value(name, item, directive_name) for item in value.values]
    return [_string_value(name, value, directive_name)]


def omit_directive(
    node: OperationDefinitionNode, directive_name: str = OCLIF_DIRECTIVE
) -> OperationDefinitionNode:
    """Return a copy of the operation without any instance of the directive.

    The copy is shallow: only the directive list is new, every other child
    node is shared with the original, which is left untouched.
    """
    directives = tuple(
        directive
        for directive in node.directives or ()
        if directive.name.value != directive_name
    )
    # AST nodes may be frozen, so build a new node rather than assigning
    fields = {key: getattr(node, key) for key in node.keys}
    return node.__class__(**{**fields, "directives": directives})
