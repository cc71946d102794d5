"""Tests for @oclif directive extraction and removal."""

import pytest
from graphql import parse, print_ast

from gql_oclif.core.directive import (
    OCLIF_DIRECTIVE_SDL,
    extract_directive_config,
    find_directive,
    omit_directive,
)
from gql_oclif.core.errors import InvalidDirectiveValueError, UnknownDirectiveArgumentError
from gql_oclif.core.ir import DirectiveConfig


def operation(source: str):
    return parse(source).definitions[0]


class TestExtractDirectiveConfig:
    """Tests for decoding the directive arguments."""

    def test_no_directives(self):
        node = operation("query Items { items }")
        config = extract_directive_config(node.directives)
        assert config == DirectiveConfig()
        assert config.description is None
        assert config.examples is None
        assert config.is_empty

    def test_other_directive_only(self):
        node = operation("query Items @cached { items }")
        assert extract_directive_config(node.directives).is_empty

    def test_description_and_examples_in_order(self):
        node = operation(
            'query Items @oclif(description: "list items", example: "list", example: "list --all") '
            "{ items }"
        )
        config = extract_directive_config(node.directives)
        assert config.description == "list items"
        assert config.examples == ["list", "list --all"]

    def test_directive_without_examples_has_empty_list(self):
        node = operation('query Items @oclif(description: "list items") { items }')
        config = extract_directive_config(node.directives)
        assert config.description == "list items"
        assert config.examples == []
        assert not config.is_empty

    def test_last_description_wins(self):
        node = operation('query Items @oclif(description: "first", description: "second") { items }')
        assert extract_directive_config(node.directives).description == "second"

    def test_example_list_literal(self):
        node = operation('query Items @oclif(example: ["a", "b"], example: "c") { items }')
        assert extract_directive_config(node.directives).examples == ["a", "b", "c"]

    def test_block_string_description(self):
        node = operation('query Items @oclif(description: """Multi\nline""") { items }')
        assert extract_directive_config(node.directives).description == "Multi\nline"

    def test_unknown_argument_raises(self):
        node = operation('query Items @oclif(description: "x", foo: "bar") { items }')
        with pytest.raises(UnknownDirectiveArgumentError) as exc_info:
            extract_directive_config(node.directives)
        assert exc_info.value.argument == "foo"
        assert "Invalid field supplied to @oclif directive: foo" in str(exc_info.value)

    def test_unknown_argument_leaves_node_untouched(self):
        node = operation('query Items @oclif(foo: "bar") { items }')
        before = print_ast(node)
        with pytest.raises(UnknownDirectiveArgumentError):
            extract_directive_config(node.directives)
        assert print_ast(node) == before

    def test_non_string_description_raises(self):
        node = operation("query Items @oclif(description: 42) { items }")
        with pytest.raises(InvalidDirectiveValueError) as exc_info:
            extract_directive_config(node.directives)
        assert exc_info.value.argument == "description"
        assert exc_info.value.kind == "int_value"

    def test_list_description_raises(self):
        node = operation('query Items @oclif(description: ["a"]) { items }')
        with pytest.raises(InvalidDirectiveValueError):
            extract_directive_config(node.directives)

    def test_variable_example_raises(self):
        node = operation("query Items($x: String) @oclif(example: $x) { items }")
        with pytest.raises(InvalidDirectiveValueError):
            extract_directive_config(node.directives)

    def test_only_first_directive_is_read(self):
        node = operation('query Items @oclif(description: "one") @oclif(foo: "ignored") { items }')
        assert extract_directive_config(node.directives).description == "one"

    def test_name_match_is_case_sensitive(self):
        node = operation('query Items @Oclif(foo: "bar") { items }')
        assert find_directive(node.directives) is None
        assert extract_directive_config(node.directives).is_empty


class TestOmitDirective:
    """Tests for removing the directive before sending the operation."""

    def test_keeps_unrelated_directive_in_order(self):
        node = operation(
            'query Items @live @oclif(description: "x") @cached(ttl: 5) { items }'
        )
        sanitized = omit_directive(node)
        assert [d.name.value for d in sanitized.directives] == ["live", "cached"]

    def test_does_not_mutate_original(self):
        node = operation('query Items @oclif(description: "x") @cached { items }')
        omit_directive(node)
        assert [d.name.value for d in node.directives] == ["oclif", "cached"]

    def test_removes_every_instance(self):
        node = operation('query Items @oclif(description: "a") @oclif(example: "b") { items }')
        assert omit_directive(node).directives == ()

    def test_shares_children(self):
        node = operation('query Items($n: Int) @oclif(description: "x") { items(n: $n) }')
        sanitized = omit_directive(node)
        assert sanitized is not node
        assert sanitized.selection_set is node.selection_set
        assert sanitized.variable_definitions is node.variable_definitions

    def test_no_directive_is_noop(self):
        node = operation("query Items { items }")
        sanitized = omit_directive(node)
        assert print_ast(sanitized) == print_ast(node)

    def test_returns_new_node_of_same_kind(self):
        node = operation('query A @oclif(description: "x") @keep { ok }')
        sanitized = omit_directive(node)
        assert type(sanitized) is type(node)
        assert sanitized.loc is node.loc
        assert sanitized.name is node.name
        assert [d.name.value for d in sanitized.directives] == ["keep"]
        assert print_ast(sanitized) == "query A @keep {\n  ok\n}"

    def test_printed_operation_has_no_directive(self):
        node = operation('query Items($n: Int) @oclif(description: "x") { items(n: $n) }')
        assert print_ast(omit_directive(node)) == (
            "query Items($n: Int) {\n"
            "  items(n: $n)\n"
            "}"
        )


def test_directive_sdl_parses():
    definition = parse(OCLIF_DIRECTIVE_SDL).definitions[0]
    assert definition.name.value == "oclif"
    assert [arg.name.value for arg in definition.arguments] == ["description", "example"]
    assert [location.value for location in definition.locations] == [
        "QUERY",
        "MUTATION",
        "SUBSCRIPTION",
    ]
