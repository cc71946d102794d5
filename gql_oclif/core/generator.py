"""Code generator for oclif commands.

Renders Jinja2 templates to produce a TypeScript oclif command from a single
collected GraphQL operation.

Supports custom templates via the template_dir parameter:
    generator = CommandGenerator(schema, operation, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from graphql import DocumentNode, GraphQLSchema, print_ast
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .collector import OperationCollector
from .config import OclifConfig
from .directive import OCLIF_DIRECTIVE, extract_directive_config, omit_directive
from .ir import DirectiveConfig, FlagDeclaration, Operation
from .scalars import ScalarRegistry
from .types import flag_for_variable


def ts_string(value: Any) -> str:
    """Serialize a value the way JSON.stringify would, for TS literals."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def template_literal(text: str) -> str:
    """Escape text for use inside a TS template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


@dataclass
class GeneratedCommand:
    """Output for one document: import lines and the command source."""
    output_file: str
    imports: list[str] = field(default_factory=list)
    content: str = ""

    @property
    def text(self) -> str:
        """Full file contents."""
        return "\n".join(self.imports) + "\n\n" + self.content


class CommandGenerator:
    """Generates an oclif command class from one GraphQL operation.

    Available templates to override:
        - command.ts.j2: the command class and its run() body

    Example:
        generator = CommandGenerator(schema, operation, config=OclifConfig(clientPath="../client"))
        source = generator.cli_content
    """

    TEMPLATE_NAME = "command.ts.j2"

    def __init__(
        self,
        schema: GraphQLSchema | None,
        operation: Operation,
        config: Optional[OclifConfig] = None,
        template_dir: Optional[str] = None,
    ):
        """Initialize the command generator.

        Args:
            schema: Schema handle used to look up variable types
            operation: The single operation collected from the document
            config: Generator options (client path, scalar mapping, ...)
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.schema = schema
        self.operation = operation
        self.config = config or OclifConfig()
        self.template_dir = template_dir or self.config.template_dir
        self.registry = ScalarRegistry.from_mapping(self.config.scalars)

        # Build template loader - custom templates take precedence
        loaders = []
        if self.template_dir:
            template_path = Path(self.template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_oclif", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["ts_string"] = ts_string

    @property
    def imports(self) -> list[str]:
        """Import lines the command file needs."""
        return [
            "import { Command, flags } from '@oclif/command'",
            f"import client from '{self.config.client_path}'",
        ]

    @property
    def definition(self) -> str:
        """The operation, without client-only directives, as a TS constant."""
        client_operation = print_ast(omit_directive(self.operation.node, OCLIF_DIRECTIVE))
        return (
            f"const {self.operation.document_variable_name} = "
            f"`\n{template_literal(client_operation)}`"
        )

    @property
    def directive_config(self) -> DirectiveConfig:
        return extract_directive_config(self.operation.node.directives, OCLIF_DIRECTIVE)

    @property
    def flags(self) -> list[FlagDeclaration]:
        return [
            flag_for_variable(
                definition,
                schema=self.schema,
                registry=self.registry,
                enums_as_strings=self.config.enums_as_strings,
            )
            for definition in self.operation.node.variable_definitions or ()
        ]

    @property
    def cli_content(self) -> str:
        """Render the command class, preceded by the document constant."""
        directive_config = self.directive_config
        template = self.env.get_template(self.TEMPLATE_NAME)
        return template.render(
            definition=self.definition,
            class_name=self.operation.name,
            document_variable_name=self.operation.document_variable_name,
            description=directive_config.description,
            examples=directive_config.examples,
            flags=self.flags,
        )


def generate_command(
    schema: GraphQLSchema | None,
    document: DocumentNode,
    config: Optional[OclifConfig] = None,
    output_file: str = "<document>",
) -> GeneratedCommand:
    """Generate the command file for one document.

    Raises:
        CodegenError: if the document does not hold exactly one named
            operation, or its directive or variable types cannot be mapped
    """
    operation = OperationCollector(output_file).collect(document).finalize()
    generator = CommandGenerator(schema, operation, config)
    return GeneratedCommand(
        output_file=output_file,
        imports=generator.imports,
        content=generator.cli_content,
    )
