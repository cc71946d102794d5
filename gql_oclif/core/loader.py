"""Schema and operation document loading using graphql-core.

Collects GraphQL files from a file or directory, builds the schema handle and
parses the operation documents handed to the generator.
"""

import os
from pathlib import Path

from graphql import (
    DirectiveDefinitionNode,
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    build_ast_schema,
    concat_ast,
    parse,
)

from .directive import OCLIF_DIRECTIVE, OCLIF_DIRECTIVE_SDL
from .errors import DocumentLoadError

SCHEMA_EXTENSIONS = (".graphqls", ".graphql", ".gql")
DOCUMENT_EXTENSIONS = (".graphql", ".gql")


def collect_files(path: str, extensions: tuple[str, ...]) -> list[str]:
    """Collect files with the given extensions from a file or directory."""
    files = []
    if os.path.isfile(path):
        if path.endswith(extensions):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(extensions):
                    files.append(os.path.join(root, filename))
    return sorted(files)


def parse_file(path: str) -> DocumentNode:
    """Parse one GraphQL file, naming it in any syntax error."""
    with open(path) as f:
        content = f.read()
    try:
        return parse(content)
    except GraphQLError as e:
        raise DocumentLoadError(os.path.basename(path), e.message) from e


class SchemaLoader:
    """Builds a GraphQLSchema from one or more SDL files."""

    def __init__(self, schema_path: str):
        """Initialize a loader with a path to a schema file or directory."""
        self.schema_path = schema_path

    def load(self) -> GraphQLSchema:
        """Parse every schema file and build the schema.

        The @oclif directive is declared when the SDL does not already do so,
        since operations carry it.
        """
        schema_files = collect_files(self.schema_path, SCHEMA_EXTENSIONS)
        if not schema_files:
            raise DocumentLoadError(self.schema_path, "no schema files found")

        documents = [parse_file(file_path) for file_path in schema_files]
        if not any(self._declares_directive(document) for document in documents):
            documents.append(parse(OCLIF_DIRECTIVE_SDL))

        try:
            return build_ast_schema(concat_ast(documents), assume_valid_sdl=True)
        except (GraphQLError, TypeError) as e:
            raise DocumentLoadError(self.schema_path, str(e)) from e

    @staticmethod
    def _declares_directive(document: DocumentNode) -> bool:
        return any(
            isinstance(definition, DirectiveDefinitionNode)
            and definition.name.value == OCLIF_DIRECTIVE
            for definition in document.definitions
        )


def collect_documents(documents_path: str) -> list[tuple[Path, DocumentNode]]:
    """Parse every operation document under a path.

    Returns:
        (path relative to ``documents_path``, parsed document) pairs, sorted
    """
    base = Path(documents_path)
    root = base if base.is_dir() else base.parent
    return [
        (Path(file_path).relative_to(root), parse_file(file_path))
        for file_path in collect_files(documents_path, DOCUMENT_EXTENSIONS)
    ]
