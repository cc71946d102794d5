#!/usr/bin/env python3
"""Demonstration of oclif command generation.

This script shows how to:
1. Build a schema handle
2. Parse an operation annotated with @oclif
3. Generate the command file for it

Note: This demo doesn't write any files - it prints the generated command.
"""

from graphql import build_schema, parse

from gql_oclif.core import (
    OCLIF_DIRECTIVE_SDL,
    CodegenError,
    OclifConfig,
    generate_command,
)

SCHEMA = """
type Widget {
    id: ID!
    name: String
    weight: Float
}

type Query {
    widgets(limit: Int, names: [String!], minWeight: Float): [Widget!]!
}
"""

OPERATION = """
query ListWidgets($limit: Int, $names: [String!], $minWeight: Float)
  @oclif(
    description: "List widgets"
    example: "list-widgets --limit 5"
    example: "list-widgets --names foo --names bar"
  ) {
  widgets(limit: $limit, names: $names, minWeight: $minWeight) {
    id
    name
    weight
  }
}
"""


def main():
    print("=== oclif Command Generation Demo ===\n")

    print("1. Building schema...")
    schema = build_schema(SCHEMA + "\n" + OCLIF_DIRECTIVE_SDL)

    print("2. Parsing operation...")
    document = parse(OPERATION)

    print("3. Generating command...\n")
    try:
        command = generate_command(
            schema,
            document,
            config=OclifConfig(clientPath="../client"),
            output_file="list-widgets.ts",
        )
    except CodegenError as e:
        print(f"Generation failed: {e}")
        return

    print(f"--- {command.output_file} ---")
    print(command.text)


if __name__ == "__main__":
    main()
