"""Errors raised while generating oclif commands.

Every error is fatal for the document being generated. The CLI turns them
into ``click.ClickException`` so the build stops before anything is written.
"""


class CodegenError(Exception):
    """Base exception for all gql-oclif generation errors."""


class OperationCountError(CodegenError):
    """Raised when a document does not hold exactly one operation."""

    def __init__(self, output_file: str, count: int):
        self.output_file = output_file
        self.count = count
        super().__init__(
            f"Each graphql document should have exactly one operation; "
            f"found {count} while generating {output_file}."
        )


class AnonymousOperationError(CodegenError):
    """Raised for an operation without a name (the command class needs one)."""

    def __init__(self, output_file: str):
        self.output_file = output_file
        super().__init__(
            f"Operations must be named to generate a command; "
            f"found an anonymous operation while generating {output_file}."
        )


class UnknownDirectiveArgumentError(CodegenError):
    """Raised when the @oclif directive carries an unrecognized argument."""

    def __init__(self, argument: str, directive_name: str = "oclif"):
        self.argument = argument
        super().__init__(f"Invalid field supplied to @{directive_name} directive: {argument}")


class InvalidDirectiveValueError(CodegenError):
    """Raised when a directive argument holds a literal we cannot read."""

    def __init__(self, argument: str, kind: str, directive_name: str = "oclif"):
        self.argument = argument
        self.kind = kind
        super().__init__(
            f"Argument '{argument}' of @{directive_name} must be a string literal, got {kind}"
        )


class UnsupportedFlagTypeError(CodegenError):
    """Raised for variable types that have no oclif flag mapping yet."""

    def __init__(self, type_name: str, reason: str = "enum types are not supported"):
        self.type_name = type_name
        super().__init__(f"Cannot map variable type '{type_name}' to an oclif flag: {reason}")


class DocumentLoadError(CodegenError):
    """Raised when a schema or operation file cannot be parsed."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Error parsing {path}: {message}")
