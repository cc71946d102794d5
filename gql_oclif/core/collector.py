"""Operation collection over a parsed document.

A fresh collector is used for every document. Visiting only records
operations; text is produced later, once ``finalize`` has checked that the
document holds exactly one named operation.
"""

from graphql import SKIP, DocumentNode, OperationDefinitionNode, Visitor, visit

from .errors import AnonymousOperationError, OperationCountError
from .ir import Operation


class OperationCollector(Visitor):
    """Accumulates the operations found while a document is traversed."""

    def __init__(self, output_file: str):
        super().__init__()
        self.output_file = output_file
        self.operations: list[Operation] = []

    def enter_operation_definition(self, node: OperationDefinitionNode, *_args):
        self.operations.append(Operation.from_node(node))
        # Selections and variables are read later from the node itself
        return SKIP

    def collect(self, document: DocumentNode) -> "OperationCollector":
        """Visit a document and return self for chaining."""
        visit(document, self)
        return self

    def finalize(self) -> Operation:
        """Return the single collected operation.

        Raises:
            OperationCountError: if zero or several operations were collected
            AnonymousOperationError: if the operation has no name
        """
        if len(self.operations) != 1:
            raise OperationCountError(self.output_file, len(self.operations))
        operation = self.operations[0]
        if operation.name is None:
            raise AnonymousOperationError(self.output_file)
        return operation
