"""
Error reporting for binding generation
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tree_sitter import Node


class BindingError(ValueError):
    """A declaration the generator cannot turn into bindings

    line is 1-based, column is a 0-based character offset.
    """

    def __init__(self, line: int, column: int, message: str):
        super().__init__(f'({line}, {column}): {message}')
        self.line = line
        self.column = column
        self.message = message

    @classmethod
    def at(cls, node: 'Node', message: str) -> 'BindingError':
        """Create an error located at the start of a syntax node"""
        row, byte_column = node.start_point
        return cls(row + 1, _char_column(node, byte_column), message)


def _char_column(node: 'Node', byte_column: int) -> int:
    """Convert tree-sitter's UTF-8 byte column to a character column

    Falls back to the byte column when no ancestor spans the start of the line.
    """
    line_start = node.start_byte - byte_column
    ancestor = node
    while ancestor is not None and ancestor.start_byte > line_start:
        ancestor = ancestor.parent
    if ancestor is None or not ancestor.text:
        return byte_column
    offset = ancestor.start_byte
    prefix = ancestor.text[line_start - offset:node.start_byte - offset]
    return len(prefix.decode('utf-8', errors='replace'))
