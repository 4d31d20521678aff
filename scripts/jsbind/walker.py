"""
Declaration walker module

Walks top-level and namespace-scoped declarations of a parsed file.
"""

from typing import Iterable, TYPE_CHECKING

from .codegen import CodeGen
from .errors import BindingError
from .syntax import (
    InterfaceInfo, NodeKind,
    namespace_members, namespace_name, node_kind, node_text,
)

if TYPE_CHECKING:
    from tree_sitter import Node
    from .interface import InterfaceGenerator


class DeclarationWalker:
    """Dispatches declarations to the interface generator

    Namespaces are recreated around their members, using directives are
    copied as written, and anything else stops generation.
    """

    def __init__(self, interface_gen: 'InterfaceGenerator'):
        self.interface_gen = interface_gen

    def walk(self, nodes: Iterable['Node'], gen: CodeGen):
        for node in nodes:
            kind = node_kind(node)

            if kind is NodeKind.NAMESPACE:
                with gen.block(f'namespace {namespace_name(node)}'):
                    self.walk(namespace_members(node), gen)

            elif kind is NodeKind.IMPORT:
                gen.line(node_text(node))

            elif kind is NodeKind.INTERFACE:
                self.interface_gen.generate(InterfaceInfo.from_node(node), gen)

            else:
                raise BindingError.at(node, f'{node.type} was not expected.')
