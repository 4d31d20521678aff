"""
Syntax module

Parses declaration files with the tree-sitter C# grammar and exposes the
declaration subset the generator understands: namespaces, using directives,
interfaces and their method/property members.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TYPE_CHECKING

import tree_sitter
import tree_sitter_c_sharp

from .errors import BindingError

if TYPE_CHECKING:
    from tree_sitter import Node

CSHARP = tree_sitter.Language(tree_sitter_c_sharp.language())


class NodeKind(Enum):
    """Declaration node kinds the generator dispatches on"""
    NAMESPACE = 'namespace'
    IMPORT = 'import'
    INTERFACE = 'interface'
    METHOD = 'method'
    PROPERTY = 'property'
    OTHER = 'other'


NODE_KINDS = {
    'namespace_declaration': NodeKind.NAMESPACE,
    'using_directive': NodeKind.IMPORT,
    'interface_declaration': NodeKind.INTERFACE,
    'method_declaration': NodeKind.METHOD,
    'property_declaration': NodeKind.PROPERTY,
}

# Named nodes that carry no declaration
TRIVIA = {'comment'}

# Directives that enclose declarations; these are not skipped as trivia
CONDITIONAL_DIRECTIVES = {'preproc_if', 'preproc_elif', 'preproc_else'}

ACCESSOR_KEYWORDS = ('get', 'set', 'init')


def parse(source: str) -> 'Node':
    """Parse declaration source and return the compilation unit node

    Raises BindingError at the first syntax error tree-sitter recovered from.
    """
    parser = tree_sitter.Parser(CSHARP)
    tree = parser.parse(source.encode('utf-8'))
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root)
        if bad.is_missing:
            raise BindingError.at(bad, f"Expected '{bad.type}'.")
        raise BindingError.at(bad, f'{bad.type} was not expected.')
    return root


def _first_error(node: 'Node') -> 'Node':
    """Find the first ERROR or missing node below a node with errors"""
    for child in node.children:
        if child.is_error or child.is_missing:
            return child
        if child.has_error:
            return _first_error(child)
    return node


def node_kind(node: 'Node') -> NodeKind:
    """Classify a syntax node"""
    return NODE_KINDS.get(node.type, NodeKind.OTHER)


def node_text(node: 'Node') -> str:
    """Source text of a node, as written"""
    return node.text.decode('utf-8') if node.text else ''


def is_trivia(node: 'Node') -> bool:
    """Comments and non-conditional preprocessor directives"""
    if node.type in TRIVIA:
        return True
    return node.type.startswith('preproc_') and node.type not in CONDITIONAL_DIRECTIVES


def declarations(node: Optional['Node']) -> list['Node']:
    """Named child declarations of a node, trivia excluded"""
    if node is None:
        return []
    return [child for child in node.named_children if not is_trivia(child)]


def namespace_name(node: 'Node') -> str:
    return node_text(node.child_by_field_name('name'))


def namespace_members(node: 'Node') -> list['Node']:
    return declarations(node.child_by_field_name('body'))


def _identifier(node: 'Node') -> str:
    """Name of a declaration node

    Falls back to the last identifier child for grammar versions that do not
    expose a 'name' field on the node.
    """
    name_node = node.child_by_field_name('name')
    if name_node is None:
        for child in node.named_children:
            if child.type == 'identifier':
                name_node = child
    return node_text(name_node) if name_node is not None else ''


@dataclass
class ParamInfo:
    """Method parameter information"""
    name: str
    type: str


@dataclass
class MethodInfo:
    """Interface method information"""
    name: str
    return_type: str
    params: list[ParamInfo]
    param_list: str  # Parameter list as written, including parentheses

    @property
    def returns_void(self) -> bool:
        return self.return_type == 'void'

    @classmethod
    def from_node(cls, node: 'Node') -> 'MethodInfo':
        """Parse method declaration"""
        # Older grammar versions name the return type field 'type'
        returns = node.child_by_field_name('returns')
        if returns is None:
            returns = node.child_by_field_name('type')
        param_list = node.child_by_field_name('parameters')
        return cls(
            name=_identifier(node),
            return_type=node_text(returns),
            params=_parse_params(param_list),
            param_list=node_text(param_list) if param_list is not None else '()',
        )


def _parse_params(param_list: Optional['Node']) -> list[ParamInfo]:
    """Parse a parameter list, in declared order

    A `params` parameter has its type and name directly on the list rather
    than inside a parameter node.
    """
    params = []
    if param_list is None:
        return params
    for child in param_list.children:
        if child.type in ('parameter', 'parameter_array'):
            type_node = child.child_by_field_name('type')
            params.append(ParamInfo(
                name=_identifier(child),
                type=node_text(type_node) if type_node is not None else '',
            ))
        elif child.type == 'identifier' and _ends_parameter(child):
            type_node = child.prev_named_sibling
            if type_node is None or type_node.type == 'parameter' or is_trivia(type_node):
                type_text = ''
            else:
                type_text = node_text(type_node)
            params.append(ParamInfo(name=node_text(child), type=type_text))
    return params


def _ends_parameter(node: 'Node') -> bool:
    """Whether an identifier is the last token of a parameter"""
    following = node.next_sibling
    return following is not None and following.type in (',', ')')


@dataclass
class PropertyInfo:
    """Interface property information"""
    name: str
    type: str
    accessors: list[str] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: 'Node') -> 'PropertyInfo':
        """Parse property declaration"""
        accessors = []
        accessor_list = node.child_by_field_name('accessors')
        for accessor in declarations(accessor_list):
            for child in accessor.children:
                if child.type in ACCESSOR_KEYWORDS:
                    accessors.append(child.type)
                    break
        return cls(
            name=_identifier(node),
            type=node_text(node.child_by_field_name('type')),
            accessors=accessors,
        )


@dataclass
class InterfaceInfo:
    """Interface declaration information"""
    name: str
    node: 'Node'
    bases: Optional[list[str]]  # None when the declaration has no base list
    members: list['Node']

    @classmethod
    def from_node(cls, node: 'Node') -> 'InterfaceInfo':
        """Parse interface declaration"""
        bases = None
        for child in node.children:
            if child.type == 'base_list':
                bases = [node_text(base) for base in declarations(child)]
                break
        return cls(
            name=_identifier(node),
            node=node,
            bases=bases,
            members=declarations(node.child_by_field_name('body')),
        )
