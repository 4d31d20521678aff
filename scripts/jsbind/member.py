"""
Member binding generation module

Generates forwarding stubs for interface methods and properties. Every stub
routes through the `_js` handle of the enclosing binding type.
"""

from typing import TYPE_CHECKING

from .codegen import CodeGen
from .errors import BindingError
from .syntax import MethodInfo, NodeKind, PropertyInfo, node_kind, node_text

if TYPE_CHECKING:
    from tree_sitter import Node
    from .config import BindingConfig
    from .syntax import InterfaceInfo

# Field holding the runtime handle in every generated binding type
HANDLE_FIELD = '_js'


class MemberGenerator:
    """Generates method and property bindings"""

    def __init__(self, config: 'BindingConfig'):
        self.config = config

    def generate_all(self, interface: 'InterfaceInfo', gen: CodeGen, as_static: bool):
        """Generate bindings for every member of an interface"""
        for member in interface.members:
            self.generate(member, gen, as_static)

    def generate(self, member: 'Node', gen: CodeGen, as_static: bool):
        """Generate binding for a single interface member"""
        kind = node_kind(member)
        if kind is NodeKind.METHOD:
            self.generate_method(MethodInfo.from_node(member), gen, as_static)
        elif kind is NodeKind.PROPERTY:
            self.generate_property(PropertyInfo.from_node(member), gen, as_static)
        else:
            raise BindingError.at(member, f'Unexpected member: {node_text(member)}')

    def generate_method(self, method: MethodInfo, gen: CodeGen, as_static: bool):
        """Generate a method that invokes the member of the same name"""
        gen.write('public ')
        if as_static:
            gen.write('static ')
        gen.line(f'{method.return_type} {method.name}{method.param_list}')

        gen.line('{')
        gen.indent()

        if not method.returns_void:
            gen.write(f'return ({method.return_type})')

        gen.write(f'{HANDLE_FIELD}.Invoke(nameof({method.name})')
        for param in method.params:
            gen.write(f', {param.name}')
        gen.line(');')

        gen.dedent()
        gen.line('}')
        gen.line()

    def generate_property(self, prop: PropertyInfo, gen: CodeGen, as_static: bool):
        """Generate a property declaration

        The accessor block stays empty unless property_accessors is enabled.
        """
        gen.write('public ')
        if as_static:
            gen.write('static ')
        gen.line(f'{prop.type} {prop.name}')

        gen.line('{')
        if self.config.property_accessors:
            gen.indent()
            for accessor in prop.accessors:
                if accessor == 'get':
                    gen.line(f'get => {HANDLE_FIELD}.GetObjectProperty<{prop.type}>(nameof({prop.name}));')
                else:
                    gen.line(f'{accessor} => {HANDLE_FIELD}.SetObjectProperty(nameof({prop.name}), value);')
            gen.dedent()
        gen.line('}')
        gen.line()
