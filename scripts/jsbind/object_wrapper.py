"""
Object wrapper binding generation module

Generates a class that wraps one runtime object handle per instance.
"""

from typing import TYPE_CHECKING

from .codegen import CodeGen

if TYPE_CHECKING:
    from .config import BindingConfig
    from .member import MemberGenerator
    from .syntax import InterfaceInfo


class ObjectWrapperGenerator:
    """Generates wrapped instance bindings"""

    def __init__(self, config: 'BindingConfig', member_gen: 'MemberGenerator'):
        self.config = config
        self.member_gen = member_gen

    def generate(self, interface: 'InterfaceInfo', gen: CodeGen):
        """Generate the wrapper class for an object wrapper interface"""
        name = interface.name
        handle = self.config.handle_type

        with gen.block(f'public partial class {name}'):
            gen.line(f'private readonly {handle} _js;')
            gen.line()

            with gen.block(f'public {name}({handle} js)'):
                gen.line('_js = js;')
            gen.line()

            gen.line(f'public static {name}? Wrap({handle}? js) => js != null ? new {name}(js) : null;')
            gen.line()
            gen.line(f'public static implicit operator {handle}({name} obj) => obj._js;')
            gen.line()

            self.member_gen.generate_all(interface, gen, as_static=False)
        gen.line()
