"""
Global object binding generation module

Generates a static class per global object. The runtime object is looked up
by the interface name once, on first use, and cached for the process.
"""

from typing import TYPE_CHECKING

from .codegen import CodeGen

if TYPE_CHECKING:
    from .config import BindingConfig
    from .member import MemberGenerator
    from .syntax import InterfaceInfo


class GlobalObjectGenerator:
    """Generates global singleton bindings"""

    def __init__(self, config: 'BindingConfig', member_gen: 'MemberGenerator'):
        self.config = config
        self.member_gen = member_gen

    def generate(self, interface: 'InterfaceInfo', gen: CodeGen):
        """Generate the static class for a global object interface"""
        name = interface.name
        handle = self.config.handle_type
        lookup = f'({handle}){self.config.global_lookup}(nameof({name}))'

        with gen.block(f'public static partial class {self.config.global_container}'):
            with gen.block(f'public static partial class {name}'):
                # System.Lazy runs the lookup at most once per type
                gen.line(f'private static readonly System.Lazy<{handle}> __js = '
                         f'new System.Lazy<{handle}>(() => {lookup});')
                gen.line()
                gen.line(f'private static {handle} _js => __js.Value;')
                gen.line()

                self.member_gen.generate_all(interface, gen, as_static=True)
        gen.line()
