"""
Interface classification module

Routes each interface to a binding generator based on its single marker
base interface.
"""

from enum import Enum
from typing import TYPE_CHECKING

from .codegen import CodeGen
from .errors import BindingError
from .global_object import GlobalObjectGenerator
from .member import MemberGenerator
from .object_wrapper import ObjectWrapperGenerator

if TYPE_CHECKING:
    from .config import BindingConfig
    from .syntax import InterfaceInfo


class BindingKind(Enum):
    """Binding strategy selected by a marker base interface"""
    GLOBAL_OBJECT = 'global_object'
    OBJECT_WRAPPER = 'object_wrapper'


def classify(interface: 'InterfaceInfo', config: 'BindingConfig') -> BindingKind:
    """Get the binding kind for an interface

    The interface must declare exactly one base interface, and it must be
    one of the configured markers.
    """
    if interface.bases is None:
        raise BindingError.at(
            interface.node, f'Expected interface {interface.name} to have base interface.')

    if len(interface.bases) > 1:
        raise BindingError.at(
            interface.node, f'Expected interface {interface.name} to have only 1 base interface.')

    base = interface.bases[0] if interface.bases else ''
    if base == config.global_object_marker:
        return BindingKind.GLOBAL_OBJECT
    if base == config.object_wrapper_marker:
        return BindingKind.OBJECT_WRAPPER

    raise BindingError.at(interface.node, f'Unexpected base interface: {base}')


class InterfaceGenerator:
    """Generates bindings for an interface declaration"""

    def __init__(self, config: 'BindingConfig'):
        self.config = config
        member_gen = MemberGenerator(config)
        self._generators = {
            BindingKind.GLOBAL_OBJECT: GlobalObjectGenerator(config, member_gen),
            BindingKind.OBJECT_WRAPPER: ObjectWrapperGenerator(config, member_gen),
        }

    def generate(self, interface: 'InterfaceInfo', gen: CodeGen):
        kind = classify(interface, self.config)
        self._generators[kind].generate(interface, gen)
