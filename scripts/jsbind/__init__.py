"""
jsbind - JSObject binding generator for C# interface declarations

Reads interface declarations marked with JSGlobalObject or JSObjectWrapper
and generates C# classes that forward every member to a JS runtime object.
"""

from .codegen import CodeGen, output_path_for
from .config import BindingConfig
from .errors import BindingError
from .syntax import NodeKind, InterfaceInfo, MethodInfo, ParamInfo, PropertyInfo, parse
from .member import MemberGenerator
from .global_object import GlobalObjectGenerator
from .object_wrapper import ObjectWrapperGenerator
from .interface import BindingKind, InterfaceGenerator, classify
from .walker import DeclarationWalker
from .generator import Generator

__all__ = [
    'CodeGen', 'output_path_for',
    'BindingConfig',
    'BindingError',
    'NodeKind', 'InterfaceInfo', 'MethodInfo', 'ParamInfo', 'PropertyInfo', 'parse',
    'MemberGenerator',
    'GlobalObjectGenerator',
    'ObjectWrapperGenerator',
    'BindingKind', 'InterfaceGenerator', 'classify',
    'DeclarationWalker',
    'Generator',
]
