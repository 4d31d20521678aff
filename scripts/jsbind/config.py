"""
Binding configuration

Names the generated code depends on: marker base types, the runtime handle
type, the global lookup entry point and the container class for globals.
"""

from dataclasses import dataclass

# Marker base interfaces recognized in declaration files
GLOBAL_OBJECT_MARKER = 'JSGlobalObject'
OBJECT_WRAPPER_MARKER = 'JSObjectWrapper'

# Runtime collaborator names used in generated code
HANDLE_TYPE = 'JSObject'
GLOBAL_LOOKUP = 'Runtime.GetGlobalObject'
GLOBAL_CONTAINER = 'JS'

# Header written at the top of every generated file
FILE_HEADER = (
    '// <auto-generated />',
    '#nullable enable',
)


@dataclass
class BindingConfig:
    """Configuration for binding generation"""
    global_object_marker: str = GLOBAL_OBJECT_MARKER
    object_wrapper_marker: str = OBJECT_WRAPPER_MARKER
    handle_type: str = HANDLE_TYPE
    global_lookup: str = GLOBAL_LOOKUP
    global_container: str = GLOBAL_CONTAINER
    indent: str = '    '
    property_accessors: bool = False  # Emit get/set forwarding instead of an empty block
