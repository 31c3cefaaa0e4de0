"""
Constants and mappings for C# P/Invoke bindings generation
"""


# Mapping from C value types (whitespace removed) to C# types
CSHARP_TYPE_MAP = {
    "void": "void",
    "bool": "bool",
    "float": "float",
    "double": "double",
    "int": "int",
    "unsignedint": "uint",
    "int8_t": "sbyte",
    "uint8_t": "byte",
    "int16_t": "short",
    "uint16_t": "ushort",
    "int32_t": "int",
    "uint32_t": "uint",
    "int64_t": "long",
    "uint64_t": "ulong",
}

# Integer pointees that can be passed by reference (native output parameters)
INTEGER_TYPES = {
    "int", "unsignedint",
    "int8_t", "uint8_t",
    "int16_t", "uint16_t",
    "int32_t", "uint32_t",
    "int64_t", "uint64_t",
}

# Opaque pointer-sized handle
HANDLE_TYPE = "IntPtr"

# Managed type used for C strings
STRING_TYPE = "string"

# One byte bool marshaling, .NET defaults to a 32 bit BOOL otherwise
BOOL_MARSHAL_ATTRIBUTE = "[MarshalAs(UnmanagedType.U1)]"
BOOL_RETURN_MARSHAL_ATTRIBUTE = "[return: MarshalAs(UnmanagedType.U1)]"

# Wraps a delegate argument into a callable handle
DELEGATE_TO_HANDLE = "Marshal.GetFunctionPointerForDelegate"

# C# usings required for generated code
REQUIRED_USINGS = [
    "using System.Runtime.InteropServices;",
]

# Defaults for the generated container
DEFAULT_NAMESPACE = "Bindings"
NATIVE_METHODS_CLASS = "NativeMethods"
DEFAULT_LIBRARY_CONSTANT = "NativeLibrary"
DEFAULT_API_NAME = "native API"
GENERATOR_NAME = "cs-pinvoke-generator"

# Parameter name fragments that mark the preceding pointer as an array
ARRAY_SUFFIX = "array"
ARRAY_SUCCESSOR_MARKERS = ("count", "capacity")

# C# keywords that might appear as identifiers, escaped with '@'
CSHARP_KEYWORDS = {
    'abstract', 'as', 'base', 'bool', 'break', 'byte', 'case', 'catch',
    'char', 'checked', 'class', 'const', 'continue', 'decimal', 'default',
    'delegate', 'do', 'double', 'else', 'enum', 'event', 'explicit', 'extern',
    'false', 'finally', 'fixed', 'float', 'for', 'foreach', 'goto', 'if',
    'implicit', 'in', 'int', 'interface', 'internal', 'is', 'lock', 'long',
    'namespace', 'new', 'null', 'object', 'operator', 'out', 'override',
    'params', 'private', 'protected', 'public', 'readonly', 'ref', 'return',
    'sbyte', 'sealed', 'short', 'sizeof', 'stackalloc', 'static', 'string',
    'struct', 'switch', 'this', 'throw', 'true', 'try', 'typeof', 'uint',
    'ulong', 'unchecked', 'unsafe', 'ushort', 'using', 'virtual', 'void',
    'volatile', 'while'
}
