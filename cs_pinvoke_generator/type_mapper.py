"""
Type mapping logic for converting C types to C# types
"""

import re
from dataclasses import dataclass
from enum import Enum

from .constants import (
    ARRAY_SUCCESSOR_MARKERS,
    ARRAY_SUFFIX,
    CSHARP_TYPE_MAP,
    HANDLE_TYPE,
    INTEGER_TYPES,
    STRING_TYPE,
)
from .errors import DuplicateIdentifierError
from .model import ApiModel, ApiParameter


_CONST_PREFIX = re.compile(r"^\s*const\b")


class CodeDirection(Enum):
    """Which side allocates the data behind a pointer"""
    MANAGED_TO_NATIVE = "managed_to_native"
    NATIVE_TO_MANAGED = "native_to_managed"


class MappingOutcome(Enum):
    MAPPED = "mapped"
    EXCLUDED = "excluded"
    UNKNOWN = "unknown"
    INVALID = "invalid"  # the model contradicts how the C API is used


@dataclass(frozen=True)
class MappedType:
    """Result of a single type mapping attempt"""
    outcome: MappingOutcome
    cs_type: str | None = None
    is_delegate: bool = False
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is MappingOutcome.MAPPED

    @property
    def skippable(self) -> bool:
        return self.outcome in (MappingOutcome.EXCLUDED, MappingOutcome.UNKNOWN)


def _mapped(cs_type: str, is_delegate: bool = False) -> MappedType:
    return MappedType(MappingOutcome.MAPPED, cs_type, is_delegate)


def _failed(outcome: MappingOutcome, reason: str) -> MappedType:
    return MappedType(outcome, reason=reason)


def _index_by_identifier(category: str, items) -> dict:
    index = {}
    for item in items:
        if item.identifier in index:
            raise DuplicateIdentifierError(category, item.identifier)
        index[item.identifier] = item
    return index


def is_array_parameter(parameters: list[ApiParameter], index: int) -> bool:
    """Guess whether a pointer parameter points to an array or to a single item

    Naive but works for APIs like box2d: a pointer named '...Array', or one
    followed by a '...count'/'...capacity' parameter, is an array.
    """
    parameter = parameters[index]
    if not parameter.type.rstrip().endswith("*"):
        return False
    if parameter.identifier.lower().endswith(ARRAY_SUFFIX):
        return True
    if index + 1 < len(parameters):
        successor = parameters[index + 1].identifier.lower()
        return any(marker in successor for marker in ARRAY_SUCCESSOR_MARKERS)
    return False


class TypeMapper:
    """Maps C type strings to C# types for one generation run

    Holds the struct, enum and delegate lookup tables of the API model, so a
    new mapper is built for every run.
    """

    def __init__(self, model: ApiModel, struct_type_replacer: dict[str, str] | None = None):
        self.structs = _index_by_identifier("struct", model.structs)
        self.enums = _index_by_identifier("enum", model.enums)
        self.delegates = _index_by_identifier("delegate", model.delegates)
        self.excluded_types = frozenset(model.excluded_types)
        self.struct_type_replacer = dict(struct_type_replacer or {})

    def map_type(self, c_type: str, is_scalar: bool = True,
                 direction: CodeDirection = CodeDirection.MANAGED_TO_NATIVE,
                 collapse_delegates: bool = True) -> MappedType:
        """Map a C type to a C# type

        Args:
            c_type: Raw C type, e.g. 'const b2Vec2*'
            is_scalar: False when a pointer denotes an array rather than a single item
            direction: Which side allocates pointed-to struct arrays
            collapse_delegates: Emit delegate types as IntPtr instead of the delegate name
        """
        type_name, const_count = _CONST_PREFIX.subn("", c_type)
        is_const = const_count > 0
        type_name = "".join(type_name.split())
        is_pointer = type_name.endswith("*")
        if is_pointer:
            type_name = type_name[:-1]
        if "*" in type_name:
            return _failed(MappingOutcome.INVALID,
                           f"Type '{c_type}' has more than one level of indirection.")

        intrinsic = self._map_intrinsic(type_name, is_pointer, is_scalar)
        if intrinsic is not None:
            return _mapped(intrinsic)

        api_enum = self.enums.get(type_name)
        if api_enum is not None:
            if is_pointer:
                return _failed(MappingOutcome.INVALID,
                               f"Used type seems to be enum '{api_enum.identifier}' but it's a pointer, "
                               f"which is suspicious in C.")
            return _mapped(api_enum.identifier)

        # Delegates are never arrays, so scalar context is irrelevant here
        api_delegate = self.delegates.get(type_name)
        if api_delegate is not None:
            if not is_pointer:
                return _failed(MappingOutcome.INVALID,
                               f"Used type seems to be delegate '{api_delegate.identifier}' but it's not "
                               f"a pointer, which is invalid C.")
            if collapse_delegates:
                return _mapped(HANDLE_TYPE, is_delegate=True)
            return _mapped(api_delegate.identifier, is_delegate=True)

        is_replaced = type_name in self.struct_type_replacer
        if is_replaced:
            type_name = self.struct_type_replacer[type_name]

        if is_replaced or type_name in self.structs:
            if not is_pointer:
                return _mapped(type_name)
            if is_scalar:
                return _mapped(f"in {type_name}" if is_const else f"ref {type_name}")
            if direction is CodeDirection.NATIVE_TO_MANAGED:
                # Native arrays are not copied into managed arrays, callers walk the memory
                return _mapped(HANDLE_TYPE)
            return _mapped(f"{type_name}[]")

        if type_name in self.excluded_types:
            return _failed(MappingOutcome.EXCLUDED, f"Type '{c_type}' is in the 'Excluded' list.")
        return _failed(MappingOutcome.UNKNOWN, f"No known mapping for type '{c_type}'.")

    @staticmethod
    def _map_intrinsic(type_name: str, is_pointer: bool, is_scalar: bool) -> str | None:
        if not is_pointer:
            return CSHARP_TYPE_MAP.get(type_name)
        if type_name == "char":
            return STRING_TYPE
        if type_name == "void":
            return f"{HANDLE_TYPE} /* void* */"
        if type_name in INTEGER_TYPES:
            if is_scalar:
                return f"ref {CSHARP_TYPE_MAP[type_name]}"
            return f"{HANDLE_TYPE} /* {type_name}* */"
        return None
