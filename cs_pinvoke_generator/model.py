"""
In-memory description of a C API, as produced by a header parser
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ApiParameter:
    identifier: str
    type: str


@dataclass(frozen=True)
class ApiConstant:
    identifier: str
    type: str
    value: str
    comment: tuple[str, ...] = ()


@dataclass(frozen=True)
class ApiEnumField:
    identifier: str
    value: str | None = None
    comment: tuple[str, ...] = ()


@dataclass(frozen=True)
class ApiEnum:
    identifier: str
    fields: tuple[ApiEnumField, ...] = ()
    comment: tuple[str, ...] = ()


@dataclass(frozen=True)
class ApiStructField:
    """A struct member

    When is_fixed_array is set, type is the element type and array_length is
    either an integer literal or the identifier of an ApiConstant.
    """
    identifier: str
    type: str
    comment: tuple[str, ...] = ()
    is_fixed_array: bool = False
    array_length: str | None = None


@dataclass(frozen=True)
class ApiStruct:
    identifier: str
    fields: tuple[ApiStructField, ...] = ()
    comment: tuple[str, ...] = ()


@dataclass(frozen=True)
class ApiDelegate:
    """A C function pointer typedef"""
    identifier: str
    return_type: str
    parameters: tuple[ApiParameter, ...] = ()
    comment: tuple[str, ...] = ()


@dataclass(frozen=True)
class ApiFunction:
    """An exported C function"""
    identifier: str
    return_type: str
    parameters: tuple[ApiParameter, ...] = ()
    comment: tuple[str, ...] = ()


@dataclass(frozen=True)
class ApiModel:
    """Everything one generation run consumes, in declaration order"""
    constants: tuple[ApiConstant, ...] = ()
    structs: tuple[ApiStruct, ...] = ()
    delegates: tuple[ApiDelegate, ...] = ()
    functions: tuple[ApiFunction, ...] = ()
    enums: tuple[ApiEnum, ...] = ()
    excluded_types: frozenset[str] = field(default_factory=frozenset)
