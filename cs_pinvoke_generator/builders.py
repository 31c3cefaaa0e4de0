"""
Builders turning API model items into structured C# declarations
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .comments import build_doc_comment
from .constants import BOOL_MARSHAL_ATTRIBUTE, BOOL_RETURN_MARSHAL_ATTRIBUTE, DELEGATE_TO_HANDLE
from .declarations import (
    ArrayFieldDeclaration,
    ConstantDeclaration,
    ConstructorDeclaration,
    DelegateDeclaration,
    EnumDeclaration,
    EnumMemberDeclaration,
    FieldDeclaration,
    FunctionDeclaration,
    OverloadDeclaration,
    ParameterDeclaration,
    StructDeclaration,
    escape_keyword,
)
from .errors import ArrayLengthError
from .model import ApiConstant, ApiDelegate, ApiEnum, ApiFunction, ApiParameter, ApiStruct, ApiStructField
from .type_mapper import CodeDirection, MappedType, TypeMapper, is_array_parameter


D = TypeVar("D")


@dataclass
class BuildResult(Generic[D]):
    """A declaration, or the mapping failure that prevented it"""
    declaration: D | None = None
    failure: MappedType | None = None


class _MappingFailed(Exception):
    # Only used inside DeclarationBuilder to unwind one item
    def __init__(self, mapped: MappedType):
        super().__init__(mapped.reason)
        self.mapped = mapped


def _is_bool(c_type: str) -> bool:
    return c_type.strip() == "bool"


def _parse_int_literal(value) -> int | None:
    if value is None:
        return None
    text = str(value).strip().rstrip("uUlL")
    if len(text) > 1 and text[0] == "0" and text.isdigit():
        # C octal literal
        try:
            return int(text, 8)
        except ValueError:
            return None
    for base in (10, 0):
        try:
            return int(text, base)
        except ValueError:
            continue
    return None


class DeclarationBuilder:
    """Builds declarations for one generation run"""

    def __init__(self, type_mapper: TypeMapper, constants: list[ApiConstant],
                 should_generate_init_ctor: Callable[[str], bool]):
        self.type_mapper = type_mapper
        self.constants = {c.identifier: c for c in constants}
        self.should_generate_init_ctor = should_generate_init_ctor

    def _map(self, c_type: str, **kwargs) -> MappedType:
        mapped = self.type_mapper.map_type(c_type, **kwargs)
        if not mapped.ok:
            raise _MappingFailed(mapped)
        return mapped

    def _map_return_type(self, c_type: str) -> str:
        return self._map(c_type, is_scalar=False, direction=CodeDirection.NATIVE_TO_MANAGED).cs_type

    @staticmethod
    def _attempt(build, item) -> BuildResult:
        try:
            return BuildResult(declaration=build(item))
        except _MappingFailed as e:
            return BuildResult(failure=e.mapped)

    # Enums and constants never reference other types

    def build_enum(self, api_enum: ApiEnum) -> BuildResult[EnumDeclaration]:
        members = [
            EnumMemberDeclaration(f.identifier, f.value, build_doc_comment(f.comment))
            for f in api_enum.fields
        ]
        return BuildResult(EnumDeclaration(api_enum.identifier, members, build_doc_comment(api_enum.comment)))

    def build_constant(self, api_constant: ApiConstant) -> BuildResult[ConstantDeclaration]:
        doc = build_doc_comment(api_constant.comment, original_type=api_constant.type)
        return BuildResult(ConstantDeclaration(api_constant.identifier, api_constant.type, api_constant.value, doc))

    def build_parameters(self, parameters: list[ApiParameter], include_marshal_attributes: bool,
                         collapse_delegates: bool) -> list[ParameterDeclaration]:
        """Map a parameter list, deciding array vs single item per pointer parameter"""
        declarations = []
        for i, parameter in enumerate(parameters):
            is_array = is_array_parameter(parameters, i)
            mapped = self._map(parameter.type, is_scalar=not is_array,
                               direction=CodeDirection.MANAGED_TO_NATIVE,
                               collapse_delegates=collapse_delegates)
            attributes = []
            if include_marshal_attributes and _is_bool(parameter.type):
                attributes.append(BOOL_MARSHAL_ATTRIBUTE)
            declarations.append(ParameterDeclaration(escape_keyword(parameter.identifier), mapped.cs_type,
                                                     attributes, mapped.is_delegate))
        return declarations

    @staticmethod
    def build_arguments(parameters: list[ParameterDeclaration]) -> list[str]:
        """Arguments forwarding an overload's parameters to the P/Invoke declaration"""
        arguments = []
        for p in parameters:
            if p.is_delegate:
                arguments.append(f"{DELEGATE_TO_HANDLE}({p.name})")
            elif p.cs_type.startswith("ref "):
                arguments.append(f"ref {p.name}")
            else:
                arguments.append(p.name)
        return arguments

    def build_delegate(self, api_delegate: ApiDelegate) -> BuildResult[DelegateDeclaration]:
        return self._attempt(self._build_delegate, api_delegate)

    def _build_delegate(self, api_delegate: ApiDelegate) -> DelegateDeclaration:
        parameters = self.build_parameters(api_delegate.parameters, True, True)
        return_type = self._map_return_type(api_delegate.return_type)
        doc = build_doc_comment(api_delegate.comment, api_delegate.return_type, api_delegate.parameters)
        return DelegateDeclaration(api_delegate.identifier, return_type, parameters, doc)

    def build_function(self, api_function: ApiFunction) -> BuildResult[FunctionDeclaration]:
        return self._attempt(self._build_function, api_function)

    def _build_function(self, api_function: ApiFunction) -> FunctionDeclaration:
        parameters = self.build_parameters(api_function.parameters, True, True)
        return_type = self._map_return_type(api_function.return_type)
        return_attributes = [BOOL_RETURN_MARSHAL_ATTRIBUTE] if _is_bool(api_function.return_type) else []
        doc = build_doc_comment(api_function.comment, api_function.return_type, api_function.parameters)
        declaration = FunctionDeclaration(api_function.identifier, return_type, parameters, doc, return_attributes)

        if any(p.is_delegate for p in parameters):
            # Strongly typed delegates instead of IntPtr
            typed_parameters = self.build_parameters(api_function.parameters, False, False)
            declaration.overload = OverloadDeclaration(
                typed_parameters,
                self.build_arguments(typed_parameters),
                build_doc_comment(api_function.comment, api_function.return_type, api_function.parameters),
            )
        return declaration

    def build_struct(self, api_struct: ApiStruct) -> BuildResult[StructDeclaration]:
        return self._attempt(self._build_struct, api_struct)

    def _build_struct(self, api_struct: ApiStruct) -> StructDeclaration:
        fields = []
        for api_field in api_struct.fields:
            cs_type = self._map(api_field.type, is_scalar=False,
                                direction=CodeDirection.NATIVE_TO_MANAGED).cs_type
            doc = build_doc_comment(api_field.comment, original_type=api_field.type)
            attributes = [BOOL_MARSHAL_ATTRIBUTE] if _is_bool(api_field.type) else []
            if api_field.is_fixed_array:
                length = self.resolve_array_length(api_struct.identifier, api_field)
                fields.append(ArrayFieldDeclaration(api_field.identifier, cs_type, length, doc, attributes))
            else:
                fields.append(FieldDeclaration(escape_keyword(api_field.identifier), cs_type, doc, attributes))

        declaration = StructDeclaration(api_struct.identifier, fields, build_doc_comment(api_struct.comment))
        declaration.constructor = self.build_constructor(declaration)
        return declaration

    def resolve_array_length(self, struct_name: str, api_field: ApiStructField) -> int:
        """Length of a fixed array field, either a literal or the value of a named constant"""
        token = api_field.array_length
        constant = self.constants.get(token) if token is not None else None
        value = constant.value if constant is not None else token
        length = _parse_int_literal(value)
        if length is None or length < 0:
            raise ArrayLengthError(struct_name, api_field.identifier, token)
        return length

    def build_constructor(self, declaration: StructDeclaration) -> ConstructorDeclaration | None:
        """Convenience constructor taking every field, only for structs without inline arrays"""
        if declaration.has_array_fields or not self.should_generate_init_ctor(declaration.name):
            return None
        parameters = [ParameterDeclaration(f.name, f.cs_type) for f in declaration.fields]
        return ConstructorDeclaration(declaration.name, parameters)
