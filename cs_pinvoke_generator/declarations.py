"""
Structured C# declarations, independent of their textual layout
"""

from dataclasses import dataclass, field

from .constants import CSHARP_KEYWORDS


def escape_keyword(name: str) -> str:
    """Escape C# keywords by prefixing with @"""
    if name in CSHARP_KEYWORDS:
        return f"@{name}"
    return name


@dataclass
class DocComment:
    summary: list[str] = field(default_factory=list)
    returns: str | None = None
    remarks: str | None = None
    params: list[tuple[str, list[str]]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.summary or self.returns or self.remarks or self.params)


@dataclass
class EnumMemberDeclaration:
    name: str
    value: str | None
    doc: DocComment


@dataclass
class EnumDeclaration:
    name: str
    members: list[EnumMemberDeclaration]
    doc: DocComment


@dataclass
class ParameterDeclaration:
    name: str
    cs_type: str
    attributes: list[str] = field(default_factory=list)
    is_delegate: bool = False


@dataclass
class DelegateDeclaration:
    name: str
    return_type: str
    parameters: list[ParameterDeclaration]
    doc: DocComment


@dataclass
class FieldDeclaration:
    name: str
    cs_type: str
    doc: DocComment
    attributes: list[str] = field(default_factory=list)


@dataclass
class ArrayFieldDeclaration:
    """A fixed-size inline array flattened into numbered fields"""
    name: str
    cs_type: str
    length: int
    doc: DocComment
    attributes: list[str] = field(default_factory=list)

    @property
    def accessor_name(self) -> str:
        return escape_keyword(self.name)

    @property
    def element_names(self) -> list[str]:
        return [f"{self.name}{i}" for i in range(self.length)]

    def element_name(self, index: int) -> str:
        """Field holding the element at index, as the generated accessor resolves it"""
        if not 0 <= index < self.length:
            raise IndexError(f"There are only {self.length} {self.name}.")
        return f"{self.name}{index}"


@dataclass
class ConstructorDeclaration:
    struct_name: str
    parameters: list[ParameterDeclaration]


@dataclass
class StructDeclaration:
    name: str
    fields: list[FieldDeclaration | ArrayFieldDeclaration]
    doc: DocComment
    constructor: ConstructorDeclaration | None = None

    @property
    def has_array_fields(self) -> bool:
        return any(isinstance(f, ArrayFieldDeclaration) for f in self.fields)


@dataclass
class ConstantDeclaration:
    name: str
    cs_type: str
    value: str
    doc: DocComment


@dataclass
class OverloadDeclaration:
    """Managed convenience overload forwarding to the P/Invoke declaration"""
    parameters: list[ParameterDeclaration]
    arguments: list[str]
    doc: DocComment


@dataclass
class FunctionDeclaration:
    name: str
    return_type: str
    parameters: list[ParameterDeclaration]
    doc: DocComment
    return_attributes: list[str] = field(default_factory=list)
    overload: OverloadDeclaration | None = None

    @property
    def returns_value(self) -> bool:
        return self.return_type != "void"
