"""
Rendering of structured declarations into C# source
"""

from .comments import escape_xml
from .constants import (
    DEFAULT_API_NAME,
    DEFAULT_LIBRARY_CONSTANT,
    DEFAULT_NAMESPACE,
    GENERATOR_NAME,
    NATIVE_METHODS_CLASS,
    REQUIRED_USINGS,
)
from .declarations import (
    ArrayFieldDeclaration,
    ConstantDeclaration,
    ConstructorDeclaration,
    DelegateDeclaration,
    DocComment,
    EnumDeclaration,
    FunctionDeclaration,
    ParameterDeclaration,
    StructDeclaration,
)


INDENT = "    "


class CSharpRenderer:
    """Renders declarations as C# P/Invoke code"""

    def __init__(self, library_constant: str = DEFAULT_LIBRARY_CONSTANT):
        self.library_constant = library_constant

    @staticmethod
    def render_doc(doc: DocComment, indent: str = "") -> list[str]:
        """Render XML documentation comment lines"""
        lines = []
        if doc.summary:
            lines.append(f"{indent}/// <summary>")
            lines.extend(f"{indent}/// {escape_xml(s)}".rstrip() for s in doc.summary)
            lines.append(f"{indent}/// </summary>")
        if doc.returns:
            lines.append(f"{indent}/// <returns>{escape_xml(doc.returns)}</returns>")
        if doc.remarks:
            lines.append(f"{indent}/// <remarks>{escape_xml(doc.remarks)}</remarks>")
        for name, param_lines in doc.params:
            text = [escape_xml(p) for p in param_lines]
            text[0] = f'<param name="{name}">{text[0]}'
            text[-1] = f"{text[-1]}</param>"
            lines.extend(f"{indent}/// {t}" for t in text)
        return lines

    @staticmethod
    def render_parameters(parameters: list[ParameterDeclaration]) -> str:
        rendered = []
        for p in parameters:
            attributes = "".join(f"{a} " for a in p.attributes)
            rendered.append(f"{attributes}{p.cs_type} {p.name}")
        return ", ".join(rendered)

    def render_enum(self, declaration: EnumDeclaration) -> str:
        lines = self.render_doc(declaration.doc)
        lines.append(f"public enum {declaration.name}")
        lines.append("{")
        for member in declaration.members:
            lines.extend(self.render_doc(member.doc, INDENT))
            value = "" if member.value is None else f" = {member.value}"
            lines.append(f"{INDENT}{member.name}{value},")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def render_delegate(self, declaration: DelegateDeclaration) -> str:
        lines = self.render_doc(declaration.doc)
        lines.append("[UnmanagedFunctionPointer(CallingConvention.Cdecl)]")
        lines.append(f"public delegate {declaration.return_type} {declaration.name}"
                     f"({self.render_parameters(declaration.parameters)});")
        return "\n".join(lines) + "\n"

    def render_struct(self, declaration: StructDeclaration) -> str:
        lines = self.render_doc(declaration.doc)
        lines.append("[StructLayout(LayoutKind.Sequential)]")
        lines.append(f"public partial struct {declaration.name}")
        lines.append("{")
        for field in declaration.fields:
            lines.extend(self.render_doc(field.doc, INDENT))
            if isinstance(field, ArrayFieldDeclaration):
                lines.extend(self._render_array_field(field))
            else:
                lines.extend(f"{INDENT}{a}" for a in field.attributes)
                lines.append(f"{INDENT}public {field.cs_type} {field.name};")
            lines.append("")
        if declaration.constructor:
            lines.extend(self._render_constructor(declaration.constructor))
        if lines[-1] == "":
            lines.pop()
        lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _render_array_field(field: ArrayFieldDeclaration) -> list[str]:
        # Marshal ByValArray is unreliable for inline struct arrays, so the
        # elements are repeated as fields and exposed through an accessor
        lines = []
        for name in field.element_names:
            lines.extend(f"{INDENT}{a}" for a in field.attributes)
            lines.append(f"{INDENT}public {field.cs_type} {name};")
        lines.append(f"{INDENT}/// <summary>.NET helper to get the inline {field.name} by index.</summary>")
        lines.append(f"{INDENT}public {field.cs_type} {field.accessor_name}(int idx)")
        lines.append(f"{INDENT}{{")
        lines.append(f"{INDENT * 2}return idx switch")
        lines.append(f"{INDENT * 2}{{")
        for i, name in enumerate(field.element_names):
            lines.append(f"{INDENT * 3}{i} => {name},")
        lines.append(f'{INDENT * 3}_ => throw new ArgumentOutOfRangeException(nameof(idx), '
                     f'"There are only {field.length} {field.name}.")')
        lines.append(f"{INDENT * 2}}};")
        lines.append(f"{INDENT}}}")
        return lines

    @staticmethod
    def _render_constructor(constructor: ConstructorDeclaration) -> list[str]:
        parameters = ", ".join(f"in {p.cs_type} {p.name}" for p in constructor.parameters)
        lines = [f"{INDENT}public {constructor.struct_name}({parameters})", f"{INDENT}{{"]
        lines.extend(f"{INDENT * 2}this.{p.name} = {p.name};" for p in constructor.parameters)
        lines.append(f"{INDENT}}}")
        return lines

    def render_constant(self, declaration: ConstantDeclaration) -> str:
        lines = self.render_doc(declaration.doc, INDENT)
        lines.append(f"{INDENT}public const {declaration.cs_type} {declaration.name} = {declaration.value};")
        return "\n".join(lines) + "\n"

    def render_function(self, declaration: FunctionDeclaration) -> str:
        lines = self.render_doc(declaration.doc, INDENT)
        lines.append(f"{INDENT}[DllImport({self.library_constant}, CallingConvention = CallingConvention.Cdecl)]")
        lines.extend(f"{INDENT}{a}" for a in declaration.return_attributes)
        lines.append(f"{INDENT}public static extern {declaration.return_type} {declaration.name}"
                     f"({self.render_parameters(declaration.parameters)});")

        overload = declaration.overload
        if overload is not None:
            lines.append("")
            lines.extend(self.render_doc(overload.doc, INDENT))
            lines.append(f"{INDENT}public static {declaration.return_type} {declaration.name}"
                         f"({self.render_parameters(overload.parameters)})")
            lines.append(f"{INDENT}{{")
            return_keyword = "return " if declaration.returns_value else ""
            lines.append(f"{INDENT * 2}{return_keyword}{declaration.name}({', '.join(overload.arguments)});")
            lines.append(f"{INDENT}}}")
        return "\n".join(lines) + "\n"


class OutputBuilder:
    """Builds the final C# output file"""

    @staticmethod
    def build(timestamp: str, enums: list[str], delegates: list[str], structs: list[str],
              constants: list[str], functions: list[str], namespace: str = DEFAULT_NAMESPACE,
              class_name: str = NATIVE_METHODS_CLASS, extra_usings: str = "",
              library_constant: str = DEFAULT_LIBRARY_CONSTANT, library_name: str = "native",
              debug_library_name: str | None = None, api_name: str = DEFAULT_API_NAME) -> str:
        """Build the final C# output"""
        parts = [f"// Generated by {GENERATOR_NAME} for {api_name} on {timestamp}", ""]

        parts.extend(REQUIRED_USINGS)
        if extra_usings.strip():
            parts.append(extra_usings.rstrip("\n"))
        parts.append("")
        parts.append("// ReSharper disable InconsistentNaming")
        parts.append("")

        parts.append(f"namespace {namespace}")
        parts.append("{")

        for group in (enums, delegates, structs):
            for declaration in group:
                parts.append("")
                parts.append(declaration.rstrip("\n"))

        parts.append("")
        parts.append(f"public static partial class {class_name}")
        parts.append("{")
        if debug_library_name:
            parts.append("#if DEBUG")
            parts.append(f'{INDENT}private const string {library_constant} = "{debug_library_name}";')
            parts.append("#else")
            parts.append(f'{INDENT}private const string {library_constant} = "{library_name}";')
            parts.append("#endif")
        else:
            parts.append(f'{INDENT}private const string {library_constant} = "{library_name}";')

        for group in (constants, functions):
            for declaration in group:
                parts.append("")
                parts.append(declaration.rstrip("\n"))

        parts.append("}")
        parts.append("}")
        return "\n".join(parts) + "\n"
