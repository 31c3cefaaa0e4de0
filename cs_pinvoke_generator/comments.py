"""
Conversion of C doc comments into C# XML documentation
"""

import re

from .declarations import DocComment
from .model import ApiParameter


PARAMETER_PATTERN = re.compile(r"@param\s+(?P<identifier>\S+)\s+(?P<description>.*)")


def build_doc_comment(comment, return_type: str | None = None,
                      parameters: list[ApiParameter] | None = None,
                      original_type: str | None = None) -> DocComment:
    """Build the documentation of one declaration

    Args:
        comment: Comment lines from the C header
        return_type: Original C return type of a function or delegate
        parameters: Parameters whose original C type should be documented
        original_type: Original C type of a field or constant
    """
    doc = DocComment()
    param_lines: dict[str, list[str]] = {}
    for line in comment:
        match = PARAMETER_PATTERN.match(line.strip())
        if match:
            param_lines.setdefault(match.group("identifier"), []).append(match.group("description"))
        else:
            doc.summary.append(line)

    if return_type and return_type.strip():
        doc.returns = f"Original C type: {return_type}"
    if original_type:
        doc.remarks = f"Original C type: {original_type}"

    for parameter in parameters or []:
        param_lines.setdefault(parameter.identifier, []).append(f"(Original C type: {parameter.type})")

    doc.params = list(param_lines.items())
    return doc


def escape_xml(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
