"""
Loading of a parsed C API description from XML

Example document:

    <api>
      <constant name="B2_MAX_POLYGON_VERTICES" type="int" value="8"/>
      <enum name="b2BodyType">
        <field name="b2_staticBody" value="0"><comment>zero mass</comment></field>
      </enum>
      <struct name="b2Polygon">
        <field name="vertices" type="b2Vec2" length="B2_MAX_POLYGON_VERTICES"/>
      </struct>
      <delegate name="b2FreeFcn" return="void">
        <parameter name="mem" type="void*"/>
      </delegate>
      <function name="b2World_Step" return="void">
        <comment>Simulate a world for one time step.
@param timeStep the amount of time to simulate</comment>
        <parameter name="worldId" type="b2WorldId"/>
        <parameter name="timeStep" type="float"/>
      </function>
      <exclude type="b2Timer"/>
    </api>
"""

import xml.etree.ElementTree as ET

from .errors import ConfigError
from .model import (
    ApiConstant,
    ApiDelegate,
    ApiEnum,
    ApiEnumField,
    ApiFunction,
    ApiModel,
    ApiParameter,
    ApiStruct,
    ApiStructField,
)


def _attribute(element, name: str) -> str:
    value = element.get(name)
    if value is None or not value.strip():
        raise ConfigError(f"<{element.tag}> element missing '{name}' attribute")
    return value.strip()


def _comment(element) -> tuple[str, ...]:
    """Comment lines of an element, without surrounding blank lines"""
    comment = element.find("comment")
    if comment is None or not comment.text:
        return ()
    lines = [line.strip() for line in comment.text.splitlines()]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return tuple(lines)


def _parameters(element) -> tuple[ApiParameter, ...]:
    return tuple(
        ApiParameter(_attribute(p, "name"), _attribute(p, "type"))
        for p in element.findall("parameter")
    )


def _struct_field(element) -> ApiStructField:
    length = element.get("length")
    return ApiStructField(
        identifier=_attribute(element, "name"),
        type=_attribute(element, "type"),
        comment=_comment(element),
        is_fixed_array=length is not None,
        array_length=length.strip() if length is not None else None,
    )


def load_model(root) -> ApiModel:
    """Build an ApiModel from a parsed <api> element"""
    if root.tag != "api":
        raise ConfigError(f"Expected root element 'api', got '{root.tag}'")

    constants = tuple(
        ApiConstant(_attribute(e, "name"), _attribute(e, "type"), _attribute(e, "value"), _comment(e))
        for e in root.findall("constant")
    )
    enums = tuple(
        ApiEnum(
            _attribute(e, "name"),
            tuple(
                ApiEnumField(_attribute(f, "name"), f.get("value"), _comment(f))
                for f in e.findall("field")
            ),
            _comment(e),
        )
        for e in root.findall("enum")
    )
    structs = tuple(
        ApiStruct(_attribute(e, "name"), tuple(_struct_field(f) for f in e.findall("field")), _comment(e))
        for e in root.findall("struct")
    )
    delegates = tuple(
        ApiDelegate(_attribute(e, "name"), e.get("return", "void"), _parameters(e), _comment(e))
        for e in root.findall("delegate")
    )
    functions = tuple(
        ApiFunction(_attribute(e, "name"), e.get("return", "void"), _parameters(e), _comment(e))
        for e in root.findall("function")
    )
    excluded_types = frozenset(_attribute(e, "type") for e in root.findall("exclude"))

    return ApiModel(constants, structs, delegates, functions, enums, excluded_types)


def load_model_file(model_path) -> ApiModel:
    """Parse an XML API description file"""
    try:
        tree = ET.parse(model_path)
    except ET.ParseError as e:
        raise ConfigError(f"XML parsing error: {e}")
    except FileNotFoundError:
        raise FileNotFoundError(f"Model file not found: {model_path}")
    return load_model(tree.getroot())


def load_model_string(text: str) -> ApiModel:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ConfigError(f"XML parsing error: {e}")
    return load_model(root)
