"""
Pytest configuration and fixtures
"""

from datetime import datetime

import pytest

from cs_pinvoke_generator.generator import CSharpBindingsGenerator
from cs_pinvoke_generator.model import (
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


FIXED_TIME = datetime(2024, 5, 1, 12, 30, 0)


def field(name, c_type, length=None, comment=()):
    return ApiStructField(name, c_type, tuple(comment), length is not None, length)


def param(name, c_type):
    return ApiParameter(name, c_type)


@pytest.fixture
def box2d_model():
    """A small slice of the box2d v3 API"""
    constants = (
        ApiConstant("B2_MAX_POLYGON_VERTICES", "int", "8",
                    ("The maximum number of vertices on a convex polygon.",)),
        ApiConstant("B2_DEFAULT_MASK_BITS", "ulong", "ulong.MaxValue"),
    )
    enums = (
        ApiEnum("b2BodyType", (
            ApiEnumField("b2_staticBody", "0", ("zero mass, zero velocity, may be manually moved",)),
            ApiEnumField("b2_kinematicBody", "1"),
            ApiEnumField("b2_dynamicBody", "2"),
        )),
    )
    structs = (
        ApiStruct("b2BodyId", (field("index1", "int32_t"), field("world0", "uint16_t"),
                               field("generation", "uint16_t"))),
        ApiStruct("b2WorldId", (field("index1", "uint16_t"), field("generation", "uint16_t"))),
        ApiStruct("b2ShapeId", (field("index1", "int32_t"), field("world0", "uint16_t"),
                                field("generation", "uint16_t"))),
        ApiStruct("b2Rot", (field("c", "float", comment=("cosine",)), field("s", "float", comment=("sine",))),
                  ("2D rotation",)),
        ApiStruct("b2Transform", (field("p", "b2Vec2"), field("q", "b2Rot"))),
        ApiStruct("b2Polygon", (
            field("vertices", "b2Vec2", "B2_MAX_POLYGON_VERTICES"),
            field("count", "int"),
            field("radius", "float"),
        )),
        ApiStruct("b2BodyDef", (
            field("type", "b2BodyType"),
            field("position", "b2Vec2"),
            field("isAwake", "bool"),
            field("userData", "void*"),
        )),
        ApiStruct("b2Profile", (field("step", "float"), field("timer", "b2Timer"))),
    )
    delegates = (
        ApiDelegate("b2TaskCallback", "void", (
            param("startIndex", "int"), param("endIndex", "int"),
            param("workerIndex", "uint32_t"), param("taskContext", "void*"),
        ), ("Task interface",)),
        ApiDelegate("b2FrictionCallback", "float", (
            param("frictionA", "float"), param("userMaterialIdA", "int"),
            param("frictionB", "float"), param("userMaterialIdB", "int"),
        )),
    )
    functions = (
        ApiFunction("b2Body_GetPosition", "b2Vec2", (param("bodyId", "b2BodyId"),),
                    ("Get the world position of a body.",)),
        ApiFunction("b2Body_SetTransform", "void", (
            param("bodyId", "b2BodyId"), param("position", "b2Vec2"), param("rotation", "b2Rot"),
        )),
        ApiFunction("b2Body_IsAwake", "bool", (param("bodyId", "b2BodyId"),)),
        ApiFunction("b2World_SetFrictionCallback", "void", (
            param("worldId", "b2WorldId"), param("callback", "b2FrictionCallback*"),
        ), ("Set the friction callback.", "@param callback the friction mixing function")),
        ApiFunction("b2Body_GetShapes", "int", (
            param("bodyId", "b2BodyId"), param("shapeArray", "b2ShapeId*"), param("capacity", "int"),
        )),
        ApiFunction("b2GetMilliseconds", "float", (param("timer", "const b2Timer*"),)),
    )
    return ApiModel(constants, structs, delegates, functions, enums, frozenset({"b2Timer"}))


@pytest.fixture
def generator():
    """Generator configured like the box2d bindings"""
    return CSharpBindingsGenerator(
        extra_usings="using System.Numerics;",
        struct_type_replacer={"b2Vec2": "Vector2"},
        should_generate_init_ctor=lambda name: name in ("b2Rot", "b2Polygon"),
        namespace="Box2dNet.Interop",
        class_name="B2Api",
        library_name="box2d.dll",
        debug_library_name="box2dd.dll",
        library_constant="Box2DLibrary",
        api_name="Box2D v3",
        clock=lambda: FIXED_TIME,
    )


@pytest.fixture
def model_xml(tmp_path):
    """An XML API description on disk"""
    path = tmp_path / "api.xml"
    path.write_text("""<?xml version="1.0"?>
<api>
  <constant name="B2_MAX_WORKERS" type="int" value="64">
    <comment>Maximum number of simultaneous worlds</comment>
  </constant>
  <enum name="b2ShapeType">
    <comment>Shape type</comment>
    <field name="b2_circleShape"><comment>A circle with an offset</comment></field>
    <field name="b2_capsuleShape"/>
    <field name="b2_shapeTypeCount" value="5"/>
  </enum>
  <struct name="b2Circle">
    <comment>A solid circle</comment>
    <field name="center" type="b2Vec2"/>
    <field name="radius" type="float"/>
  </struct>
  <struct name="b2Hull">
    <field name="points" type="b2Vec2" length="4"/>
    <field name="count" type="int"/>
  </struct>
  <delegate name="b2FreeFcn" return="void">
    <parameter name="mem" type="void*"/>
  </delegate>
  <function name="b2SetAllocator" return="void">
    <comment>
      Override the default allocator.
      @param freeFcn the free function
    </comment>
    <parameter name="allocFcn" type="void*"/>
    <parameter name="freeFcn" type="b2FreeFcn*"/>
  </function>
  <function name="b2GetTicks" return="uint64_t"/>
  <function name="b2Timer_Start" return="b2Timer"/>
  <exclude type="b2Timer"/>
</api>
""")
    return path


@pytest.fixture
def config_xml(tmp_path):
    """An XML generator configuration on disk"""
    path = tmp_path / "config.xml"
    path.write_text("""<?xml version="1.0"?>
<generator namespace="Box2dNet.Interop" class="B2Api" api="Box2D v3">
  <library constant="Box2DLibrary" release="box2d.dll" debug="box2dd.dll"/>
  <using namespace="System.Numerics"/>
  <replace from="b2Vec2" to="Vector2"/>
  <constructor pattern="b2Circle"/>
  <exclude type="b2Mutex"/>
</generator>
""")
    return path
