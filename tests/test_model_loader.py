"""
Tests for loading API models from XML
"""

import pytest

from cs_pinvoke_generator.errors import ConfigError
from cs_pinvoke_generator.generator import CSharpBindingsGenerator
from cs_pinvoke_generator.model import ApiParameter
from cs_pinvoke_generator.model_loader import load_model_file, load_model_string


class TestModelLoader:
    """Test XML model loading"""

    def test_load_model_file(self, model_xml):
        model = load_model_file(model_xml)

        assert [c.identifier for c in model.constants] == ["B2_MAX_WORKERS"]
        assert model.constants[0].comment == ("Maximum number of simultaneous worlds",)
        assert [e.identifier for e in model.enums] == ["b2ShapeType"]
        assert [s.identifier for s in model.structs] == ["b2Circle", "b2Hull"]
        assert [d.identifier for d in model.delegates] == ["b2FreeFcn"]
        assert [f.identifier for f in model.functions] == ["b2SetAllocator", "b2GetTicks", "b2Timer_Start"]
        assert model.excluded_types == frozenset({"b2Timer"})

    def test_enum_fields(self, model_xml):
        model = load_model_file(model_xml)
        fields = model.enums[0].fields

        assert [(f.identifier, f.value) for f in fields] == [
            ("b2_circleShape", None),
            ("b2_capsuleShape", None),
            ("b2_shapeTypeCount", "5"),
        ]
        assert fields[0].comment == ("A circle with an offset",)
        assert model.enums[0].comment == ("Shape type",)

    def test_struct_fields(self, model_xml):
        model = load_model_file(model_xml)
        circle, hull = model.structs

        assert not circle.fields[0].is_fixed_array
        assert circle.fields[0].type == "b2Vec2"
        assert hull.fields[0].is_fixed_array
        assert hull.fields[0].array_length == "4"

    def test_function_parameters_and_comment(self, model_xml):
        model = load_model_file(model_xml)
        function = model.functions[0]

        assert function.return_type == "void"
        assert function.parameters == (ApiParameter("allocFcn", "void*"), ApiParameter("freeFcn", "b2FreeFcn*"))
        assert function.comment == ("Override the default allocator.", "@param freeFcn the free function")

    def test_missing_return_defaults_to_void(self):
        model = load_model_string('<api><delegate name="Cb"/></api>')

        assert model.delegates[0].return_type == "void"
        assert model.delegates[0].parameters == ()

    def test_missing_name(self):
        with pytest.raises(ConfigError, match="<struct> element missing 'name' attribute"):
            load_model_string("<api><struct/></api>")

    def test_wrong_root(self):
        with pytest.raises(ConfigError, match="Expected root element 'api'"):
            load_model_string("<model/>")

    def test_malformed_xml(self):
        with pytest.raises(ConfigError, match="XML parsing error"):
            load_model_string("<api>")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_model_file(tmp_path / "missing.xml")

    def test_generate_from_loaded_model(self, model_xml):
        model = load_model_file(model_xml)
        generator = CSharpBindingsGenerator(struct_type_replacer={"b2Vec2": "Vector2"})

        output = generator.generate(model)

        assert "public enum b2ShapeType" in output
        assert "    b2_shapeTypeCount = 5," in output
        assert "    public Vector2 points3;" in output
        assert "public static extern void b2SetAllocator(IntPtr /* void* */ allocFcn, IntPtr freeFcn);" in output
        assert "public static void b2SetAllocator(IntPtr /* void* */ allocFcn, b2FreeFcn freeFcn)" in output
        assert "public static extern ulong b2GetTicks();" in output
        assert "b2Timer_Start" not in output
        assert generator.last_report.counts["functions"] == 2
