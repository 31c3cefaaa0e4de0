"""
Tests for XML configuration file parsing
"""

import pytest

from cs_pinvoke_generator.config import GeneratorConfig, parse_config_file
from cs_pinvoke_generator.errors import ConfigError


class TestXMLConfigParsing:
    """Test XML configuration file parsing functionality"""

    def test_parse_valid_config_file(self, config_xml):
        config = parse_config_file(str(config_xml))

        assert config.namespace == "Box2dNet.Interop"
        assert config.class_name == "B2Api"
        assert config.api_name == "Box2D v3"
        assert config.library_constant == "Box2DLibrary"
        assert config.library_name == "box2d.dll"
        assert config.debug_library_name == "box2dd.dll"
        assert config.struct_type_replacer == {"b2Vec2": "Vector2"}
        assert config.excluded_types == {"b2Mutex"}
        assert config.extra_usings == "using System.Numerics;"

    def test_defaults(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text("<generator/>")

        config = parse_config_file(config_file)

        assert config == GeneratorConfig()
        assert config.extra_usings == ""
        assert not config.should_generate_init_ctor("b2Rot")

    def test_constructor_patterns(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text("""
        <generator>
            <constructor pattern="b2Rot"/>
            <constructor pattern="b2.*Id" regex="true"/>
        </generator>
        """)

        config = parse_config_file(config_file)

        assert config.should_generate_init_ctor("b2Rot")
        assert config.should_generate_init_ctor("b2BodyId")
        assert not config.should_generate_init_ctor("b2BodyIdList")
        assert not config.should_generate_init_ctor("b2Ro")

    def test_multiple_usings(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text("""
        <generator>
            <using namespace="System.Numerics"/>
            <using namespace="System.Runtime.CompilerServices"/>
        </generator>
        """)

        config = parse_config_file(config_file)

        assert config.extra_usings == "using System.Numerics;\nusing System.Runtime.CompilerServices;"

    def test_wrong_root_element(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text("<bindings/>")

        with pytest.raises(ConfigError, match="Expected root element 'generator'"):
            parse_config_file(config_file)

    def test_replace_missing_attribute(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text('<generator><replace from="b2Vec2"/></generator>')

        with pytest.raises(ConfigError, match="Replace element missing 'to' attribute"):
            parse_config_file(config_file)

    def test_library_missing_release(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text('<generator><library debug="d.dll"/></generator>')

        with pytest.raises(ConfigError, match="'release'"):
            parse_config_file(config_file)

    def test_invalid_regex(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text('<generator><constructor pattern="b2[" regex="true"/></generator>')

        with pytest.raises(ConfigError, match="Invalid constructor pattern"):
            parse_config_file(config_file)

    def test_malformed_xml(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text("<generator>")

        with pytest.raises(ConfigError, match="XML parsing error"):
            parse_config_file(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_config_file(tmp_path / "missing.xml")

    def test_config_errors_are_value_errors(self, tmp_path):
        config_file = tmp_path / "config.xml"
        config_file.write_text("<other/>")

        with pytest.raises(ValueError):
            parse_config_file(config_file)
