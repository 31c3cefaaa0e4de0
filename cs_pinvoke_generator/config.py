"""
XML configuration file parsing for the C# P/Invoke bindings generator
"""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_API_NAME,
    DEFAULT_LIBRARY_CONSTANT,
    DEFAULT_NAMESPACE,
    NATIVE_METHODS_CLASS,
)
from .errors import ConfigError


@dataclass
class GeneratorConfig:
    """Configuration for C# bindings generation"""
    namespace: str = DEFAULT_NAMESPACE
    class_name: str = NATIVE_METHODS_CLASS
    api_name: str = DEFAULT_API_NAME
    library_constant: str = DEFAULT_LIBRARY_CONSTANT
    library_name: str = "native"
    debug_library_name: str | None = None
    using_namespaces: list[str] = field(default_factory=list)
    struct_type_replacer: dict[str, str] = field(default_factory=dict)
    constructor_patterns: list[tuple[str, bool]] = field(default_factory=list)
    excluded_types: set[str] = field(default_factory=set)

    @property
    def extra_usings(self) -> str:
        return "\n".join(f"using {ns};" for ns in self.using_namespaces)

    def should_generate_init_ctor(self, struct_name: str) -> bool:
        """True if a constructor pattern matches the struct name"""
        for pattern, is_regex in self.constructor_patterns:
            if is_regex:
                if re.fullmatch(pattern, struct_name):
                    return True
            elif pattern == struct_name:
                return True
        return False


def _required(element, attribute: str) -> str:
    value = element.get(attribute)
    if not value or not value.strip():
        raise ConfigError(f"{element.tag.capitalize()} element missing '{attribute}' attribute")
    return value.strip()


def parse_config_file(config_path) -> GeneratorConfig:
    """Parse XML configuration file and return GeneratorConfig object"""
    try:
        tree = ET.parse(config_path)
    except ET.ParseError as e:
        raise ConfigError(f"XML parsing error: {e}")
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    root = tree.getroot()
    if root.tag != "generator":
        raise ConfigError(f"Expected root element 'generator', got '{root.tag}'")

    config = GeneratorConfig()
    config.namespace = root.get("namespace", DEFAULT_NAMESPACE).strip()
    config.class_name = root.get("class", NATIVE_METHODS_CLASS).strip()
    config.api_name = root.get("api", DEFAULT_API_NAME).strip()

    libraries = root.findall("library")
    if len(libraries) > 1:
        raise ConfigError("Only one library element is allowed")
    for library in libraries:
        config.library_name = _required(library, "release")
        config.library_constant = library.get("constant", DEFAULT_LIBRARY_CONSTANT).strip()
        debug = library.get("debug")
        if debug is not None and debug.strip():
            config.debug_library_name = debug.strip()

    # Extra using statements spliced into the file header
    for using in root.findall("using"):
        config.using_namespaces.append(_required(using, "namespace"))

    # C structs replaced by existing .NET types
    for replace in root.findall("replace"):
        config.struct_type_replacer[_required(replace, "from")] = _required(replace, "to")

    # Structs that get an all-fields constructor (support both simple and regex)
    for constructor in root.findall("constructor"):
        pattern = _required(constructor, "pattern")
        is_regex = constructor.get("regex", "false").lower() == "true"
        if is_regex:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ConfigError(f"Invalid constructor pattern '{pattern}': {e}")
        config.constructor_patterns.append((pattern, is_regex))

    for exclude in root.findall("exclude"):
        config.excluded_types.add(_required(exclude, "type"))

    return config
