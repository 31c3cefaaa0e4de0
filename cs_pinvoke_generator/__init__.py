"""
C# P/Invoke Bindings Generator - Generate C# DllImport bindings from a parsed C API model
"""

from .generator import CSharpBindingsGenerator, GenerationReport, SkippedItem
from .type_mapper import CodeDirection, MappedType, MappingOutcome, TypeMapper, is_array_parameter
from .code_generators import CSharpRenderer, OutputBuilder
from .builders import BuildResult, DeclarationBuilder
from .config import GeneratorConfig, parse_config_file
from .model_loader import load_model_file, load_model_string
from .errors import ArrayLengthError, ConfigError, DuplicateIdentifierError, ModelError
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

__version__ = "0.1.0"

__all__ = [
    "CSharpBindingsGenerator",
    "GenerationReport",
    "SkippedItem",
    "CodeDirection",
    "MappedType",
    "MappingOutcome",
    "TypeMapper",
    "is_array_parameter",
    "CSharpRenderer",
    "OutputBuilder",
    "BuildResult",
    "DeclarationBuilder",
    "GeneratorConfig",
    "parse_config_file",
    "load_model_file",
    "load_model_string",
    "ArrayLengthError",
    "ConfigError",
    "DuplicateIdentifierError",
    "ModelError",
    "ApiConstant",
    "ApiDelegate",
    "ApiEnum",
    "ApiEnumField",
    "ApiFunction",
    "ApiModel",
    "ApiParameter",
    "ApiStruct",
    "ApiStructField",
]
