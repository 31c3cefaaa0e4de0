#!/usr/bin/env python3
"""
CLI entry point for the C# P/Invoke bindings generator
Generates DllImport declarations from an XML description of a C API
"""

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

# Add parent directory to sys.path for direct execution
if __name__ == '__main__' and __package__ is None:
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cs_pinvoke_generator.config import GeneratorConfig, parse_config_file
from cs_pinvoke_generator.errors import ConfigError, ModelError
from cs_pinvoke_generator.generator import CSharpBindingsGenerator
from cs_pinvoke_generator.model_loader import load_model_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate C# P/Invoke bindings from a parsed C API description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --model box2d_api.xml --config box2d.xml --output B2Api.cs
  %(prog)s -m api.xml
        """
    )

    parser.add_argument(
        "-m", "--model",
        metavar="MODEL_FILE",
        required=True,
        help="XML description of the C API (constants, enums, structs, delegates, functions)"
    )

    parser.add_argument(
        "-C", "--config",
        metavar="CONFIG_FILE",
        help="XML configuration file (namespace, library, type replacements, constructors)"
    )

    parser.add_argument(
        "-o", "--output",
        metavar="FILE",
        help="Output C# file (prints to stdout if not specified)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = parse_config_file(args.config) if args.config else GeneratorConfig()
        model = load_model_file(args.model)
    except (ConfigError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if config.excluded_types:
        model = replace(model, excluded_types=model.excluded_types | config.excluded_types)

    generator = CSharpBindingsGenerator(
        extra_usings=config.extra_usings,
        struct_type_replacer=config.struct_type_replacer,
        should_generate_init_ctor=config.should_generate_init_ctor,
        namespace=config.namespace,
        class_name=config.class_name,
        library_name=config.library_name,
        debug_library_name=config.debug_library_name,
        library_constant=config.library_constant,
        api_name=config.api_name,
    )

    try:
        output = generator.generate(model)
    except ModelError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Only written after a complete run
    if args.output:
        Path(args.output).write_text(output)
        logging.getLogger(__name__).info("Generated bindings: %s", args.output)
    else:
        sys.stdout.write(output)


if __name__ == "__main__":
    main()
