"""
Main C# bindings generator orchestration
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from .builders import BuildResult, DeclarationBuilder
from .code_generators import CSharpRenderer, OutputBuilder
from .constants import (
    DEFAULT_API_NAME,
    DEFAULT_LIBRARY_CONSTANT,
    DEFAULT_NAMESPACE,
    NATIVE_METHODS_CLASS,
)
from .model import ApiModel
from .type_mapper import MappingOutcome, TypeMapper


logger = logging.getLogger(__name__)

# Emission order, with the singular used in diagnostics
CATEGORIES = (
    ("enums", "enum"),
    ("delegates", "delegate"),
    ("structs", "struct"),
    ("constants", "const"),
    ("functions", "function"),
)


@dataclass(frozen=True)
class SkippedItem:
    kind: str
    identifier: str
    outcome: MappingOutcome
    reason: str


@dataclass
class GenerationReport:
    """Counts and diagnostics of one generation run"""
    counts: dict[str, int] = field(default_factory=dict)
    skipped: list[SkippedItem] = field(default_factory=list)
    invalid: list[SkippedItem] = field(default_factory=list)


class CSharpBindingsGenerator:
    """Generates C# P/Invoke bindings from an API model"""

    def __init__(self, extra_usings: str = "", struct_type_replacer: dict[str, str] | None = None,
                 should_generate_init_ctor: Callable[[str], bool] | None = None,
                 namespace: str = DEFAULT_NAMESPACE, class_name: str = NATIVE_METHODS_CLASS,
                 library_name: str = "native", debug_library_name: str | None = None,
                 library_constant: str = DEFAULT_LIBRARY_CONSTANT, api_name: str = DEFAULT_API_NAME,
                 clock: Callable[[], datetime] = datetime.now):
        self.extra_usings = extra_usings
        self.struct_type_replacer = dict(struct_type_replacer or {})
        self.should_generate_init_ctor = should_generate_init_ctor or (lambda name: False)
        self.namespace = namespace
        self.class_name = class_name
        self.library_name = library_name
        self.debug_library_name = debug_library_name
        self.library_constant = library_constant
        self.api_name = api_name
        self.clock = clock
        self.renderer = CSharpRenderer(library_constant)
        self.last_report: GenerationReport | None = None

    def generate(self, model: ApiModel) -> str:
        """Generate the complete C# file for the model

        Raises:
            ModelError: The model is malformed (duplicate identifiers, unresolvable array lengths)
        """
        # Lookup tables are complete before anything is emitted
        type_mapper = TypeMapper(model, self.struct_type_replacer)
        builder = DeclarationBuilder(type_mapper, model.constants, self.should_generate_init_ctor)
        report = GenerationReport()

        emitters = {
            "enums": (model.enums, builder.build_enum, self.renderer.render_enum),
            "delegates": (model.delegates, builder.build_delegate, self.renderer.render_delegate),
            "structs": (model.structs, builder.build_struct, self.renderer.render_struct),
            "constants": (model.constants, builder.build_constant, self.renderer.render_constant),
            "functions": (model.functions, builder.build_function, self.renderer.render_function),
        }
        rendered = {}
        for category, kind in CATEGORIES:
            items, build, render = emitters[category]
            rendered[category] = self._emit(kind, items, build, render, report)
            report.counts[category] = len(rendered[category])

        output = OutputBuilder.build(
            timestamp=self.clock().strftime("%Y-%m-%d %H:%M:%S"),
            namespace=self.namespace,
            class_name=self.class_name,
            extra_usings=self.extra_usings,
            library_constant=self.library_constant,
            library_name=self.library_name,
            debug_library_name=self.debug_library_name,
            api_name=self.api_name,
            **rendered,
        )

        logger.info("Generated:")
        for category, _ in CATEGORIES:
            logger.info("%d %s", report.counts[category], category)

        self.last_report = report
        return output

    @staticmethod
    def _emit(kind: str, items, build: Callable[..., BuildResult], render: Callable[..., str],
              report: GenerationReport) -> list[str]:
        """Build and render every item of one category, skipping items that fail to map"""
        rendered = []
        for item in items:
            result = build(item)
            if result.failure is None:
                rendered.append(render(result.declaration))
                continue

            failure = result.failure
            skipped = SkippedItem(kind, item.identifier, failure.outcome, failure.reason)
            if failure.skippable:
                report.skipped.append(skipped)
                logger.warning("skipping %s '%s' because: %s", kind, item.identifier, failure.reason)
            else:
                report.invalid.append(skipped)
                logger.error("skipping %s '%s' because the API model is inconsistent: %s",
                             kind, item.identifier, failure.reason)
        return rendered
