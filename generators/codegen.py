"""
Code generation entry point.

generate_code() validates the framework, bounds the tree depth, then hands
the tree to exactly one emitter. It either returns a complete GeneratedCode or
raises; nothing is emitted on failure.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Sequence, Union

from generators.angular_generator import generate_angular_code
from generators.base import (
    DEFAULT_COMPONENT_NAME, DEFAULT_HTML_TITLE, DEFAULT_WIDGET_NAME,
    UnsupportedFrameworkError, ensure_depth, format_timestamp, sanitize_component_name,
    utc_now,
)
from generators.flutter_generator import generate_flutter_code
from generators.html_generator import generate_html_code
from generators.json_generator import generate_angular_json, generate_json
from generators.models import (
    CodeGenerationOptions, DesignElement, Framework, GeneratedCode, OutputFormat,
)
from generators.react_generator import generate_react_code

JSON_LANGUAGE = 'json'
JSON_FILENAME = 'design.json'


class CodeEmitter(NamedTuple):
    render: Callable[[Sequence[DesignElement], str], str]
    language: str
    default_name: str


CODE_EMITTERS: Dict[Framework, CodeEmitter] = {
    Framework.REACT: CodeEmitter(generate_react_code, 'jsx', DEFAULT_COMPONENT_NAME),
    Framework.ANGULAR: CodeEmitter(generate_angular_code, 'html', DEFAULT_COMPONENT_NAME),
    Framework.FLUTTER: CodeEmitter(generate_flutter_code, 'dart', DEFAULT_WIDGET_NAME),
    Framework.HTML: CodeEmitter(generate_html_code, 'html', DEFAULT_HTML_TITLE),
}

# Download extension differs from the language tag only for JSX
EXTENSION_OVERRIDES = {'jsx': 'tsx'}


def resolve_framework(value: Union[Framework, str]) -> Framework:
    if isinstance(value, Framework):
        return value
    try:
        return Framework(value)
    except ValueError:
        raise UnsupportedFrameworkError(value) from None


def _coerce_elements(elements: Optional[Sequence[Any]]) -> list:
    return [
        element if isinstance(element, DesignElement) else DesignElement.model_validate(element)
        for element in elements or []
    ]


def generate_code(
    elements: Sequence[Union[DesignElement, Mapping[str, Any]]],
    options: Union[CodeGenerationOptions, Mapping[str, Any]],
    clock: Optional[Callable[[], datetime]] = None,
) -> GeneratedCode:
    """Render a design tree for one framework and output format.

    Args:
        elements: Top-level design elements (models or plain mappings).
        options: Target framework, output format and optional component name.
        clock: Source of the JSON ``exportedAt`` timestamp; defaults to the
            current UTC time. Pass a fixed clock for reproducible output.

    Raises:
        UnsupportedFrameworkError: framework is not react/angular/flutter/html.
        TreeDepthError: the tree nests deeper than MAX_DEPTH.
    """
    if not isinstance(options, CodeGenerationOptions):
        options = CodeGenerationOptions.model_validate(options)
    framework = resolve_framework(options.framework)

    tree = _coerce_elements(elements)
    ensure_depth(tree)

    if options.output_format == OutputFormat.JSON:
        exported_at = format_timestamp((clock or utc_now)())
        if framework == Framework.ANGULAR:
            code = generate_angular_json(tree, exported_at)
        else:
            code = generate_json(tree, exported_at)
        language = JSON_LANGUAGE
    else:
        emitter = CODE_EMITTERS[framework]
        name = sanitize_component_name(options.component_name, emitter.default_name)
        code = emitter.render(tree, name)
        language = emitter.language

    return GeneratedCode(
        code=code,
        format=options.output_format,
        framework=framework,
        language=language,
    )


# ---------------------------------------------------------------------------
# Output sinks
# ---------------------------------------------------------------------------

def file_extension(generated: GeneratedCode) -> str:
    return EXTENSION_OVERRIDES.get(generated.language, generated.language)


def suggested_filename(generated: GeneratedCode) -> str:
    if generated.format == OutputFormat.JSON:
        return JSON_FILENAME
    return f'component.{file_extension(generated)}'
