"""
Base module - shared tables, line builder and style helpers for all generators.

Every emitter builds a flat list of Line(depth, text) values and renders it in
a final pass, so nesting logic never deals with whitespace. The CSS style
mapper here is shared by the React and HTML generators only; Flutter has its
own Dart mapper.
"""

import html
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Union

from generators.models import DesignElement, ElementArgs, ElementType, Number

# ---------------------------------------------------------------------------
# Limits and defaults
# ---------------------------------------------------------------------------

MAX_DEPTH = 64
INDENT_SIZE = 2

DEFAULT_COMPONENT_NAME = 'UIComponent'
DEFAULT_WIDGET_NAME = 'UIWidget'
DEFAULT_HTML_TITLE = 'Generated UI'

CONTAINER_TYPES = frozenset({ElementType.CONTAINER, ElementType.CARD})

# Angular handler bindings, shared by the template emitter and the JSON listeners
BUTTON_HANDLER = 'onButtonClick'
INPUT_HANDLER = 'onInputChange'
BUTTON_CALLBACK = f'{BUTTON_HANDLER}()'
INPUT_CALLBACK = f'{INPUT_HANDLER}($event)'

# ---------------------------------------------------------------------------
# Tag tables
# ---------------------------------------------------------------------------

FALLBACK_TAG = 'div'

# Angular template and Angular JSON
ANGULAR_TAG_MAP = {
    ElementType.BUTTON: 'button',
    ElementType.INPUT: 'input',
    ElementType.TEXT: 'span',
    ElementType.IMAGE: 'img',
    ElementType.CONTAINER: 'div',
    ElementType.CARD: 'div',
    ElementType.LIST: 'ul',
    ElementType.ICON: 'i',
}


def angular_tag(element_type: Union[ElementType, str]) -> str:
    return ANGULAR_TAG_MAP.get(element_type, FALLBACK_TAG)


def type_name(element: DesignElement) -> str:
    """Plain string form of the element type, known or not."""
    if isinstance(element.type, ElementType):
        return element.type.value
    return str(element.type)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class GenerationError(ValueError):
    """Base class for generation failures."""


class UnsupportedFrameworkError(GenerationError):
    def __init__(self, framework: object):
        self.framework = framework
        super().__init__(
            f"Unsupported framework: {framework!r}. "
            f"Expected one of: react, angular, flutter, html"
        )


class TreeDepthError(GenerationError):
    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(f"Design tree is nested deeper than {limit} levels")


# ---------------------------------------------------------------------------
# Tree traversal (explicit stack, no recursion)
# ---------------------------------------------------------------------------

def tree_depth(elements: Sequence[DesignElement], limit: Optional[int] = None) -> int:
    """Number of nesting levels in the tree; stops early once past ``limit``."""
    deepest = 0
    stack = [(element, 1) for element in elements]
    while stack:
        element, level = stack.pop()
        if level > deepest:
            deepest = level
            if limit is not None and deepest > limit:
                break
        for child in element.children or ():
            stack.append((child, level + 1))
    return deepest


def ensure_depth(elements: Sequence[DesignElement], limit: int = MAX_DEPTH) -> None:
    depth = tree_depth(elements, limit)
    if depth > limit:
        raise TreeDepthError(depth, limit)


def walk(elements: Sequence[DesignElement]) -> Iterator[DesignElement]:
    """Pre-order traversal in document order."""
    stack = list(reversed(elements))
    while stack:
        element = stack.pop()
        yield element
        stack.extend(reversed(element.children or []))


# ---------------------------------------------------------------------------
# Line builder
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Line:
    depth: int
    text: str


def indent_lines(lines: Iterable[Line], levels: int = 1) -> List[Line]:
    return [Line(line.depth + levels, line.text) for line in lines]


def wrap_lines(opening: str, body: Sequence[Line], closing: str) -> List[Line]:
    """Opening line, body one level deeper, closing line.

    An empty body collapses to ``opening + closing`` on a single line.
    """
    if not body:
        return [Line(0, f'{opening}{closing}')]
    return [Line(0, opening), *indent_lines(body), Line(0, closing)]


def append_to_last(lines: List[Line], suffix: str) -> List[Line]:
    if not lines:
        return lines
    last = lines[-1]
    return [*lines[:-1], Line(last.depth, last.text + suffix)]


def render_lines(lines: Iterable[Line], indent_size: int = INDENT_SIZE) -> str:
    return '\n'.join(
        f"{' ' * (line.depth * indent_size)}{line.text}" if line.text else ''
        for line in lines
    )


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_number(value: Number) -> str:
    """16.0 -> '16', 1.5 -> '1.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2026-01-01T09:30:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def kebab_case(name: str) -> str:
    """MyCard -> my-card, UIComponent -> ui-component."""
    spaced = re.sub(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])', '-', name)
    return re.sub(r'[^a-zA-Z0-9]+', '-', spaced).strip('-').lower()


def sanitize_component_name(name: Optional[str], default: str) -> str:
    """Reduce a user supplied name to a valid class identifier."""
    if not name:
        return default
    cleaned = re.sub(r'[^a-zA-Z0-9]', '', name)
    if not cleaned:
        return default
    if not cleaned[0].isalpha():
        cleaned = 'Component' + cleaned
    return cleaned


def escape_text(text: str) -> str:
    return html.escape(text, quote=False)


def escape_attr(value: str) -> str:
    return html.escape(value, quote=True)


def _escape_braces(value: str) -> str:
    return value.replace('{', '&#123;').replace('}', '&#125;')


def escape_jsx_text(text: str) -> str:
    return _escape_braces(escape_text(text))


# Angular reads {{ }} as interpolation and a lone { as an ICU expression,
# in text and in attribute values alike
def escape_angular_text(text: str) -> str:
    return _escape_braces(escape_text(text))


def escape_angular_attr(value: str) -> str:
    return _escape_braces(escape_attr(value))


# ---------------------------------------------------------------------------
# CSS style mapper (React + HTML)
# ---------------------------------------------------------------------------

def css_font_weight(weight: str) -> str:
    """Flutter-style 'w600' -> '600'; anything else unchanged."""
    match = re.fullmatch(r'w(\d{3})', weight.strip().lower())
    return match.group(1) if match else weight


def css_style(args: ElementArgs) -> Dict[str, str]:
    """Map element properties to camelCase CSS declarations.

    A key is present only when its source property is set; numeric values
    carry a px unit.
    """
    style: Dict[str, str] = {}

    if args.background_color:
        style['backgroundColor'] = args.background_color
    if args.text_color:
        style['color'] = args.text_color
    if args.border_color:
        style['borderColor'] = args.border_color
    if args.border_radius is not None:
        style['borderRadius'] = f'{format_number(args.border_radius)}px'
    if args.padding is not None:
        style['padding'] = f'{format_number(args.padding)}px'
    if args.margin is not None:
        style['margin'] = f'{format_number(args.margin)}px'
    if args.font_size is not None:
        style['fontSize'] = f'{format_number(args.font_size)}px'
    if args.font_weight:
        style['fontWeight'] = css_font_weight(args.font_weight)

    return style


def css_property_name(key: str) -> str:
    """backgroundColor -> background-color."""
    return re.sub(r'(?<!^)(?=[A-Z])', '-', key).lower()


def css_declarations(style: Dict[str, str]) -> str:
    return '; '.join(f'{css_property_name(key)}: {value}' for key, value in style.items())
