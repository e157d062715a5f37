"""
Flutter Code Generator - a StatelessWidget returning a Column of widgets.

Uses its own Dart style mapper (ARGB Color literals, inline TextStyle) which
is independent of the CSS mapper in base.py.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from generators.base import (
    CONTAINER_TYPES,
    Line, append_to_last, format_number, indent_lines, render_lines, type_name,
)
from generators.models import DesignElement, ElementArgs, ElementType

DART_WEIGHT_MAP = {
    'normal': 'FontWeight.normal',
    'bold': 'FontWeight.bold',
    **{f'w{w}': f'FontWeight.w{w}' for w in range(100, 1000, 100)},
    **{str(w): f'FontWeight.w{w}' for w in range(100, 1000, 100)},
}

KEYBOARD_TYPE_MAP = {
    'email': 'TextInputType.emailAddress',
    'number': 'TextInputType.number',
    'tel': 'TextInputType.phone',
    'url': 'TextInputType.url',
}


# ---------------------------------------------------------------------------
# Dart style mapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DartStyle:
    background_color: Optional[str] = None
    text_style: Optional[str] = None


def dart_string(text: str) -> str:
    """Single-quoted Dart string literal."""
    escaped = (text.replace('\\', '\\\\')
               .replace("'", "\\'")
               .replace('$', '\\$')
               .replace('\n', '\\n')
               .replace('\r', '\\r'))
    return f"'{escaped}'"


def dart_color(value: Optional[str]) -> Optional[str]:
    """#0ea5e9 -> Color(0xFF0EA5E9); None for anything that is not hex."""
    if not value:
        return None
    color = value.strip().lstrip('#')
    if re.fullmatch(r'[0-9a-fA-F]{3}', color):
        color = ''.join(ch * 2 for ch in color)
    if re.fullmatch(r'[0-9a-fA-F]{6}', color):
        return f'Color(0xFF{color.upper()})'
    if re.fullmatch(r'[0-9a-fA-F]{8}', color):
        # CSS #RRGGBBAA -> Dart 0xAARRGGBB
        return f'Color(0x{color[6:].upper()}{color[:6].upper()})'
    return None


def dart_font_weight(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return DART_WEIGHT_MAP.get(value.strip().lower())


def dart_style(args: ElementArgs) -> DartStyle:
    """Dart fragments for the properties present on an element."""
    parts = []
    if args.font_size is not None:
        parts.append(f'fontSize: {format_number(args.font_size)}')
    weight = dart_font_weight(args.font_weight)
    if weight:
        parts.append(f'fontWeight: {weight}')
    text_color = dart_color(args.text_color)
    if text_color:
        parts.append(f'color: {text_color}')

    return DartStyle(
        background_color=dart_color(args.background_color),
        text_style=f'TextStyle({", ".join(parts)})' if parts else None,
    )


# ---------------------------------------------------------------------------
# Widget builders
# ---------------------------------------------------------------------------

def _call(constructor: str, arguments: List[List[Line]]) -> List[Line]:
    """``constructor(`` + one argument per item (trailing commas) + ``)``."""
    if not arguments:
        return [Line(0, f'{constructor}()')]
    lines = [Line(0, f'{constructor}(')]
    for argument in arguments:
        lines.extend(indent_lines(append_to_last(argument, ',')))
    lines.append(Line(0, ')'))
    return lines


def _named(name: str, value: str) -> List[Line]:
    return [Line(0, f'{name}: {value}')]


def _column(children: List[List[Line]]) -> List[Line]:
    items: List[Line] = []
    for child in children:
        items.extend(append_to_last(child, ','))
    if items:
        children_arg = [Line(0, 'children: ['), *indent_lines(items), Line(0, ']')]
    else:
        children_arg = [Line(0, 'children: []')]
    return _call('Column', [
        _named('crossAxisAlignment', 'CrossAxisAlignment.start'),
        children_arg,
    ])


def _flutter_button(element: DesignElement) -> List[Line]:
    args = element.args
    style = dart_style(args)
    label = dart_string(args.text or 'Button')
    child = f'Text({label}, style: {style.text_style})' if style.text_style else f'Text({label})'

    arguments = [_named('onPressed', 'null' if args.disabled else '() {}')]
    if style.background_color:
        arguments.append(_named('style', f'ElevatedButton.styleFrom(backgroundColor: {style.background_color})'))
    arguments.append(_named('child', child))
    return _call('ElevatedButton', arguments)


def _flutter_input(element: DesignElement) -> List[Line]:
    args = element.args
    style = dart_style(args)

    decoration = []
    if args.placeholder:
        decoration.append(_named('hintText', dart_string(args.placeholder)))
    decoration.append(_named('border', 'OutlineInputBorder()'))
    decoration_lines = _call('InputDecoration', decoration)
    decoration_lines[0] = Line(0, f'decoration: {decoration_lines[0].text}')

    arguments = [decoration_lines]
    if style.text_style:
        arguments.append(_named('style', style.text_style))
    input_type = (args.type or '').lower()
    if input_type in KEYBOARD_TYPE_MAP:
        arguments.append(_named('keyboardType', KEYBOARD_TYPE_MAP[input_type]))
    if input_type == 'password':
        arguments.append(_named('obscureText', 'true'))
    if args.disabled:
        arguments.append(_named('enabled', 'false'))
    return _call('TextField', arguments)


def _flutter_text(element: DesignElement) -> List[Line]:
    style = dart_style(element.args)
    text = dart_string(element.args.text or 'Text')
    if not style.text_style:
        return [Line(0, f'Text({text})')]
    return _call('Text', [[Line(0, text)], _named('style', style.text_style)])


def _flutter_image(element: DesignElement) -> List[Line]:
    src = dart_string(element.args.src or '')
    width = format_number(element.width)
    height = format_number(element.height)
    return [Line(0, f'Image.network({src}, width: {width}, height: {height})')]


def _flutter_container(element: DesignElement) -> List[Line]:
    return _column([_flutter_widget(child) for child in element.children or []])


def _flutter_fallback(element: DesignElement) -> List[Line]:
    return [Line(0, f'Text({dart_string(type_name(element) + " element")})')]


_FLUTTER_RENDERERS: Dict[ElementType, Callable[[DesignElement], List[Line]]] = {
    ElementType.BUTTON: _flutter_button,
    ElementType.INPUT: _flutter_input,
    ElementType.TEXT: _flutter_text,
    ElementType.IMAGE: _flutter_image,
    **{element_type: _flutter_container for element_type in CONTAINER_TYPES},
}


def _flutter_widget(element: DesignElement) -> List[Line]:
    renderer = _FLUTTER_RENDERERS.get(element.type, _flutter_fallback)
    return renderer(element)


def generate_flutter_code(elements: Sequence[DesignElement], widget_name: str) -> str:
    """Generate a Flutter StatelessWidget for the whole tree."""
    column = _column([_flutter_widget(element) for element in elements])
    column[0] = Line(column[0].depth, f'return {column[0].text}')
    column = append_to_last(column, ';')
    body = render_lines(indent_lines(column, 2))

    return f'''import 'package:flutter/material.dart';

class {widget_name} extends StatelessWidget {{
  const {widget_name}({{super.key}});

  @override
  Widget build(BuildContext context) {{
{body}
  }}
}}
'''
