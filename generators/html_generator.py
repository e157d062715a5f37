"""
HTML Code Generator - complete standalone document with inline styles.

Mirrors the React tag mapping; styles are written as ``style="key: value"``
strings built from the shared CSS mapper.
"""

from typing import Callable, Dict, List, Sequence

from generators.base import (
    CONTAINER_TYPES,
    Line, css_declarations, css_style, escape_attr, escape_text, indent_lines,
    render_lines, type_name, wrap_lines,
)
from generators.models import DesignElement, ElementArgs, ElementType

RESET_CSS = '''* {
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}
body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
}
.ui-container {
  max-width: 1200px;
  margin: 0 auto;
  padding: 20px;
}'''


def _style_attr(args: ElementArgs) -> str:
    style = css_style(args)
    if not style:
        return ''
    return f' style="{escape_attr(css_declarations(style))}"'


def _html_button(element: DesignElement) -> List[Line]:
    args = element.args
    disabled = ' disabled' if args.disabled else ''
    text = escape_text(args.text or 'Button')
    return [Line(0, f'<button type="button"{disabled}{_style_attr(args)}>{text}</button>')]


def _html_input(element: DesignElement) -> List[Line]:
    args = element.args
    attrs = [f'type="{escape_attr(args.type or "text")}"']
    if args.placeholder:
        attrs.append(f'placeholder="{escape_attr(args.placeholder)}"')
    if args.disabled:
        attrs.append('disabled')
    if args.required:
        attrs.append('required')
    return [Line(0, f'<input {" ".join(attrs)}{_style_attr(args)} />')]


def _html_text(element: DesignElement) -> List[Line]:
    text = escape_text(element.args.text or 'Text')
    return [Line(0, f'<p{_style_attr(element.args)}>{text}</p>')]


def _html_image(element: DesignElement) -> List[Line]:
    src = escape_attr(element.args.src or '')
    alt = escape_attr(element.name)
    return [Line(0, f'<img src="{src}" alt="{alt}"{_style_attr(element.args)} />')]


def _html_container(element: DesignElement) -> List[Line]:
    children: List[Line] = []
    for child in element.children or []:
        children.extend(_html_element(child))
    return wrap_lines(f'<div{_style_attr(element.args)}>', children, '</div>')


def _html_fallback(element: DesignElement) -> List[Line]:
    text = escape_text(element.args.text or f'{type_name(element)} element')
    return [Line(0, f'<div{_style_attr(element.args)}>{text}</div>')]


_HTML_RENDERERS: Dict[ElementType, Callable[[DesignElement], List[Line]]] = {
    ElementType.BUTTON: _html_button,
    ElementType.INPUT: _html_input,
    ElementType.TEXT: _html_text,
    ElementType.IMAGE: _html_image,
    **{element_type: _html_container for element_type in CONTAINER_TYPES},
}


def _html_element(element: DesignElement) -> List[Line]:
    renderer = _HTML_RENDERERS.get(element.type, _html_fallback)
    return renderer(element)


def generate_html_code(elements: Sequence[DesignElement], title: str) -> str:
    """Generate a standalone HTML document for the whole tree."""
    body: List[Line] = []
    for element in elements:
        body.extend(_html_element(element))

    container = render_lines(indent_lines(wrap_lines('<div class="ui-container">', body, '</div>')))
    reset_css = render_lines(indent_lines([Line(0, line) for line in RESET_CSS.split('\n')], 2))

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape_text(title)}</title>
  <style>
{reset_css}
  </style>
</head>
<body>
{container}
</body>
</html>
'''
