"""
React Code Generator - functional TypeScript component with inline styles.

Each element renders to one JSX tag; containers and cards recurse over their
children in order. Styles come from the shared CSS mapper and are written as
an object literal.
"""

import json
from typing import Callable, Dict, List, Sequence

from generators.base import (
    CONTAINER_TYPES,
    Line, css_style, escape_attr, escape_jsx_text, indent_lines, render_lines,
    type_name, wrap_lines,
)
from generators.models import DesignElement, ElementArgs, ElementType


def _style_prop(args: ElementArgs) -> str:
    style = css_style(args)
    if not style:
        return ''
    return f' style={{{json.dumps(style, ensure_ascii=False)}}}'


def _react_button(element: DesignElement) -> List[Line]:
    args = element.args
    disabled = ' disabled' if args.disabled else ''
    text = escape_jsx_text(args.text or 'Button')
    return [Line(0, f'<button type="button"{disabled}{_style_prop(args)}>{text}</button>')]


def _react_input(element: DesignElement) -> List[Line]:
    args = element.args
    attrs = [f'type="{escape_attr(args.type or "text")}"']
    if args.placeholder:
        attrs.append(f'placeholder="{escape_attr(args.placeholder)}"')
    if args.disabled:
        attrs.append('disabled')
    if args.required:
        attrs.append('required')
    return [Line(0, f'<input {" ".join(attrs)}{_style_prop(args)} />')]


def _react_text(element: DesignElement) -> List[Line]:
    text = escape_jsx_text(element.args.text or 'Text')
    return [Line(0, f'<p{_style_prop(element.args)}>{text}</p>')]


def _react_image(element: DesignElement) -> List[Line]:
    src = escape_attr(element.args.src or '')
    alt = escape_attr(element.name)
    return [Line(0, f'<img src="{src}" alt="{alt}"{_style_prop(element.args)} />')]


def _react_container(element: DesignElement) -> List[Line]:
    children: List[Line] = []
    for child in element.children or []:
        children.extend(_react_element(child))
    return wrap_lines(f'<div{_style_prop(element.args)}>', children, '</div>')


def _react_fallback(element: DesignElement) -> List[Line]:
    text = escape_jsx_text(element.args.text or f'{type_name(element)} element')
    return [Line(0, f'<div{_style_prop(element.args)}>{text}</div>')]


_REACT_RENDERERS: Dict[ElementType, Callable[[DesignElement], List[Line]]] = {
    ElementType.BUTTON: _react_button,
    ElementType.INPUT: _react_input,
    ElementType.TEXT: _react_text,
    ElementType.IMAGE: _react_image,
    **{element_type: _react_container for element_type in CONTAINER_TYPES},
}


def _react_element(element: DesignElement) -> List[Line]:
    renderer = _REACT_RENDERERS.get(element.type, _react_fallback)
    return renderer(element)


def generate_react_code(elements: Sequence[DesignElement], component_name: str) -> str:
    """Generate a React function component rendering the whole tree."""
    body: List[Line] = []
    for element in elements:
        body.extend(_react_element(element))

    root = wrap_lines('<div className={`ui-container ${className}`}>', body, '</div>')
    inner_jsx = render_lines(indent_lines(root, 2))

    return f'''import React from 'react';

interface {component_name}Props {{
  className?: string;
}}

export const {component_name}: React.FC<{component_name}Props> = ({{ className = '' }}) => {{
  return (
{inner_jsx}
  );
}};

export default {component_name};
'''
