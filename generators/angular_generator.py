"""
Angular Code Generator - template, component class and stylesheet in one blob.

The template is styled with Tailwind utility classes rather than inline
styles. Buttons and inputs bind to handler methods that the generated class
declares; the caller splits the three sections into files.
"""

from typing import List, Sequence

from generators.base import (
    BUTTON_CALLBACK, BUTTON_HANDLER, CONTAINER_TYPES, INPUT_CALLBACK, INPUT_HANDLER,
    Line, angular_tag, escape_angular_attr, escape_angular_text, indent_lines, kebab_case,
    render_lines, type_name, walk, wrap_lines,
)
from generators.models import DesignElement, ElementType
from generators.tailwind import tailwind_classes

VOID_TAGS = frozenset({'input', 'img'})
ROOT_CLASSES = 'ui-container flex flex-col gap-4'


def _angular_attrs(element: DesignElement) -> List[str]:
    args = element.args
    attrs = [f'class="{" ".join(tailwind_classes(element))}"']

    if element.type == ElementType.BUTTON:
        attrs.append('type="button"')
    elif element.type == ElementType.INPUT:
        attrs.append(f'type="{escape_angular_attr(args.type or "text")}"')
        if args.placeholder:
            attrs.append(f'placeholder="{escape_angular_attr(args.placeholder)}"')
        if args.required:
            attrs.append('required')
    elif element.type == ElementType.IMAGE:
        attrs.append(f'src="{escape_angular_attr(args.src or "")}"')
        attrs.append(f'alt="{escape_angular_attr(element.name)}"')
    elif element.type == ElementType.ICON:
        attrs.append('aria-hidden="true"')

    if args.disabled and element.type in (ElementType.BUTTON, ElementType.INPUT):
        attrs.append('disabled')

    if element.type == ElementType.BUTTON:
        attrs.append(f'(click)="{BUTTON_CALLBACK}"')
    elif element.type == ElementType.INPUT:
        attrs.append(f'(change)="{INPUT_CALLBACK}"')

    return attrs


def _angular_text(element: DesignElement) -> str:
    text = element.args.text
    if element.type == ElementType.BUTTON:
        text = text or 'Button'
    elif element.type == ElementType.TEXT:
        text = text or 'Text'
    elif element.element_type is None:
        text = text or f'{type_name(element)} element'
    return escape_angular_text(text or '')


def _angular_element(element: DesignElement) -> List[Line]:
    tag = angular_tag(element.type)
    opening = f'<{tag} {" ".join(_angular_attrs(element))}'

    if tag in VOID_TAGS:
        return [Line(0, f'{opening} />')]

    if element.type in CONTAINER_TYPES:
        children: List[Line] = []
        for child in element.children or []:
            children.extend(_angular_element(child))
        return wrap_lines(f'{opening}>', children, f'</{tag}>')

    if element.type == ElementType.LIST:
        text = _angular_text(element)
        items = [Line(0, f'<li>{text}</li>')] if text else []
        return wrap_lines(f'{opening}>', items, f'</{tag}>')

    return [Line(0, f'{opening}>{_angular_text(element)}</{tag}>')]


def _handler_methods(elements: Sequence[DesignElement]) -> List[Line]:
    """Handler methods for the bindings the template actually uses."""
    kinds = {element.type for element in walk(elements)}
    methods: List[List[Line]] = []

    if ElementType.BUTTON in kinds:
        methods.append([
            Line(0, f'{BUTTON_HANDLER}(): void {{'),
            Line(1, "console.log('Button clicked');"),
            Line(0, '}'),
        ])
    if ElementType.INPUT in kinds:
        methods.append([
            Line(0, f'{INPUT_HANDLER}(event: Event): void {{'),
            Line(1, "console.log('Input changed', (event.target as HTMLInputElement).value);"),
            Line(0, '}'),
        ])

    if not methods:
        return [Line(0, 'constructor() {}')]

    lines: List[Line] = []
    for index, method in enumerate(methods):
        if index:
            lines.append(Line(0, ''))
        lines.extend(method)
    return lines


def component_class_name(component_name: str) -> str:
    if component_name.endswith('Component'):
        return component_name
    return f'{component_name}Component'


def generate_angular_code(elements: Sequence[DesignElement], component_name: str) -> str:
    """Generate the template, class and stylesheet of one Angular component."""
    selector = kebab_case(component_name) or 'ui-component'
    class_name = component_class_name(component_name)

    body: List[Line] = []
    for element in elements:
        body.extend(_angular_element(element))
    template = render_lines(wrap_lines(f'<div class="{ROOT_CLASSES}">', body, '</div>'))
    methods = render_lines(indent_lines(_handler_methods(elements)))

    return f'''<!-- {selector}.component.html -->
{template}

<!-- {selector}.component.ts -->
import {{ Component }} from '@angular/core';

@Component({{
  selector: 'app-{selector}',
  templateUrl: './{selector}.component.html',
  styleUrls: ['./{selector}.component.css'],
}})
export class {class_name} {{
{methods}
}}

/* {selector}.component.css */
:host {{
  display: block;
}}

.ui-container {{
  display: flex;
  flex-direction: column;
}}
'''
