"""
JSON interchange generator.

Two shapes: the framework-neutral ``ui-design`` tree used for React, Flutter
and HTML, and the ``angular-template`` shape of element/attribute/listener
triples with Tailwind classes. Both recurse to any depth.
"""

import json
from typing import Any, Dict, List, Sequence

from generators.base import (
    BUTTON_CALLBACK, INPUT_CALLBACK,
    angular_tag, type_name,
)
from generators.models import (
    AngularAttribute, AngularListener, AngularTemplate,
    DesignElement, ElementType,
)
from generators.tailwind import tailwind_classes

JSON_VERSION = '1.0.0'
DESIGN_DOCUMENT_TYPE = 'ui-design'
ANGULAR_DOCUMENT_TYPE = 'angular-template'


def _dumps(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _json_number(value):
    return int(value) if isinstance(value, float) and value.is_integer() else value


# ---------------------------------------------------------------------------
# Default shape
# ---------------------------------------------------------------------------

def element_to_dict(element: DesignElement) -> Dict[str, Any]:
    """Interchange form of one element and its subtree."""
    entry: Dict[str, Any] = {
        'id': element.id,
        'type': type_name(element),
        'name': element.name,
        'position': {'x': _json_number(element.x), 'y': _json_number(element.y)},
        'size': {'width': _json_number(element.width), 'height': _json_number(element.height)},
        'args': element.args.model_dump(by_alias=True, exclude_none=True),
    }
    if element.children is not None:
        entry['children'] = [element_to_dict(child) for child in element.children]
    return entry


def generate_json(elements: Sequence[DesignElement], exported_at: str) -> str:
    document = {
        'version': JSON_VERSION,
        'type': DESIGN_DOCUMENT_TYPE,
        'elements': [element_to_dict(element) for element in elements],
        'metadata': {
            'totalElements': len(elements),
            'exportedAt': exported_at,
        },
    }
    return _dumps(document)


# ---------------------------------------------------------------------------
# Angular shape
# ---------------------------------------------------------------------------

def _angular_attributes(element: DesignElement) -> List[AngularAttribute]:
    args = element.args
    attributes = []

    if args.placeholder:
        attributes.append(AngularAttribute(name='placeholder', value=args.placeholder))
    if args.type:
        attributes.append(AngularAttribute(name='type', value=args.type))
    if args.disabled:
        attributes.append(AngularAttribute(name='disabled', value='true'))
    if args.required:
        attributes.append(AngularAttribute(name='required', value='true'))

    if element.type == ElementType.IMAGE:
        if args.src:
            attributes.append(AngularAttribute(name='src', value=args.src))
        if element.name:
            attributes.append(AngularAttribute(name='alt', value=element.name))

    return attributes


def _angular_listeners(element: DesignElement) -> List[AngularListener]:
    if element.type == ElementType.BUTTON:
        return [AngularListener(event_name='click', call_back=BUTTON_CALLBACK)]
    if element.type == ElementType.INPUT:
        return [AngularListener(event_name='change', call_back=INPUT_CALLBACK)]
    return []


def element_to_angular_template(element: DesignElement) -> AngularTemplate:
    """Map one element (and its subtree) to an Angular template node."""
    children = [element_to_angular_template(child) for child in element.children or []]
    return AngularTemplate(
        element=angular_tag(element.type),
        class_names=tailwind_classes(element),
        text=element.args.text,
        attributes=_angular_attributes(element) or None,
        listeners=_angular_listeners(element) or None,
        children=children or None,
    )


def generate_angular_json(elements: Sequence[DesignElement], exported_at: str) -> str:
    templates = [
        element_to_angular_template(element).model_dump(by_alias=True, exclude_none=True)
        for element in elements
    ]
    document = {
        'version': JSON_VERSION,
        'type': ANGULAR_DOCUMENT_TYPE,
        'templates': templates,
        'metadata': {
            'totalElements': len(elements),
            'exportedAt': exported_at,
            'tailwindEnabled': True,
        },
    }
    return _dumps(document)
