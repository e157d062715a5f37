"""
Tailwind CSS class mapping for the Angular generators.

The translation is approximate: colours go through a fixed
hex -> token table and pixel values are bucketed into a handful of utility
tiers. Output is a deterministic function of element type and args.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from generators.models import DesignElement, ElementType, Number

# ---------------------------------------------------------------------------
# Colour table
# ---------------------------------------------------------------------------

FALLBACK_COLOR_TOKEN = 'gray-500'

COLOR_TOKEN_MAP: Dict[str, str] = {
    '#ffffff': 'white',
    '#000000': 'black',
    '#f8fafc': 'slate-50',
    '#f1f5f9': 'slate-100',
    '#e2e8f0': 'slate-200',
    '#cbd5e1': 'slate-300',
    '#64748b': 'slate-500',
    '#475569': 'slate-600',
    '#334155': 'slate-700',
    '#1e293b': 'slate-800',
    '#0f172a': 'slate-900',
    '#f3f4f6': 'gray-100',
    '#e5e7eb': 'gray-200',
    '#d1d5db': 'gray-300',
    '#6b7280': 'gray-500',
    '#374151': 'gray-700',
    '#111827': 'gray-900',
    '#e0f2fe': 'sky-100',
    '#0ea5e9': 'sky-500',
    '#0284c7': 'sky-600',
    '#dbeafe': 'blue-100',
    '#3b82f6': 'blue-500',
    '#2563eb': 'blue-600',
    '#6366f1': 'indigo-500',
    '#a855f7': 'purple-500',
    '#ec4899': 'pink-500',
    '#ef4444': 'red-500',
    '#dc2626': 'red-600',
    '#f59e0b': 'amber-500',
    '#eab308': 'yellow-500',
    '#22c55e': 'green-500',
    '#16a34a': 'green-600',
}

# ---------------------------------------------------------------------------
# Size tiers (threshold, class), checked top-down
# ---------------------------------------------------------------------------

FONT_SIZE_TIERS: Tuple[Tuple[Number, str], ...] = (
    (28, 'text-3xl'),
    (24, 'text-2xl'),
    (20, 'text-xl'),
)
SMALL_FONT_SIZE = 12
SMALL_FONT_CLASS = 'text-xs'
BASE_FONT_CLASS = 'text-base'
BOLD_WEIGHTS = frozenset({'bold', 'w600'})

PADDING_TIERS: Tuple[Tuple[Number, str], ...] = ((24, 'p-6'), (16, 'p-4'), (12, 'p-3'))
PADDING_MIN_CLASS = 'p-2'

MARGIN_TIERS: Tuple[Tuple[Number, str], ...] = ((24, 'm-6'), (16, 'm-4'), (12, 'm-3'))
MARGIN_MIN_CLASS = 'm-2'

RADIUS_TIERS: Tuple[Tuple[Number, str], ...] = ((16, 'rounded-xl'), (8, 'rounded-lg'))
RADIUS_MIN_CLASS = 'rounded'


# ---------------------------------------------------------------------------
# Per-type defaults
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TypeClasses:
    """Base classes for one element type plus the defaults args may replace."""
    base: Tuple[str, ...]
    padding: Tuple[str, ...] = ()
    radius: Optional[str] = None
    background: Optional[str] = None
    text_color: Optional[str] = None
    border_color: Optional[str] = None
    trailing: Tuple[str, ...] = ()


CONTAINER_CLASSES = TypeClasses(base=('flex', 'flex-col', 'gap-2'))

TYPE_CLASS_MAP: Dict[ElementType, TypeClasses] = {
    ElementType.BUTTON: TypeClasses(
        base=('inline-flex', 'items-center', 'justify-center', 'font-medium',
              'transition-colors', 'duration-200'),
        padding=('px-4', 'py-2'),
        radius='rounded-md',
        background='bg-blue-500',
        text_color='text-white',
        trailing=('hover:opacity-90',),
    ),
    ElementType.INPUT: TypeClasses(
        base=('block', 'w-full', 'border', 'focus:outline-none', 'focus:ring-2',
              'focus:ring-blue-500'),
        padding=('px-3', 'py-2'),
        radius='rounded-md',
        border_color='border-gray-300',
    ),
    ElementType.TEXT: TypeClasses(base=()),
    ElementType.IMAGE: TypeClasses(base=('max-w-full', 'h-auto', 'object-cover')),
    ElementType.CONTAINER: CONTAINER_CLASSES,
    ElementType.CARD: TypeClasses(
        base=('flex', 'flex-col', 'gap-2', 'shadow-md'),
        padding=('p-4',),
        radius='rounded-lg',
        background='bg-white',
    ),
    ElementType.LIST: TypeClasses(base=('list-disc', 'pl-5', 'space-y-1')),
    ElementType.ICON: TypeClasses(base=('inline-block',)),
}

DISABLED_CLASSES = ('opacity-50', 'cursor-not-allowed')


# ---------------------------------------------------------------------------
# Translation helpers
# ---------------------------------------------------------------------------

def _normalize_hex(value: str) -> str:
    color = value.strip().lower()
    if re.fullmatch(r'#[0-9a-f]{3}', color):
        return '#' + ''.join(ch * 2 for ch in color[1:])
    if re.fullmatch(r'#[0-9a-f]{8}', color):
        return color[:7]
    return color


def color_token(value: Optional[str]) -> str:
    """Nearest named token for a hex colour; unknown colours fall back to gray."""
    if not value:
        return FALLBACK_COLOR_TOKEN
    return COLOR_TOKEN_MAP.get(_normalize_hex(value), FALLBACK_COLOR_TOKEN)


def _tier(value: Number, tiers: Tuple[Tuple[Number, str], ...], smallest: str) -> str:
    for threshold, class_name in tiers:
        if value >= threshold:
            return class_name
    return smallest


def font_size_class(font_size: Optional[Number]) -> str:
    if font_size is None:
        return BASE_FONT_CLASS
    if font_size <= SMALL_FONT_SIZE:
        return SMALL_FONT_CLASS
    return _tier(font_size, FONT_SIZE_TIERS, BASE_FONT_CLASS)


def padding_class(padding: Number) -> str:
    return _tier(padding, PADDING_TIERS, PADDING_MIN_CLASS)


def margin_class(margin: Number) -> str:
    return _tier(margin, MARGIN_TIERS, MARGIN_MIN_CLASS)


def radius_class(radius: Number) -> Optional[str]:
    """None for a zero (or negative) radius."""
    if radius <= 0:
        return None
    return _tier(radius, RADIUS_TIERS, RADIUS_MIN_CLASS)


def is_bold(font_weight: Optional[str]) -> bool:
    return bool(font_weight) and font_weight.strip().lower() in BOLD_WEIGHTS


# ---------------------------------------------------------------------------
# Element mapping
# ---------------------------------------------------------------------------

def tailwind_classes(element: DesignElement) -> List[str]:
    """Ordered, duplicate-free utility classes for one element."""
    args = element.args
    defaults = TYPE_CLASS_MAP.get(element.type, CONTAINER_CLASSES)
    classes = list(defaults.base)

    if element.type == ElementType.TEXT:
        classes.append(font_size_class(args.font_size))
        if is_bold(args.font_weight):
            classes.append('font-bold')

    if args.padding is not None:
        classes.append(padding_class(args.padding))
    else:
        classes.extend(defaults.padding)

    if args.margin is not None:
        classes.append(margin_class(args.margin))

    radius = radius_class(args.border_radius) if args.border_radius is not None else defaults.radius
    if radius:
        classes.append(radius)

    if args.background_color:
        classes.append(f'bg-{color_token(args.background_color)}')
    elif defaults.background:
        classes.append(defaults.background)

    if args.text_color:
        classes.append(f'text-{color_token(args.text_color)}')
    elif defaults.text_color:
        classes.append(defaults.text_color)

    if args.border_color:
        classes.append('border')
        classes.append(f'border-{color_token(args.border_color)}')
    elif defaults.border_color:
        classes.append(defaults.border_color)

    classes.extend(defaults.trailing)

    if element.type == ElementType.BUTTON and args.disabled:
        classes.extend(DISABLED_CLASSES)

    return list(dict.fromkeys(classes))
