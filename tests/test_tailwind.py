"""Tests for the Tailwind class mapping used by the Angular generators."""
import pytest

from generators.models import DesignElement
from generators.tailwind import (
    FALLBACK_COLOR_TOKEN, color_token, font_size_class, is_bold, margin_class,
    padding_class, radius_class, tailwind_classes,
)


class TestColorTokens:
    """Verify hex -> token lookup."""

    @pytest.mark.parametrize('value,token', [
        ('#ffffff', 'white'),
        ('#FFFFFF', 'white'),
        ('#fff', 'white'),
        ('#0ea5e9', 'sky-500'),
        ('#0ea5e980', 'sky-500'),
        (' #1E293B ', 'slate-800'),
    ])
    def test_known_colors(self, value, token):
        assert color_token(value) == token

    @pytest.mark.parametrize('value', ['#123456', 'rebeccapurple', 'rgb(0, 0, 0)', '', None])
    def test_unknown_colors_fall_back(self, value):
        assert color_token(value) == FALLBACK_COLOR_TOKEN == 'gray-500'


class TestSizeTiers:
    """Verify the pixel -> utility tier buckets."""

    @pytest.mark.parametrize('size,expected', [
        (None, 'text-base'),
        (10, 'text-xs'),
        (12, 'text-xs'),
        (14, 'text-base'),
        (19.5, 'text-base'),
        (20, 'text-xl'),
        (24, 'text-2xl'),
        (28, 'text-3xl'),
        (48, 'text-3xl'),
    ])
    def test_font_size(self, size, expected):
        assert font_size_class(size) == expected

    @pytest.mark.parametrize('padding,expected', [(0, 'p-2'), (8, 'p-2'), (12, 'p-3'), (16, 'p-4'), (32, 'p-6')])
    def test_padding(self, padding, expected):
        assert padding_class(padding) == expected

    @pytest.mark.parametrize('margin,expected', [(4, 'm-2'), (12, 'm-3'), (20, 'm-4'), (24, 'm-6')])
    def test_margin(self, margin, expected):
        assert margin_class(margin) == expected

    @pytest.mark.parametrize('radius,expected', [(0, None), (4, 'rounded'), (8, 'rounded-lg'), (16, 'rounded-xl')])
    def test_radius(self, radius, expected):
        assert radius_class(radius) == expected

    @pytest.mark.parametrize('weight,expected', [
        ('bold', True), ('Bold', True), ('w600', True), ('normal', False), ('700', False), (None, False),
    ])
    def test_bold(self, weight, expected):
        assert is_bold(weight) is expected


class TestElementClasses:
    """Verify the per-element class lists."""

    def test_plain_button_defaults(self):
        button = DesignElement(id='b', type='button')
        assert tailwind_classes(button) == [
            'inline-flex', 'items-center', 'justify-center', 'font-medium', 'transition-colors', 'duration-200',
            'px-4', 'py-2', 'rounded-md', 'bg-blue-500', 'text-white', 'hover:opacity-90',
        ]

    def test_args_replace_button_defaults(self, button_element):
        classes = tailwind_classes(button_element)
        assert 'p-3' in classes and 'px-4' not in classes
        assert 'rounded-lg' in classes and 'rounded-md' not in classes
        assert 'bg-sky-500' in classes and 'bg-blue-500' not in classes

    def test_disabled_button(self):
        button = DesignElement(id='b', type='button', args={'disabled': True})
        assert tailwind_classes(button)[-2:] == ['opacity-50', 'cursor-not-allowed']

    def test_input_border_color(self):
        field = DesignElement(id='i', type='input', args={'borderColor': '#e2e8f0'})
        classes = tailwind_classes(field)
        assert 'border-slate-200' in classes
        assert 'border-gray-300' not in classes
        assert classes.count('border') == 1

    def test_text_typography(self):
        text = DesignElement(id='t', type='text', args={'fontSize': 20, 'fontWeight': 'w600', 'textColor': '#3b82f6'})
        assert tailwind_classes(text) == ['text-xl', 'font-bold', 'text-blue-500']

    def test_zero_radius_drops_default(self):
        card = DesignElement(id='c', type='card', args={'borderRadius': 0})
        classes = tailwind_classes(card)
        assert not any(name.startswith('rounded') for name in classes)

    def test_card_defaults(self):
        card = DesignElement(id='c', type='card')
        assert tailwind_classes(card) == ['flex', 'flex-col', 'gap-2', 'shadow-md', 'p-4', 'rounded-lg', 'bg-white']

    def test_margin_appended(self):
        image = DesignElement(id='img', type='image', args={'margin': 16})
        assert tailwind_classes(image) == ['max-w-full', 'h-auto', 'object-cover', 'm-4']

    def test_unknown_type_uses_container_classes(self):
        assert tailwind_classes(DesignElement(id='x', type='carousel')) == ['flex', 'flex-col', 'gap-2']

    def test_classes_are_unique(self):
        element = DesignElement(id='c', type='container', args={'padding': 8, 'borderColor': '#000000'})
        classes = tailwind_classes(element)
        assert len(classes) == len(set(classes))
