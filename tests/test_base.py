"""Tests for shared generator helpers."""
from datetime import datetime, timedelta, timezone

import pytest

from generators.base import (
    Line, TreeDepthError, append_to_last, css_declarations, css_style, ensure_depth,
    escape_angular_attr, escape_angular_text, escape_jsx_text,
    format_number, format_timestamp, indent_lines, kebab_case, render_lines,
    sanitize_component_name, tree_depth, walk, wrap_lines,
)
from generators.models import DesignElement, ElementArgs


class TestLineBuilder:
    """Verify Line indentation and rendering."""

    def test_render_uses_two_space_indent(self):
        lines = [Line(0, 'a'), Line(1, 'b'), Line(3, 'c')]
        assert render_lines(lines) == 'a\n  b\n      c'

    def test_blank_lines_carry_no_indent(self):
        assert render_lines([Line(2, 'x'), Line(2, ''), Line(2, 'y')]) == '    x\n\n    y'

    def test_wrap_lines_nests_body(self):
        wrapped = wrap_lines('<div>', [Line(0, '<p>Hi</p>')], '</div>')
        assert render_lines(wrapped) == '<div>\n  <p>Hi</p>\n</div>'

    def test_wrap_lines_collapses_empty_body(self):
        assert wrap_lines('<div>', [], '</div>') == [Line(0, '<div></div>')]

    def test_indent_lines(self):
        assert indent_lines([Line(0, 'a'), Line(1, 'b')], 2) == [Line(2, 'a'), Line(3, 'b')]

    def test_append_to_last(self):
        assert append_to_last([Line(0, 'a'), Line(1, 'b')], ',') == [Line(0, 'a'), Line(1, 'b,')]
        assert append_to_last([], ',') == []


class TestTreeHelpers:
    """Verify iterative traversal and the depth guard."""

    def test_depth_of_flat_and_nested_trees(self, sample_tree, ordered_container):
        assert tree_depth([]) == 0
        assert tree_depth(sample_tree) == 2
        assert tree_depth([ordered_container]) == 2

    def test_walk_is_pre_order(self, sample_tree):
        assert [element.id for element in walk(sample_tree)] == ['title', 'card-1', 'email', 'btn-1', 'hero']

    def test_ensure_depth_raises_past_limit(self, ordered_container):
        ensure_depth([ordered_container], limit=2)
        with pytest.raises(TreeDepthError) as exc_info:
            ensure_depth([ordered_container], limit=1)
        assert exc_info.value.limit == 1
        assert 'deeper than 1 levels' in str(exc_info.value)

    def test_very_deep_tree_does_not_recurse(self):
        node = DesignElement(id='leaf', type='text')
        for level in range(5000):
            node = DesignElement(id=str(level), type='container', children=[node])
        assert tree_depth([node], limit=64) == 65


class TestFormatting:
    """Verify number, timestamp and name formatting."""

    @pytest.mark.parametrize('value,expected', [(16, '16'), (16.0, '16'), (1.5, '1.5')])
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_timestamp_is_utc_with_milliseconds(self):
        moment = datetime(2026, 3, 1, 12, 0, 5, 123456, tzinfo=timezone.utc)
        assert format_timestamp(moment) == '2026-03-01T12:00:05.123Z'

    def test_timestamp_converts_offsets(self):
        moment = datetime(2026, 3, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == '2026-03-01T12:00:00.000Z'

    def test_naive_timestamp_treated_as_utc(self):
        assert format_timestamp(datetime(2026, 3, 1)) == '2026-03-01T00:00:00.000Z'

    @pytest.mark.parametrize('name,expected', [
        ('UIComponent', 'ui-component'),
        ('MyCard', 'my-card'),
        ('LoginForm2', 'login-form2'),
        ('dashboard', 'dashboard'),
    ])
    def test_kebab_case(self, name, expected):
        assert kebab_case(name) == expected

    @pytest.mark.parametrize('name,expected', [
        (None, 'UIComponent'),
        ('', 'UIComponent'),
        ('!!!', 'UIComponent'),
        ('My Card', 'MyCard'),
        ('9Lives', 'Component9Lives'),
    ])
    def test_sanitize_component_name(self, name, expected):
        assert sanitize_component_name(name, 'UIComponent') == expected


class TestEscaping:
    """Verify markup escaping per template language."""

    def test_jsx_and_angular_text_hide_braces(self):
        for escape in (escape_jsx_text, escape_angular_text):
            assert escape('<a> {{x}}') == '&lt;a&gt; &#123;&#123;x&#125;&#125;'

    def test_angular_attr_hides_braces_and_quotes(self):
        assert escape_angular_attr('"{{user}}"') == '&quot;&#123;&#123;user&#125;&#125;&quot;'


class TestCssStyle:
    """Verify the shared CSS mapper."""

    def test_empty_args_give_empty_style(self):
        assert css_style(ElementArgs()) == {}

    def test_key_order_and_units(self):
        args = ElementArgs(
            font_weight='w600', font_size=14, margin=4, padding=8, border_radius=6,
            border_color='#e2e8f0', text_color='#111827', background_color='#ffffff',
        )
        assert list(css_style(args).items()) == [
            ('backgroundColor', '#ffffff'),
            ('color', '#111827'),
            ('borderColor', '#e2e8f0'),
            ('borderRadius', '6px'),
            ('padding', '8px'),
            ('margin', '4px'),
            ('fontSize', '14px'),
            ('fontWeight', '600'),
        ]

    def test_zero_values_are_kept(self):
        assert css_style(ElementArgs(padding=0)) == {'padding': '0px'}

    def test_declarations_use_kebab_case(self):
        style = {'backgroundColor': '#fff', 'borderRadius': '4px'}
        assert css_declarations(style) == 'background-color: #fff; border-radius: 4px'
