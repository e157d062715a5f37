"""Tests for design element models and input coercion."""
import pytest
from pydantic import ValidationError

from generators.models import (
    AngularListener, CodeGenerationOptions, DesignAnalysisResult, DesignElement,
    ElementArgs, ElementType, Framework, GeneratedCode, OutputFormat,
)


class TestElementArgs:
    """Verify camelCase aliases, pixel parsing and extensions."""

    def test_camel_case_keys(self):
        args = ElementArgs.model_validate({'backgroundColor': '#fff', 'fontSize': 14, 'textColor': '#000'})
        assert args.background_color == '#fff'
        assert args.font_size == 14
        assert args.text_color == '#000'

    def test_snake_case_keys_accepted(self):
        assert ElementArgs(border_radius=4).border_radius == 4

    @pytest.mark.parametrize('raw,expected', [('16px', 16), (' 12 PX ', 12), ('1.5px', 1.5), ('8', 8), (10, 10)])
    def test_pixel_strings_parsed(self, raw, expected):
        assert ElementArgs.model_validate({'padding': raw}).padding == expected

    def test_unparseable_length_dropped(self):
        assert ElementArgs.model_validate({'padding': '12px 24px'}).padding is None

    @pytest.mark.parametrize('raw,expected', [(600, '600'), (700.0, '700'), ('bold', 'bold')])
    def test_font_weight_stringified(self, raw, expected):
        assert ElementArgs.model_validate({'fontWeight': raw}).font_weight == expected

    def test_unknown_keys_kept_as_extensions(self):
        args = ElementArgs.model_validate({'text': 'Hi', 'icon': 'star', 'shadow': {'blur': 4}})
        assert args.extensions == {'icon': 'star', 'shadow': {'blur': 4}}
        dumped = args.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {'text': 'Hi', 'icon': 'star', 'shadow': {'blur': 4}}

    def test_no_extensions(self):
        assert ElementArgs().extensions == {}


class TestDesignElement:
    """Verify element coercion from loosely typed input."""

    def test_known_type_becomes_enum(self):
        element = DesignElement(id='a', type='card')
        assert element.type is ElementType.CARD
        assert element.element_type is ElementType.CARD

    def test_unknown_type_kept_as_string(self):
        element = DesignElement(id='a', type='carousel')
        assert element.type == 'carousel'
        assert element.element_type is None

    def test_defaults(self):
        element = DesignElement(id='a', type='text')
        assert element.name == ''
        assert (element.x, element.y, element.width, element.height) == (0, 0, 0, 0)
        assert element.args == ElementArgs()
        assert element.children is None

    def test_nulls_and_numeric_ids_coerced(self):
        element = DesignElement.model_validate({'id': 7, 'type': 'text', 'name': None, 'args': None})
        assert element.id == '7'
        assert element.name == ''
        assert element.args.text is None

    def test_nested_children(self):
        element = DesignElement.model_validate({
            'id': 'root', 'type': 'container',
            'children': [{'id': 'kid', 'type': 'button', 'args': {'text': 'Tap'}}],
        })
        assert element.children[0].type is ElementType.BUTTON
        assert element.children[0].args.text == 'Tap'

    def test_missing_type_rejected(self):
        with pytest.raises(ValidationError):
            DesignElement.model_validate({'id': 'a'})


class TestAnalysisResult:

    def test_loose_payload(self):
        result = DesignAnalysisResult.model_validate({
            'elements': [{'id': 'a', 'type': 'text'}],
            'summary': 'One label',
            'confidence': 0.8,
        })
        assert len(result.elements) == 1
        assert result.suggestions is None

    def test_empty_payload(self):
        result = DesignAnalysisResult.model_validate({})
        assert result.elements == []
        assert result.confidence == 0.0


class TestOptionsAndResult:

    def test_options_accept_camel_case(self):
        options = CodeGenerationOptions.model_validate(
            {'framework': 'angular', 'outputFormat': 'json', 'componentName': 'Card'}
        )
        assert options.framework is Framework.ANGULAR
        assert options.output_format is OutputFormat.JSON
        assert options.component_name == 'Card'

    def test_options_default_to_code(self):
        assert CodeGenerationOptions(framework='react').output_format is OutputFormat.CODE

    def test_unknown_framework_kept_for_later_rejection(self):
        assert CodeGenerationOptions(framework='vue').framework == 'vue'

    def test_invalid_output_format_rejected(self):
        with pytest.raises(ValidationError):
            CodeGenerationOptions(framework='react', output_format='yaml')

    def test_generated_code_is_frozen(self):
        result = GeneratedCode(code='x', format='code', framework='react', language='jsx')
        with pytest.raises(ValidationError):
            result.code = 'y'

    def test_listener_dumps_camel_case(self):
        listener = AngularListener(event_name='click', call_back='onButtonClick()')
        assert listener.model_dump(by_alias=True) == {'eventName': 'click', 'callBack': 'onButtonClick()'}
