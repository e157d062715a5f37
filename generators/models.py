"""
Design element model - the tree every generator consumes.

The analysis step (a vision-language model or a hand-written fixture) produces
a list of DesignElement nodes. Generators only read them; nothing here carries
behaviour beyond input coercion.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Number = Union[int, float]


# ============================================================================
# Enums
# ============================================================================

class ElementType(str, Enum):
    """Closed set of design element kinds."""
    BUTTON = "button"
    INPUT = "input"
    TEXT = "text"
    IMAGE = "image"
    CONTAINER = "container"
    CARD = "card"
    LIST = "list"
    ICON = "icon"


class Framework(str, Enum):
    """Code generation target."""
    REACT = "react"
    ANGULAR = "angular"
    FLUTTER = "flutter"
    HTML = "html"


class OutputFormat(str, Enum):
    """Interchange JSON or framework source code."""
    JSON = "json"
    CODE = "code"


# ============================================================================
# Design Elements
# ============================================================================

class ElementArgs(BaseModel):
    """Visual and behavioural properties of a design element.

    Known properties are explicit fields (camelCase on the wire). Any other key
    returned by the analysis step is kept as an extension and passed through
    to the JSON output untouched.
    """
    model_config = ConfigDict(extra='allow', populate_by_name=True, alias_generator=to_camel)

    background_color: Optional[str] = None
    border_color: Optional[str] = None
    border_radius: Optional[Number] = None
    padding: Optional[Number] = None
    margin: Optional[Number] = None
    font_size: Optional[Number] = None
    font_weight: Optional[str] = None
    text_color: Optional[str] = None
    text: Optional[str] = None
    placeholder: Optional[str] = None
    disabled: Optional[bool] = None
    required: Optional[bool] = None
    type: Optional[str] = None
    src: Optional[str] = None

    @field_validator('border_radius', 'padding', 'margin', 'font_size', mode='before')
    @classmethod
    def parse_pixel_value(cls, v: Any) -> Any:
        # "16px" -> 16; values such as "12 24" are not a single length and are dropped
        if isinstance(v, str):
            raw = v.strip().lower().removesuffix('px').strip()
            try:
                number = float(raw)
            except ValueError:
                return None
            return int(number) if number.is_integer() else number
        return v

    @field_validator('font_weight', mode='before')
    @classmethod
    def stringify_font_weight(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(int(v))
        return v

    @property
    def extensions(self) -> Dict[str, Any]:
        """Keys the model does not know about."""
        return dict(self.model_extra or {})


class DesignElement(BaseModel):
    """One node of the design tree."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Identifier, unique within one tree")
    type: Union[ElementType, str] = Field(
        ...,
        description="Element kind; unknown kinds render as a generic container",
        union_mode='left_to_right'
    )
    name: str = Field(default='', description="Display label, used for alt text")
    x: Number = 0
    y: Number = 0
    width: Number = 0
    height: Number = 0
    args: ElementArgs = Field(default_factory=ElementArgs)
    children: Optional[List['DesignElement']] = None

    @field_validator('id', mode='before')
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator('name', mode='before')
    @classmethod
    def default_name(cls, v: Any) -> Any:
        return '' if v is None else v

    @field_validator('args', mode='before')
    @classmethod
    def default_args(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def element_type(self) -> Optional[ElementType]:
        """The known element kind, or None for an unrecognised type."""
        return self.type if isinstance(self.type, ElementType) else None


class DesignAnalysisResult(BaseModel):
    """What the design analysis service returns for one image."""
    elements: List[DesignElement] = Field(default_factory=list)
    summary: str = ''
    confidence: float = 0.0
    suggestions: Optional[List[str]] = None


# ============================================================================
# Code Generation
# ============================================================================

class CodeGenerationOptions(BaseModel):
    """Generation request.

    ``framework`` accepts any string here; generate_code rejects values
    outside the Framework enum so the caller gets an error naming the value.
    """
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    framework: Union[Framework, str] = Field(..., union_mode='left_to_right')
    output_format: OutputFormat = OutputFormat.CODE
    component_name: Optional[str] = None


class GeneratedCode(BaseModel):
    """Result of one generate_code call."""
    model_config = ConfigDict(frozen=True)

    code: str
    format: OutputFormat
    framework: Framework
    language: str


# ============================================================================
# Angular Template Interchange
# ============================================================================

class AngularAttribute(BaseModel):
    name: str
    value: str


class AngularListener(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    event_name: str
    call_back: str


class AngularTemplate(BaseModel):
    """Element/attribute/listener triple describing one template node."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    element: str
    class_names: List[str] = Field(default_factory=list)
    text: Optional[str] = None
    attributes: Optional[List[AngularAttribute]] = None
    listeners: Optional[List[AngularListener]] = None
    children: Optional[List['AngularTemplate']] = None
