#!/usr/bin/env python3
"""
UI Builder MCP Server - Model Context Protocol server for design-to-code generation.

This server provides tools to:
- Generate code from a design element tree (React, Angular, Flutter, HTML)
- Export the tree as interchange JSON (default or Angular template shape)
- Analyze a UI design image into a design element tree (Gemini vision)
- Fetch a Figma file document (pass-through)
"""

import os
import re
import sys
import json
import base64
import logging
from typing import Optional, List, Dict, Any, Tuple
from enum import Enum

import httpx
from pydantic import BaseModel, Field, field_validator, ConfigDict
from mcp.server.fastmcp import FastMCP

from generators import (
    DesignAnalysisResult, DesignElement, GeneratedCode, OutputFormat,
    file_extension, generate_code, suggested_filename,
)
from generators.base import ensure_depth, type_name

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
FIGMA_API_BASE = "https://api.figma.com/v1"
CHARACTER_LIMIT = 25000
DEFAULT_TIMEOUT = 30.0

# ============================================================================
# Initialize MCP Server
# ============================================================================

mcp = FastMCP("uibuilder_mcp")

# ============================================================================
# Enums and Errors
# ============================================================================

class ResponseFormat(str, Enum):
    """Output format for tool responses."""
    MARKDOWN = "markdown"
    JSON = "json"


class AnalysisError(ValueError):
    """The analysis service answered without a usable design tree."""


# ============================================================================
# Pydantic Input Models
# ============================================================================

class UIGenerateCodeInput(BaseModel):
    """Input model for code generation from an element tree."""
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    elements: List[DesignElement] = Field(
        ...,
        description="Design element tree: objects with id, type, name, x, y, width, height, args, children"
    )
    framework: str = Field(
        default="react",
        description="Target framework: 'react', 'angular', 'flutter' or 'html'"
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.CODE,
        description="'code' for source code or 'json' for interchange JSON"
    )
    component_name: Optional[str] = Field(
        default=None,
        description="Component / widget name (defaults to UIComponent, UIWidget for Flutter)",
        max_length=100
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' or 'json'"
    )


class UIAnalyzeDesignInput(BaseModel):
    """Input model for design image analysis."""
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    image_url: str = Field(
        ...,
        description="Image to analyze: http(s) URL or data URL (data:image/png;base64,...)",
        min_length=1
    )
    description: Optional[str] = Field(
        default=None,
        description="Optional context about the design (screen purpose, platform)",
        max_length=2000
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' or 'json'"
    )

    @field_validator('image_url')
    @classmethod
    def validate_image_url(cls, v: str) -> str:
        if not v.startswith(('http://', 'https://', 'data:')):
            raise ValueError("image_url must be an http(s) URL or a data URL")
        return v


class UIDesignToCodeInput(UIAnalyzeDesignInput):
    """Input model for analysis followed by code generation."""
    framework: str = Field(
        default="react",
        description="Target framework: 'react', 'angular', 'flutter' or 'html'"
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.CODE,
        description="'code' for source code or 'json' for interchange JSON"
    )
    component_name: Optional[str] = Field(
        default=None,
        description="Component / widget name",
        max_length=100
    )


class UIFigmaFileInput(BaseModel):
    """Input model for Figma file retrieval."""
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    file_key: str = Field(
        ...,
        description="Figma file key (from URL: figma.com/design/FILE_KEY/...)",
        min_length=10,
        max_length=200
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' or 'json'"
    )

    @field_validator('file_key')
    @classmethod
    def validate_file_key(cls, v: str) -> str:
        # Extract file key from URL if full URL provided
        if 'figma.com' in v:
            match = re.search(r'figma\.com/(?:design|file)/([a-zA-Z0-9]+)', v)
            if match:
                return match.group(1)
            raise ValueError("Could not extract file key from Figma URL")
        return v


# ============================================================================
# Helper Functions
# ============================================================================

ANALYSIS_PROMPT = """Analyze this UI design image and extract every visible UI element.
Return ONLY a valid JSON object with this exact structure:
{
  "elements": [
    {
      "id": "unique-id",
      "type": "button | input | text | image | container | card | list | icon",
      "name": "Short descriptive name",
      "x": 0, "y": 0, "width": 120, "height": 40,
      "args": {
        "backgroundColor": "#0ea5e9",
        "borderColor": "#e2e8f0",
        "borderRadius": 8,
        "padding": 12,
        "margin": 0,
        "fontSize": 16,
        "fontWeight": "bold",
        "textColor": "#ffffff",
        "text": "Visible label",
        "placeholder": "Input hint",
        "disabled": false,
        "required": false,
        "type": "text",
        "src": "image URL if known"
      },
      "children": []
    }
  ],
  "summary": "Brief description of the UI",
  "confidence": 0.9,
  "suggestions": ["improvement1", "improvement2"]
}
Use "children" only for container and card elements, in visual reading order.
Positions and sizes are pixels in the source image. Omit args you cannot infer."""


def _get_gemini_key() -> str:
    """Get Gemini API key from environment."""
    key = os.environ.get("GEMINI_API_KEY") or os.environ.get("VITE_GEMINI_API_KEY")
    if not key:
        raise ValueError(
            "Gemini API key not found. Set GEMINI_API_KEY environment variable."
        )
    return key


def _get_gemini_model() -> str:
    return os.environ.get("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)


def _get_figma_token() -> str:
    """Get Figma API token from environment."""
    token = os.environ.get("FIGMA_ACCESS_TOKEN") or os.environ.get("FIGMA_TOKEN")
    if not token:
        raise ValueError(
            "Figma API token not found. Set FIGMA_ACCESS_TOKEN or FIGMA_TOKEN environment variable. "
            "Get your token from: https://www.figma.com/developers/api#access-tokens"
        )
    return token


async def _make_figma_request(
    endpoint: str,
    method: str = "GET",
    params: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Make authenticated request to Figma API."""
    token = _get_figma_token()

    async with httpx.AsyncClient() as client:
        response = await client.request(
            method=method,
            url=f"{FIGMA_API_BASE}/{endpoint}",
            headers={"X-Figma-Token": token},
            params=params,
            timeout=DEFAULT_TIMEOUT
        )
        response.raise_for_status()
        return response.json()


def _split_data_url(image_url: str) -> Optional[Tuple[str, str]]:
    """data:<mime>;base64,<payload> -> (mime, payload); None for other URLs."""
    match = re.match(r'data:([^;,]+);base64,(.+)', image_url, re.DOTALL)
    if not match:
        return None
    return match.group(1), match.group(2)


async def _load_image(client: httpx.AsyncClient, image_url: str) -> Tuple[str, str]:
    """Return (mime_type, base64 data) for a data URL or a downloadable image."""
    inline = _split_data_url(image_url)
    if inline:
        return inline
    if image_url.startswith('data:'):
        raise ValueError("Data URLs must be base64 encoded")

    response = await client.get(image_url, follow_redirects=True)
    response.raise_for_status()
    mime_type = response.headers.get('content-type', 'image/jpeg').split(';')[0].strip()
    return mime_type, base64.b64encode(response.content).decode('ascii')


def _build_analysis_payload(mime_type: str, data: str, description: Optional[str] = None) -> Dict[str, Any]:
    context = f"Context: {description}" if description else \
        "Extract all UI elements from this design image."
    return {
        "contents": [
            {
                "parts": [
                    {"text": f"{ANALYSIS_PROMPT}\n\n{context}"},
                    {"inlineData": {"mimeType": mime_type, "data": data}},
                ]
            }
        ]
    }


def _extract_json_object(text: str) -> Dict[str, Any]:
    """Parse the outermost JSON object embedded in model output."""
    match = re.search(r'\{[\s\S]*\}', text)
    if not match:
        raise AnalysisError("Analysis response did not contain a JSON object")
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise AnalysisError(f"Analysis response contained invalid JSON: {e.msg}") from e
    if not isinstance(parsed, dict):
        raise AnalysisError("Analysis response JSON is not an object")
    return parsed


def _parse_analysis_response(body: Dict[str, Any]) -> DesignAnalysisResult:
    """Turn a generateContent response into a DesignAnalysisResult."""
    candidates = body.get('candidates') or []
    parts = ((candidates[0].get('content') or {}).get('parts') or []) if candidates else []
    text = parts[0].get('text') if parts else None
    if not text:
        raise AnalysisError("Invalid response format from analysis service")

    parsed = _extract_json_object(text)
    if not isinstance(parsed.get('elements'), list):
        raise AnalysisError("Analysis response has no 'elements' list")
    return DesignAnalysisResult.model_validate(parsed)


async def _analyze_design(image_url: str, description: Optional[str] = None) -> DesignAnalysisResult:
    """Send a design image to Gemini and parse the element tree it returns."""
    api_key = _get_gemini_key()
    model = _get_gemini_model()

    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
        mime_type, data = await _load_image(client, image_url)
        logger.info("Analyzing design image (%s, %d base64 chars) with %s", mime_type, len(data), model)
        response = await client.post(
            f"{GEMINI_API_BASE}/models/{model}:generateContent",
            headers={"x-goog-api-key": api_key, "Content-Type": "application/json"},
            json=_build_analysis_payload(mime_type, data, description),
        )
        response.raise_for_status()
        body = response.json()

    result = _parse_analysis_response(body)
    logger.info("Analysis returned %d top-level elements", len(result.elements))
    return result


def _handle_api_error(e: Exception) -> str:
    """Format API errors for user-friendly messages."""
    logger.warning("Tool call failed: %s: %s", type(e).__name__, e)
    if isinstance(e, httpx.HTTPStatusError):
        status = e.response.status_code
        if status == 400:
            return "Error: The request was rejected. Check the image and parameters."
        elif status in (401, 403):
            return "Error: Access denied. Check your API key or token."
        elif status == 404:
            return "Error: Resource not found. Check the URL, file key or model name."
        elif status == 429:
            return "Error: Rate limit exceeded. Please wait before making more requests."
        return f"Error: Remote API returned status {status}"
    elif isinstance(e, httpx.TimeoutException):
        return "Error: Request timed out. The image might be too large."
    elif isinstance(e, ValueError):
        return f"Error: {str(e)}"
    return f"Error: {type(e).__name__}: {str(e)}"


def _truncate(result: str) -> str:
    """Cut a markdown summary at CHARACTER_LIMIT."""
    if len(result) > CHARACTER_LIMIT:
        return result[:CHARACTER_LIMIT] + "\n\n... (truncated)"
    return result


def _fence_language(generated: GeneratedCode) -> str:
    return 'json' if generated.format == OutputFormat.JSON else file_extension(generated)


def _format_generated_code(
    generated: GeneratedCode,
    component_name: Optional[str],
    response_format: ResponseFormat
) -> str:
    if response_format == ResponseFormat.JSON:
        return generated.model_dump_json(indent=2)

    title = component_name or ('Design JSON' if generated.format == OutputFormat.JSON else 'Component')
    lines = [
        f"# Generated Code: {title}",
        f"**Framework:** {generated.framework.value}",
        f"**Format:** {generated.format.value}",
        f"**Language:** {generated.language}",
        f"**Suggested File:** `{suggested_filename(generated)}`",
        "",
        "```" + _fence_language(generated),
        generated.code.rstrip('\n'),
        "```"
    ]
    return "\n".join(lines)


def _format_element_tree(elements: List[DesignElement], lines: List[str], indent: int = 0) -> None:
    prefix = "  " * indent
    for element in elements:
        label = f" - \"{element.args.text}\"" if element.args.text else ""
        lines.append(
            f"{prefix}- **{element.name or element.id}** `{type_name(element)}` "
            f"({element.width}x{element.height}){label}"
        )
        if element.children:
            _format_element_tree(element.children, lines, indent + 1)


def _format_analysis(result: DesignAnalysisResult, response_format: ResponseFormat) -> str:
    # The element tree comes from a remote model; bound it before recursing
    ensure_depth(result.elements)

    if response_format == ResponseFormat.JSON:
        return json.dumps(
            result.model_dump(mode='json', by_alias=True, exclude_none=True),
            indent=2,
            ensure_ascii=False
        )

    lines = [
        "# Design Analysis",
        f"**Summary:** {result.summary or 'n/a'}",
        f"**Confidence:** {result.confidence:.0%}",
        f"**Top-level Elements:** {len(result.elements)}",
        "",
        "## Element Tree",
        ""
    ]
    _format_element_tree(result.elements, lines)

    if result.suggestions:
        lines.extend(["", "## Suggestions", ""])
        lines.extend(f"- {suggestion}" for suggestion in result.suggestions)

    return _truncate("\n".join(lines))


# ============================================================================
# Tool Definitions
# ============================================================================

@mcp.tool(
    name="uibuilder_generate_code",
    annotations={
        "title": "Generate Code from Design Elements",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False
    }
)
async def uibuilder_generate_code(params: UIGenerateCodeInput) -> str:
    """
    Generate framework code or interchange JSON from a design element tree.

    Supported frameworks:
    - react: TypeScript function component with inline styles
    - angular: template (Tailwind classes) + component class + stylesheet
    - flutter: StatelessWidget returning a Column
    - html: standalone HTML document

    With output_format='json' the tree is exported as interchange JSON
    (Angular gets the template/attribute/listener shape with Tailwind classes).

    Args:
        params: UIGenerateCodeInput containing:
            - elements (List[DesignElement]): The design tree
            - framework (str): Target framework
            - output_format: 'code' or 'json'
            - component_name (Optional[str]): Custom component name
            - response_format: 'markdown' or 'json'

    Returns:
        str: Generated code in the requested framework
    """
    try:
        generated = generate_code(
            params.elements,
            {
                'framework': params.framework,
                'output_format': params.output_format,
                'component_name': params.component_name,
            }
        )
        return _format_generated_code(generated, params.component_name, params.response_format)

    except Exception as e:
        return _handle_api_error(e)


@mcp.tool(
    name="uibuilder_analyze_design",
    annotations={
        "title": "Analyze UI Design Image",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": True
    }
)
async def uibuilder_analyze_design(params: UIAnalyzeDesignInput) -> str:
    """
    Analyze a UI design image into a design element tree.

    The image is sent to a vision-language model which returns elements
    (buttons, inputs, text, images, containers, cards, lists, icons) with
    geometry and visual properties, plus a summary and suggestions.

    Args:
        params: UIAnalyzeDesignInput containing:
            - image_url (str): http(s) URL or base64 data URL
            - description (Optional[str]): Extra context for the model
            - response_format: 'markdown' or 'json'

    Returns:
        str: Analysis result; the JSON form can be passed to uibuilder_generate_code
    """
    try:
        result = await _analyze_design(params.image_url, params.description)
        return _format_analysis(result, params.response_format)

    except Exception as e:
        return _handle_api_error(e)


@mcp.tool(
    name="uibuilder_design_to_code",
    annotations={
        "title": "Generate Code from UI Design Image",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": True
    }
)
async def uibuilder_design_to_code(params: UIDesignToCodeInput) -> str:
    """
    Analyze a design image and generate code from the resulting tree in one step.

    Args:
        params: UIDesignToCodeInput containing:
            - image_url (str): http(s) URL or base64 data URL
            - description (Optional[str]): Extra context for the model
            - framework (str): Target framework
            - output_format: 'code' or 'json'
            - component_name (Optional[str]): Custom component name
            - response_format: 'markdown' or 'json'

    Returns:
        str: Analysis summary followed by the generated code
    """
    try:
        result = await _analyze_design(params.image_url, params.description)
        generated = generate_code(
            result.elements,
            {
                'framework': params.framework,
                'output_format': params.output_format,
                'component_name': params.component_name,
            }
        )

        if params.response_format == ResponseFormat.JSON:
            return json.dumps({
                'analysis': result.model_dump(mode='json', by_alias=True, exclude_none=True),
                'generated': generated.model_dump(mode='json'),
            }, indent=2, ensure_ascii=False)

        lines = [
            f"**Summary:** {result.summary or 'n/a'}",
            f"**Confidence:** {result.confidence:.0%}",
            "",
            _format_generated_code(generated, params.component_name, ResponseFormat.MARKDOWN),
        ]
        return "\n".join(lines)

    except Exception as e:
        return _handle_api_error(e)


@mcp.tool(
    name="uibuilder_get_figma_file",
    annotations={
        "title": "Get Figma File",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True
    }
)
async def uibuilder_get_figma_file(params: UIFigmaFileInput) -> str:
    """
    Fetch a Figma file document as-is.

    Args:
        params: UIFigmaFileInput containing:
            - file_key (str): Figma file key or full URL
            - response_format: 'markdown' or 'json'

    Returns:
        str: File name and pages (markdown) or the raw document (json)
    """
    try:
        logger.info("Fetching Figma file %s", params.file_key)
        data = await _make_figma_request(f"files/{params.file_key}")

        if params.response_format == ResponseFormat.JSON:
            result = json.dumps(data, indent=2)

            # Check character limit
            if len(result) > CHARACTER_LIMIT:
                return json.dumps({
                    'truncated': True,
                    'message': f'Result exceeded {CHARACTER_LIMIT} characters. Use the markdown response for a page summary.',
                    'name': data.get('name'),
                    'lastModified': data.get('lastModified'),
                    'pages': [
                        {'id': page.get('id'), 'name': page.get('name')}
                        for page in data.get('document', {}).get('children', [])
                    ],
                }, indent=2)
            return result

        document = data.get('document', {})
        lines = [
            f"# Figma File: {data.get('name', 'Unknown')}",
            f"**Last Modified:** {data.get('lastModified', 'Unknown')}",
            f"**File Key:** `{params.file_key}`",
            "",
            "## Pages",
            ""
        ]
        for page in document.get('children', []):
            lines.append(f"- **{page.get('name')}** `{page.get('id')}` ({len(page.get('children', []))} top-level nodes)")

        return _truncate("\n".join(lines))

    except Exception as e:
        return _handle_api_error(e)


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    # stdout carries the MCP stdio protocol, so logs go to stderr
    logging.basicConfig(
        level=os.environ.get("UIBUILDER_LOG_LEVEL", "INFO").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    mcp.run()


if __name__ == "__main__":
    main()
