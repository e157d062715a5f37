"""
Code generators - design element tree to React, Angular, Flutter, HTML and JSON.
"""

from generators.base import GenerationError, TreeDepthError, UnsupportedFrameworkError
from generators.codegen import file_extension, generate_code, suggested_filename
from generators.models import (
    CodeGenerationOptions, DesignAnalysisResult, DesignElement, ElementArgs,
    ElementType, Framework, GeneratedCode, OutputFormat,
)

__all__ = [
    'CodeGenerationOptions',
    'DesignAnalysisResult',
    'DesignElement',
    'ElementArgs',
    'ElementType',
    'Framework',
    'GeneratedCode',
    'GenerationError',
    'OutputFormat',
    'TreeDepthError',
    'UnsupportedFrameworkError',
    'file_extension',
    'generate_code',
    'suggested_filename',
]
