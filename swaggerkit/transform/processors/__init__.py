"""Processors package for operation parameters and responses.

This package contains the processor classes that convert the parameter and
response schemas of one operation into their Swagger wire form.
"""

from swaggerkit.transform.processors.parameter_processor import (
    BodyShape,
    ParameterProcessor,
)
from swaggerkit.transform.processors.response_processor import ResponseProcessor

__all__ = [
    'BodyShape',
    'ParameterProcessor',
    'ResponseProcessor',
]
