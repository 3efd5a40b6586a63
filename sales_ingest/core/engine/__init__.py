"""
Transformation engine: ordered transformation, validation and optimization stages.
"""

from .transformation_engine import TransformationEngine

__all__ = ["TransformationEngine"]
