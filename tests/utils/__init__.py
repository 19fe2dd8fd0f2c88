"""Test utilities"""

from .dedent import dedent
from .nested_query import nested_query

__all__ = ["dedent", "nested_query"]
