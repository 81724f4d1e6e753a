"""
Assembly stages turning extracted declarations into the interface model.
"""

from .arrays import ArrayAssembler
from .groups import GroupAssembler, split_indexed_name
from .model_builder import ApiBuilder, build_api

__all__ = ["ApiBuilder", "build_api", "ArrayAssembler", "GroupAssembler", "split_indexed_name"]
