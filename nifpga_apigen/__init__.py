"""
nifpga_apigen - typed register/FIFO access APIs from NI FPGA interface headers.
"""

from .builder import ApiBuilder, build_api
from .generator import GenerationError, get_generator
from .model import FpgaApi, GenerationConfig
from .parser import ParseError
from .pipeline import generate, render_header

__version__ = "0.1.0"

__all__ = [
    "ApiBuilder",
    "build_api",
    "get_generator",
    "generate",
    "render_header",
    "FpgaApi",
    "GenerationConfig",
    "ParseError",
    "GenerationError",
]
