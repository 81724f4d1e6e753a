"""
Parsers for NI FPGA interface headers and generation settings.
"""

from .config_parser import build_config, load_config
from .errors import (
    ConfigError,
    DuplicateDeclarationError,
    MissingSignatureError,
    ParseError,
    UnknownKindError,
    UnknownTypeCodeError,
    UnsupportedDeclarationError,
)
from .header_parser import DeclarationForm, HeaderParser, RawDeclaration
from .signature import SignatureParser

__all__ = [
    "HeaderParser",
    "SignatureParser",
    "RawDeclaration",
    "DeclarationForm",
    "load_config",
    "build_config",
    "ParseError",
    "UnknownKindError",
    "UnknownTypeCodeError",
    "MissingSignatureError",
    "DuplicateDeclarationError",
    "UnsupportedDeclarationError",
    "ConfigError",
]
