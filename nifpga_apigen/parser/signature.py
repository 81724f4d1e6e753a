"""
Signature declaration lookup.

The signature declaration also names the bitfile, which scopes every
other declaration in the header.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from pyparsing import QuotedString, Regex, Suppress, lineno

from nifpga_apigen.model import DEFAULT_NAMESPACE, Signature
from nifpga_apigen.utils import blank_comments

from .errors import MissingSignatureError, ParseError

logger = logging.getLogger(__name__)


class SignatureParser:
    """Finds the single ``<namespace>_<bitfile>_Signature = "...";`` declaration."""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE):
        self.namespace = namespace
        self.declaration = (
            Regex(rf"\b{re.escape(namespace)}_(?P<bitfile>\w+)_Signature\b")
            + Suppress("=")
            + QuotedString('"', esc_char="\\").set_results_name("value")
            + Suppress(";")
        )

    def parse_text(self, text: str, file_path: Optional[Path] = None) -> Signature:
        """
        Resolve the signature of the bitfile described by ``text``.

        Raises:
            MissingSignatureError: If no signature declaration exists
            ParseError: If more than one signature declaration exists
        """
        clean = blank_comments(text)
        matches = list(self.declaration.scan_string(clean))
        if not matches:
            raise MissingSignatureError(
                f"No {self.namespace}_<bitfile>_Signature declaration found", file_path
            )
        if len(matches) > 1:
            raise ParseError(
                "Multiple signature declarations found",
                file_path,
                lineno(matches[1][1], clean),
            )

        tokens = matches[0][0]
        signature = Signature(bitfile=tokens["bitfile"], value=tokens["value"])
        logger.debug("Resolved signature of bitfile %s", signature.bitfile)
        return signature
