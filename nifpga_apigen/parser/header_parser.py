"""
Declaration grammar for NI FPGA interface headers, built with pyparsing.

A declaration has the shape::

    <namespace>_<bitfile>_<Kind>[Array]<TypeCode>[Size]_<Name> = <Address>[,;]

Statements that do not match the whole shape (a different prefix, a
non-integer right-hand side, C suffixes on the literal) are skipped. A
statement that matches but names an unknown kind is fatal.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pyparsing import Literal
from pyparsing import Optional as Opt
from pyparsing import (
    ParseException,
    ParserElement,
    Regex,
    StringEnd,
    Suppress,
    lineno,
    one_of,
)

from nifpga_apigen.model import DEFAULT_NAMESPACE, RegisterKind
from nifpga_apigen.utils import blank_comments

from .errors import UnknownKindError, UnknownTypeCodeError

logger = logging.getLogger(__name__)

# Enable packrat parsing for better performance
ParserElement.enable_packrat()


class DeclarationForm(str, Enum):
    """Shape of a register declaration, from its Array and Size flags."""

    SCALAR = "scalar"
    ARRAY = "array"
    ARRAY_SIZE = "array-size"
    SIZE = "size"  # Size flag without Array, has no accessor


@dataclass(frozen=True)
class RawDeclaration:
    """One matched declaration, before type resolution."""

    kind: RegisterKind
    array: bool
    type_code: str
    size: bool
    name: str
    address: str
    line: int

    @property
    def form(self) -> DeclarationForm:
        if self.array:
            return DeclarationForm.ARRAY_SIZE if self.size else DeclarationForm.ARRAY
        return DeclarationForm.SIZE if self.size else DeclarationForm.SCALAR


class HeaderParser:
    """Extracts register and FIFO declarations of one bitfile from header text."""

    def __init__(self, bitfile: str, namespace: str = DEFAULT_NAMESPACE):
        """
        Build the declaration grammar.

        Args:
            bitfile: Bitfile name, as resolved from the signature declaration
            namespace: Declaration prefix (``NiFpga`` in vendor headers)
        """
        self.bitfile = bitfile
        self.namespace = namespace
        prefix = re.escape(f"{namespace}_{bitfile}_")

        # Hex or decimal integer; octal-looking and suffixed literals never match
        self.address = Regex(r"(?:0[xX][0-9A-Fa-f]+|[1-9][0-9]*|0)\b")

        self.identifier = Regex(rf"\b{prefix}(?P<descriptor>[A-Za-z0-9]+)_(?P<name>\w+)")

        self.declaration = (
            self.identifier
            + Suppress("=")
            + self.address.set_results_name("address")
            + Opt(Suppress(one_of(", ;")))
        )

        # Grammar of the descriptor token, e.g. ``IndicatorArrayU8Size``
        self.kind = one_of([kind.value for kind in RegisterKind])
        self.descriptor = (
            self.kind.set_results_name("kind")
            + Opt(Literal("Array")).set_results_name("array")
            + Regex(r"[A-Za-z0-9]+?(?=(?:Size)?$)").set_results_name("type_code")
            + Opt(Literal("Size")).set_results_name("size")
            + StringEnd()
        )

    def parse_file(self, file_path: Union[str, Path]) -> List[RawDeclaration]:
        """
        Parse a header file.

        Args:
            file_path: Path to the interface header

        Returns:
            Declarations in the order they appear in the file
        """
        file_path = Path(file_path)
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
        return self.parse_text(content, file_path)

    def parse_text(self, text: str, file_path: Optional[Path] = None) -> List[RawDeclaration]:
        """
        Scan header text for declarations.

        Args:
            text: Header source
            file_path: Used in error messages only

        Returns:
            Declarations in the order they appear in the text

        Raises:
            UnknownKindError: If a matched declaration has an unknown kind
            UnknownTypeCodeError: If a matched declaration has no type code
        """
        clean = blank_comments(text)
        declarations = []
        for tokens, start, _end in self.declaration.scan_string(clean):
            line = lineno(start, clean)
            declarations.append(
                self._classify(tokens["descriptor"], tokens["name"], tokens["address"], line, file_path)
            )
        logger.debug("Found %d declarations for bitfile %s", len(declarations), self.bitfile)
        return declarations

    def _classify(
        self, descriptor: str, name: str, address: str, line: int, file_path: Optional[Path]
    ) -> RawDeclaration:
        """Split a descriptor token into kind, flags and type code."""
        try:
            result = self.descriptor.parse_string(descriptor, parse_all=True)
        except ParseException as e:
            if e.loc == 0:
                raise UnknownKindError(
                    f"Unrecognized declaration kind in '{descriptor}' of '{name}'",
                    file_path,
                    line,
                ) from None
            raise UnknownTypeCodeError(
                f"Missing type code in '{descriptor}' of '{name}'", file_path, line
            ) from None

        return RawDeclaration(
            kind=RegisterKind.from_token(result["kind"]),
            array="array" in result,
            type_code=result["type_code"],
            size="size" in result,
            name=name,
            address=address,
            line=line,
        )
