"""
Array assembly: merges array data declarations with their ``...Size``
companions.

Size declarations may precede their data declaration; those are held back
and applied in :meth:`ArrayAssembler.finish`, so the merge does not depend
on declaration order.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from nifpga_apigen.model import U32_MAX, ArrayDescriptor, Datatype, RegisterKind
from nifpga_apigen.parser import DuplicateDeclarationError, ParseError, RawDeclaration
from nifpga_apigen.utils import parse_unsigned

logger = logging.getLogger(__name__)

ArrayKey = Tuple[str, Datatype]


class ArrayAssembler:
    """Owns the indicator-array and control-array collections of one run."""

    def __init__(self, file_path: Optional[Path] = None):
        self.file_path = file_path
        self._arrays: Dict[RegisterKind, Dict[ArrayKey, ArrayDescriptor]] = {
            RegisterKind.INDICATOR: {},
            RegisterKind.CONTROL: {},
        }
        self._names: Dict[RegisterKind, set] = {
            RegisterKind.INDICATOR: set(),
            RegisterKind.CONTROL: set(),
        }
        self._lengths: Dict[RegisterKind, Dict[ArrayKey, int]] = {
            RegisterKind.INDICATOR: {},
            RegisterKind.CONTROL: {},
        }
        self._pending: List[Tuple[RegisterKind, ArrayKey, int]] = []

    def add_data(self, declaration: RawDeclaration, datatype: Datatype) -> ArrayDescriptor:
        """Register an array data declaration with ``length = 0``.

        Raises:
            DuplicateDeclarationError: If an array of this kind has the same name
        """
        kind = declaration.kind
        if declaration.name in self._names[kind]:
            raise DuplicateDeclarationError(
                f"Duplicate {kind.value} array '{declaration.name}'",
                self.file_path,
                declaration.line,
            )
        self._names[kind].add(declaration.name)

        array = ArrayDescriptor(
            name=declaration.name,
            address=declaration.address,
            datatype=datatype,
            kind=kind,
        )
        self._arrays[kind][array.key] = array
        return array

    def add_length(self, declaration: RawDeclaration, datatype: Datatype) -> None:
        """Record the element count carried by a ``...Size`` declaration.

        Raises:
            ParseError: If the address field is not an unsigned 32-bit integer literal
            DuplicateDeclarationError: If the array already has a length declaration
        """
        try:
            length = parse_unsigned(declaration.address)
        except ValueError as e:
            raise ParseError(str(e), self.file_path, declaration.line) from None
        if length > U32_MAX:
            raise ParseError(
                f"Size of array '{declaration.name}' exceeds 32 bits: {declaration.address}",
                self.file_path,
                declaration.line,
            )

        kind = declaration.kind
        key = (declaration.name, datatype)
        if key in self._lengths[kind]:
            raise DuplicateDeclarationError(
                f"Duplicate size declaration for {kind.value} array '{declaration.name}'",
                self.file_path,
                declaration.line,
            )
        self._lengths[kind][key] = length

        array = self._arrays[kind].get(key)
        if array is None:
            self._pending.append((kind, key, length))
        else:
            array.length = length

    def finish(self) -> Tuple[List[ArrayDescriptor], List[ArrayDescriptor]]:
        """Apply deferred lengths and return ``(indicator_arrays, control_arrays)``."""
        for kind, key, length in self._pending:
            array = self._arrays[kind].get(key)
            if array is None:
                logger.debug("Dropping size declaration of unknown %s array %s", kind.value, key[0])
                continue
            array.length = length
        self._pending = []

        return (
            list(self._arrays[RegisterKind.INDICATOR].values()),
            list(self._arrays[RegisterKind.CONTROL].values()),
        )
