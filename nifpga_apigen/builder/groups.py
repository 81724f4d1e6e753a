"""
Group assembly: collects scalar registers named ``<base>_<index>`` into
indexed families.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from nifpga_apigen.model import U32_MAX, Datatype, GroupDescriptor, RegisterDescriptor, RegisterKind
from nifpga_apigen.parser import ParseError

logger = logging.getLogger(__name__)

GroupKey = Tuple[str, Datatype]

_INDEXED_NAME = re.compile(r"^(?P<base>.+)_(?P<index>[0-9]+)$")


def split_indexed_name(name: str) -> Optional[Tuple[str, int]]:
    """Split ``Baz_12`` into ``("Baz", 12)``; return None without a numeric suffix."""
    match = _INDEXED_NAME.match(name)
    if match is None:
        return None
    return match.group("base"), int(match.group("index"))


class GroupAssembler:
    """Owns the indicator-group and control-group collections of one run."""

    def __init__(self, file_path: Optional[Path] = None):
        self.file_path = file_path
        self._groups: Dict[RegisterKind, Dict[GroupKey, GroupDescriptor]] = {
            RegisterKind.INDICATOR: {},
            RegisterKind.CONTROL: {},
        }

    def add(self, register: RegisterDescriptor, line: Optional[int] = None) -> Optional[GroupDescriptor]:
        """
        Offer a scalar register to its family.

        Args:
            register: Indicator or Control scalar
            line: Declaration line, used in error messages only

        Returns:
            The group the register joined, or None if its name has no index

        Raises:
            ParseError: If the index does not fit in 32 bits
        """
        if register.kind not in self._groups:
            return None
        parts = split_indexed_name(register.name)
        if parts is None:
            return None

        base, index = parts
        if index > U32_MAX:
            raise ParseError(
                f"Group index of '{register.name}' exceeds 32 bits", self.file_path, line
            )
        groups = self._groups[register.kind]
        key = (base, register.datatype)
        group = groups.get(key)
        if group is None:
            group = GroupDescriptor(name=base, datatype=register.datatype, kind=register.kind)
            groups[key] = group
        group.add(index, register.address, register.name)
        return group

    def finish(self) -> Tuple[List[GroupDescriptor], List[GroupDescriptor]]:
        """Sort every group by index and return ``(indicator_groups, control_groups)``."""
        for groups in self._groups.values():
            for group in groups.values():
                group.sort_elements()
                logger.debug(
                    "%s group %s (%s): indices %s",
                    group.kind.value,
                    group.name,
                    group.datatype.value,
                    group.indices,
                )
        return (
            list(self._groups[RegisterKind.INDICATOR].values()),
            list(self._groups[RegisterKind.CONTROL].values()),
        )
