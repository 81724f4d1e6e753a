"""
The finished interface model of one bitfile, as handed to the generators.
"""

from typing import List

from pydantic import Field

from .base import StrictModel
from .register import ArrayDescriptor, GroupDescriptor, RegisterDescriptor, Signature


def _by_name(items):
    return sorted(items, key=lambda item: item.name)


class FpgaApi(StrictModel):
    """
    All descriptors extracted from one interface header.

    The ``sorted_*`` accessors give the emission order, which depends only
    on the descriptors and never on their order in the header text.
    """

    signature: Signature
    indicators: List[RegisterDescriptor] = Field(default_factory=list)
    controls: List[RegisterDescriptor] = Field(default_factory=list)
    indicator_arrays: List[ArrayDescriptor] = Field(default_factory=list)
    control_arrays: List[ArrayDescriptor] = Field(default_factory=list)
    indicator_groups: List[GroupDescriptor] = Field(default_factory=list)
    control_groups: List[GroupDescriptor] = Field(default_factory=list)
    read_fifos: List[RegisterDescriptor] = Field(default_factory=list)
    write_fifos: List[RegisterDescriptor] = Field(default_factory=list)

    @property
    def bitfile(self) -> str:
        return self.signature.bitfile

    def sorted_indicators(self) -> List[RegisterDescriptor]:
        return _by_name(self.indicators)

    def sorted_controls(self) -> List[RegisterDescriptor]:
        return _by_name(self.controls)

    def sorted_indicator_arrays(self) -> List[ArrayDescriptor]:
        return _by_name(self.indicator_arrays)

    def sorted_control_arrays(self) -> List[ArrayDescriptor]:
        return _by_name(self.control_arrays)

    def sorted_indicator_groups(self) -> List[GroupDescriptor]:
        return sorted(self.indicator_groups, key=lambda g: (g.name, g.datatype.value))

    def sorted_control_groups(self) -> List[GroupDescriptor]:
        return sorted(self.control_groups, key=lambda g: (g.name, g.datatype.value))

    def sorted_read_fifos(self) -> List[RegisterDescriptor]:
        return _by_name(self.read_fifos)

    def sorted_write_fifos(self) -> List[RegisterDescriptor]:
        return _by_name(self.write_fifos)
