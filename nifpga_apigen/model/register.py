"""
Register, array, group and FIFO descriptors extracted from an interface header.

Addresses are kept as the literal token found in the header and are never
interpreted numerically; the generated code embeds them verbatim.
"""

from typing import List

from pydantic import Field, field_validator

from .base import RegisterKind, StrictModel
from .datatype import Datatype

U32_MAX = 0xFFFFFFFF


class RegisterDescriptor(StrictModel):
    """
    A single memory-mapped register or FIFO endpoint.

    The ``kind`` decides the accessor family: indicators are read,
    controls are written, FIFOs are opened for streaming.
    """

    name: str = Field(..., description="Register name as declared in the header")
    address: str = Field(..., description="Address literal, preserved verbatim")
    datatype: Datatype = Field(..., description="Primitive element type")
    kind: RegisterKind = Field(..., description="Declaration kind")

    @field_validator("name", "address")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Register name and address cannot be empty")
        return v

    @property
    def key(self):
        """Lookup key used by the assemblers."""
        return self.name, self.datatype


class ArrayDescriptor(RegisterDescriptor):
    """
    Fixed-length register array.

    ``length`` stays 0 until the companion ``...Size`` declaration is merged.
    """

    length: int = Field(default=0, ge=0, le=U32_MAX, description="Number of elements")


class GroupElement(StrictModel):
    """One member of an indexed register family."""

    index: int = Field(..., ge=0, le=U32_MAX, description="Numeric suffix of the member name")
    address: str = Field(..., description="Address literal of the member register")
    name: str = Field(default="", description="Full name of the member register")


class GroupDescriptor(StrictModel):
    """
    Family of same-typed scalar registers named ``<name>_<index>``.

    Exposed as one batch accessor producing or consuming a container of
    ``length`` elements in index order.
    """

    name: str = Field(..., description="Common name prefix")
    datatype: Datatype = Field(..., description="Element type shared by every member")
    kind: RegisterKind = Field(..., description="Indicator or Control")
    elements: List[GroupElement] = Field(default_factory=list)

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: RegisterKind) -> RegisterKind:
        if v.is_fifo:
            raise ValueError("Only indicators and controls can form groups")
        return v

    @property
    def length(self) -> int:
        return len(self.elements)

    @property
    def indices(self) -> List[int]:
        return [element.index for element in self.elements]

    def add(self, index: int, address: str, name: str = "") -> GroupElement:
        """Append a member in discovery order."""
        element = GroupElement(index=index, address=address, name=name)
        self.elements.append(element)
        return element

    def sort_elements(self) -> None:
        """Order members by ascending index. Ties keep discovery order."""
        self.elements = sorted(self.elements, key=lambda element: element.index)


class Signature(StrictModel):
    """Bitfile identity literal required to open a session."""

    bitfile: str = Field(..., description="Bitfile name used as declaration prefix")
    value: str = Field(..., description="Signature string literal")
