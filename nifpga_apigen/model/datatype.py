"""
Primitive data types of FPGA registers and FIFOs.
"""

from enum import Enum


class Datatype(str, Enum):
    """Primitive register type, valued by its header type code."""

    BOOL = "Bool"
    I8 = "I8"
    U8 = "U8"
    I16 = "I16"
    U16 = "U16"
    I32 = "I32"
    U32 = "U32"
    I64 = "I64"
    U64 = "U64"
    SGL = "Sgl"
    DBL = "Dbl"

    @classmethod
    def from_code(cls, code: str) -> "Datatype":
        """Resolve a header type code (e.g. ``U32``, ``Sgl``) to a Datatype.

        Raises:
            ValueError: If the code is not a supported primitive type.
        """
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unrecognized type code '{code}'") from None

    @property
    def bits(self) -> int:
        """Width in bits. Booleans occupy one byte on the bus."""
        return _BITS[self]

    @property
    def is_signed(self) -> bool:
        return self.value.startswith("I") or self.is_float

    @property
    def is_float(self) -> bool:
        return self in (Datatype.SGL, Datatype.DBL)

    @property
    def python_type(self) -> str:
        """Name of the Python builtin holding values of this type."""
        if self is Datatype.BOOL:
            return "bool"
        if self.is_float:
            return "float"
        return "int"

    @property
    def rust_type(self) -> str:
        """Name of the Rust primitive holding values of this type."""
        if self is Datatype.BOOL:
            return "bool"
        if self.is_float:
            return f"f{self.bits}"
        prefix = "i" if self.is_signed else "u"
        return f"{prefix}{self.bits}"


_BITS = {
    Datatype.BOOL: 8,
    Datatype.I8: 8,
    Datatype.U8: 8,
    Datatype.I16: 16,
    Datatype.U16: 16,
    Datatype.I32: 32,
    Datatype.U32: 32,
    Datatype.I64: 64,
    Datatype.U64: 64,
    Datatype.SGL: 32,
    Datatype.DBL: 64,
}
