"""Shared utility helpers for nifpga_apigen."""

import re

_C_COMMENT = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)


def blank_comments(text: str) -> str:
    """Replace C comments with spaces, keeping newlines so line numbers hold."""
    return _C_COMMENT.sub(lambda m: re.sub(r"[^\n]", " ", m.group(0)), text)


def parse_unsigned(literal: str) -> int:
    """Parse a decimal or ``0x`` hexadecimal literal into a non-negative int.

    Raises:
        ValueError: If the literal is not an unsigned integer literal.
    """
    clean = literal.strip()
    if re.fullmatch(r"0[xX][0-9A-Fa-f]+", clean):
        return int(clean, 16)
    if re.fullmatch(r"[0-9]+", clean):
        return int(clean, 10)
    raise ValueError(f"Invalid unsigned integer literal: '{literal}'")


def to_snake_case(name: str) -> str:
    """Convert a register name to a snake_case identifier fragment.

    Examples:
        >>> to_snake_case("MotorSpeed")
        'motor_speed'
        >>> to_snake_case("ADCValue_3")
        'adc_value_3'
    """
    snake = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    snake = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", snake)
    snake = re.sub(r"[^0-9A-Za-z]+", "_", snake)
    return re.sub(r"_+", "_", snake).strip("_").lower()


def to_pascal_case(name: str) -> str:
    """Convert a bitfile name to a PascalCase class name.

    Examples:
        >>> to_pascal_case("my_robot_fpga")
        'MyRobotFpga'
    """
    parts = [p for p in re.split(r"[^0-9A-Za-z]+", name) if p]
    pascal = "".join(p[0].upper() + p[1:] for p in parts)
    if not pascal or pascal[0].isdigit():
        pascal = "Fpga" + pascal
    return pascal


def filter_none(data: dict) -> dict:
    """Remove keys with None values from a dictionary.

    Passing None explicitly to pydantic fields with defaults fails
    validation; dropping the key lets the default apply.
    """
    return {k: v for k, v in data.items() if v is not None}
