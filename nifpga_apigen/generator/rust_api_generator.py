"""
Rust accessor module generator, for the ``nifpga`` crate.

The generated ``mod.rs`` exposes free functions taking a ``&Session``.
"""

from nifpga_apigen.model import Datatype

from .base_generator import BaseGenerator

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


class RustApiGenerator(BaseGenerator):
    """Renders ``rust_mod.rs.j2``."""

    template_name = "rust_mod.rs.j2"
    default_output = "mod.rs"

    def type_name(self, datatype: Datatype) -> str:
        return datatype.rust_type

    def bool_literal(self, value: bool) -> str:
        return "true" if value else "false"

    def string_literal(self, value: str) -> str:
        """Rust string literal; other control characters use ``\\u{..}``."""
        chars = []
        for ch in value:
            if ch in _ESCAPES:
                chars.append(_ESCAPES[ch])
            elif ord(ch) < 0x20 or ord(ch) == 0x7F:
                chars.append(f"\\u{{{ord(ch):x}}}")
            else:
                chars.append(ch)
        return '"' + "".join(chars) + '"'
