"""
Python accessor module generator.

The generated module wraps a :class:`nifpga_apigen.runtime.Session` in a
class named after the bitfile, with one method per register, array,
group and FIFO.
"""

from nifpga_apigen.model import Datatype

from .base_generator import BaseGenerator


class PythonApiGenerator(BaseGenerator):
    """Renders ``python_api.py.j2``."""

    template_name = "python_api.py.j2"
    default_output = "fpga_api.py"

    def type_name(self, datatype: Datatype) -> str:
        return datatype.python_type

    def bool_literal(self, value: bool) -> str:
        return "True" if value else "False"
