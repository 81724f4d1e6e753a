"""
Base generator interface for accessor code generation.

Provides the template context shared by every host language: accessor
names, emission order and session settings. Language-specific generators
supply a template, type names and literal spelling.

Current implementations:
- PythonApiGenerator: module written against nifpga_apigen.runtime
- RustApiGenerator: ``mod.rs`` written against the ``nifpga`` crate
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader

from nifpga_apigen.model import (
    ArrayDescriptor,
    Datatype,
    FpgaApi,
    GenerationConfig,
    GroupDescriptor,
    RegisterDescriptor,
)
from nifpga_apigen.utils import to_pascal_case, to_snake_case

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The model cannot be rendered, e.g. two accessors share a name."""


class BaseGenerator(ABC):
    """
    Abstract base class for accessor code generators.

    Templates are loaded from the ``templates`` directory next to this module.
    """

    #: Template file rendered by :meth:`render`
    template_name: str = ""
    #: Output file name used when the config does not name one
    default_output: str = ""

    def __init__(self, template_dir: Optional[str] = None):
        """
        Initialize the generator with Jinja2 environment.

        Args:
            template_dir: Optional custom template directory.
                Defaults to the 'templates' directory of this package.
        """
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "templates")

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["string_literal"] = self.string_literal
        self.env.filters["bool_literal"] = self.bool_literal

    @abstractmethod
    def type_name(self, datatype: Datatype) -> str:
        """Host-language type holding one element of ``datatype``."""
        pass

    @abstractmethod
    def bool_literal(self, value: bool) -> str:
        pass

    def string_literal(self, value: str) -> str:
        """Double-quoted source literal. JSON escapes are valid Python escapes."""
        return json.dumps(value, ensure_ascii=False)

    def render(self, api: FpgaApi, config: GenerationConfig) -> str:
        """
        Render the accessor source for ``api``.

        Args:
            api: Interface model
            config: Session settings and group mode

        Returns:
            Generated source text

        Raises:
            GenerationError: If two accessors would get the same name
        """
        context = self._get_template_context(api, config)
        template = self.env.get_template(self.template_name)
        return template.render(**context)

    def _get_template_context(self, api: FpgaApi, config: GenerationConfig) -> Dict[str, Any]:
        """Build the template context. Every list is in emission order."""
        context = {
            "bitfile": api.bitfile,
            "class_name": to_pascal_case(api.bitfile),
            "signature": api.signature.value,
            "bitfile_path": config.bitfile_path,
            "resource": config.resource,
            "run": config.run,
            "reset_on_close": config.reset_on_close,
            "groups_enabled": config.groups,
            "indicators": [self._scalar("read", reg) for reg in api.sorted_indicators()],
            "controls": [self._scalar("write", reg) for reg in api.sorted_controls()],
            "indicator_arrays": [self._array("read", arr) for arr in api.sorted_indicator_arrays()],
            "control_arrays": [self._array("write", arr) for arr in api.sorted_control_arrays()],
            "indicator_groups": [],
            "control_groups": [],
            "read_fifos": [self._scalar("open", fifo) for fifo in api.sorted_read_fifos()],
            "write_fifos": [self._scalar("open", fifo) for fifo in api.sorted_write_fifos()],
        }
        if config.groups:
            context["indicator_groups"] = self._groups("read", api.sorted_indicator_groups())
            context["control_groups"] = self._groups("write", api.sorted_control_groups())

        self._check_unique_names(context)
        return context

    def _scalar(self, verb: str, register: RegisterDescriptor) -> Dict[str, Any]:
        return {
            "name": f"{verb}_{to_snake_case(register.name)}",
            "register": register.name,
            "address": register.address,
            "datatype": register.datatype.name,
            "type": self.type_name(register.datatype),
        }

    def _array(self, verb: str, array: ArrayDescriptor) -> Dict[str, Any]:
        accessor = self._scalar(verb, array)
        accessor["length"] = array.length
        return accessor

    def _groups(self, verb: str, groups: List[GroupDescriptor]) -> List[Dict[str, Any]]:
        # A base name shared by several datatypes gets the type code in its accessor names
        shared = Counter(group.name for group in groups)
        accessors = []
        for group in groups:
            stem = to_snake_case(group.name)
            if shared[group.name] > 1:
                stem = f"{stem}_{group.datatype.value.lower()}"
            accessors.append(
                {
                    "name": f"{verb}_{stem}_group",
                    "register": group.name,
                    "datatype": group.datatype.name,
                    "type": self.type_name(group.datatype),
                    "length": group.length,
                    "elements": [
                        {"index": e.index, "address": e.address, "name": e.name}
                        for e in group.elements
                    ],
                }
            )
        return accessors

    @staticmethod
    def _check_unique_names(context: Dict[str, Any]) -> None:
        families = (
            "indicators",
            "controls",
            "indicator_arrays",
            "control_arrays",
            "indicator_groups",
            "control_groups",
            "read_fifos",
            "write_fifos",
        )
        counts = Counter(acc["name"] for family in families for acc in context[family])
        clashes = sorted(name for name, count in counts.items() if count > 1)
        if clashes:
            raise GenerationError(f"Accessor names generated more than once: {', '.join(clashes)}")
