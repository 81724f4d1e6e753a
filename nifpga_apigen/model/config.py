"""
Generation settings.

Built from command-line flags or loaded from a YAML file by
``nifpga_apigen.parser.config_parser``.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from .base import StrictModel

DEFAULT_BITFILE_PATH = "/home/lvuser/fpga.lvbitx"
DEFAULT_RESOURCE = "RIO0"
DEFAULT_NAMESPACE = "NiFpga"


class Target(str, Enum):
    """Host language of the generated accessor code."""

    PYTHON = "python"
    RUST = "rust"


class GenerationConfig(StrictModel):
    """
    Resolved settings for one generation run.

    ``output`` is relative to the directory of the input header; when
    unset, the generator for ``target`` supplies its default file name.
    """

    bitfile_path: str = Field(default=DEFAULT_BITFILE_PATH, description="Bitfile path on the target")
    resource: str = Field(default=DEFAULT_RESOURCE, description="RIO resource identifier")
    run: bool = Field(default=True, description="Run the bitfile when the session opens")
    reset_on_close: bool = Field(default=True, description="Reset the bitfile when the session closes")
    groups: bool = Field(default=False, description="Emit batch accessors for indexed families")
    output: Optional[str] = Field(default=None, description="Output file name")
    target: Target = Field(default=Target.PYTHON, description="Generated language")
    namespace: str = Field(default=DEFAULT_NAMESPACE, description="Declaration prefix")

    @field_validator("target", mode="before")
    @classmethod
    def normalize_target(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("bitfile_path", "resource", "namespace")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Value cannot be empty")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Output name cannot be empty")
        return v
