"""
Pydantic models describing the memory-mapped interface of an FPGA bitfile.

For the session contract that generated code runs against, use
nifpga_apigen.runtime.
"""

from .api import FpgaApi
from .base import ApiGenBaseModel, RegisterKind, StrictModel
from .config import DEFAULT_BITFILE_PATH, DEFAULT_NAMESPACE, DEFAULT_RESOURCE, GenerationConfig, Target
from .datatype import Datatype
from .register import (
    ArrayDescriptor,
    GroupDescriptor,
    GroupElement,
    RegisterDescriptor,
    Signature,
    U32_MAX,
)

__all__ = [
    # Base
    "ApiGenBaseModel",
    "StrictModel",
    "RegisterKind",
    "Datatype",
    # Descriptors
    "RegisterDescriptor",
    "ArrayDescriptor",
    "GroupDescriptor",
    "GroupElement",
    "Signature",
    "FpgaApi",
    "U32_MAX",
    # Config
    "GenerationConfig",
    "Target",
    "DEFAULT_BITFILE_PATH",
    "DEFAULT_RESOURCE",
    "DEFAULT_NAMESPACE",
]
