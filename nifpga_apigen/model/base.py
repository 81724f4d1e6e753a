"""
Base models for the FPGA interface model.

Provides shared base models with centralized configuration for all
descriptor and configuration classes, so that ``model_config`` is not
repeated across the codebase.

StrictModel (extra="forbid") is used throughout: an unknown field in a
descriptor or in a settings file is a typo, never something to ignore.
"""

from enum import Enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiGenBaseModel(BaseModel):
    """Base model with shared configuration for all model classes.

    Provides camelCase aliasing, assignment validation, and allows field
    population by either alias or Python name.
    """

    model_config = {
        "validate_assignment": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class StrictModel(ApiGenBaseModel):
    """Base model that forbids unknown fields."""

    model_config = {
        **ApiGenBaseModel.model_config,
        "extra": "forbid",
    }


class RegisterKind(str, Enum):
    """Declaration kind, as spelled in the interface header."""

    INDICATOR = "Indicator"
    CONTROL = "Control"
    TARGET_TO_HOST_FIFO = "TargetToHostFifo"
    HOST_TO_TARGET_FIFO = "HostToTargetFifo"

    @classmethod
    def from_token(cls, token: str) -> "RegisterKind":
        """Resolve a header kind token.

        Raises:
            ValueError: If the token is not a known kind.
        """
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Unrecognized declaration kind '{token}'") from None

    @property
    def is_fifo(self) -> bool:
        """Check if this kind is a streaming FIFO endpoint."""
        return self in (RegisterKind.TARGET_TO_HOST_FIFO, RegisterKind.HOST_TO_TARGET_FIFO)
