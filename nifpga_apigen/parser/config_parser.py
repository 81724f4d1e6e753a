"""
YAML loader for generation settings.

Example file::

    bitfilePath: /home/lvuser/natinst/bin/robot.lvbitx
    resource: RIO0
    resetOnClose: false
    groups: true
    target: python
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from nifpga_apigen.model import GenerationConfig
from nifpga_apigen.utils import filter_none, to_snake_case

from .errors import ConfigError


def load_config(file_path: Union[str, Path], **overrides: Any) -> GenerationConfig:
    """
    Load generation settings from a YAML file.

    Args:
        file_path: Path to the YAML file
        **overrides: Values replacing the file's settings; ``None`` values
            are ignored so that unset command-line flags keep file values

    Returns:
        GenerationConfig: Validated settings

    Raises:
        ConfigError: If the file is missing, malformed, or fails validation
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise ConfigError(f"File not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise ConfigError(f"YAML syntax error: {e}", file_path, line_num)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Root element must be a YAML object/dictionary", file_path)

    return build_config(data, file_path, **overrides)


def build_config(data: Dict[str, Any], file_path: Union[str, Path, None] = None, **overrides: Any) -> GenerationConfig:
    """Validate a settings mapping, applying non-``None`` overrides."""
    # camelCase keys become snake_case; overrides win
    merged = {to_snake_case(str(k)): v for k, v in data.items()}
    merged.update(filter_none(overrides))
    try:
        return GenerationConfig(**merged)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"{loc}: {error['msg']}")
        raise ConfigError("Invalid configuration: " + "; ".join(errors), file_path)
