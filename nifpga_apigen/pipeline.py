"""
End-to-end generation: header file in, accessor source file out.

The output is written to a temporary file in the destination directory
and renamed into place, so a failed run never leaves a partial file.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional, Union

from nifpga_apigen.builder import ApiBuilder
from nifpga_apigen.generator import get_generator
from nifpga_apigen.model import GenerationConfig

logger = logging.getLogger(__name__)


def render_header(text: str, config: GenerationConfig, file_path: Optional[Path] = None) -> str:
    """Build the model of ``text`` and render it for ``config.target``."""
    generator = get_generator(config.target)
    api = ApiBuilder(config.namespace).build(text, file_path)
    return generator.render(api, config)


def output_path_for(input_path: Union[str, Path], config: GenerationConfig) -> Path:
    """Resolve the output file: ``config.output`` relative to the input's directory."""
    name = config.output or get_generator(config.target).default_output
    return Path(input_path).parent / name


def _output_mode(path: Path) -> int:
    """Mode of the existing output, else what a plain ``open()`` would create."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` through a temporary file and a rename.

    ``mkstemp`` creates the file as 0600; before the rename it takes the
    mode of the output it replaces, or the umask default.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise


def generate(input_path: Union[str, Path], config: Optional[GenerationConfig] = None) -> Path:
    """
    Generate the accessor source for an interface header.

    Args:
        input_path: Path to the ``NiFpga_<bitfile>.h`` header
        config: Generation settings; defaults apply when omitted

    Returns:
        Path of the written output file

    Raises:
        ParseError: If the header cannot be modeled (nothing is written)
        GenerationError: If the model cannot be rendered (nothing is written)
        OSError: If reading the input or writing the output fails
    """
    config = config or GenerationConfig()
    input_path = Path(input_path)

    logger.info("Reading %s", input_path)
    with open(input_path, "r", encoding="utf-8") as f:
        text = f.read()

    content = render_header(text, config, input_path)

    output_path = output_path_for(input_path, config)
    write_atomic(output_path, content)
    logger.info("Wrote %s", output_path)
    return output_path
