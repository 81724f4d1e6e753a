"""
Accessor code generators, one per host language.
"""

from typing import Optional, Union

from nifpga_apigen.model import Target

from .base_generator import BaseGenerator, GenerationError
from .python_api_generator import PythonApiGenerator
from .rust_api_generator import RustApiGenerator

GENERATORS = {
    Target.PYTHON: PythonApiGenerator,
    Target.RUST: RustApiGenerator,
}


def get_generator(target: Union[Target, str], template_dir: Optional[str] = None) -> BaseGenerator:
    """Instantiate the generator for ``target``.

    Raises:
        GenerationError: If no generator exists for the target.
    """
    try:
        generator_class = GENERATORS[Target(target)]
    except (ValueError, KeyError):
        raise GenerationError(
            f"Unsupported target '{target}'. Available: {', '.join(t.value for t in GENERATORS)}"
        ) from None
    return generator_class(template_dir)


__all__ = [
    "BaseGenerator",
    "GenerationError",
    "PythonApiGenerator",
    "RustApiGenerator",
    "GENERATORS",
    "get_generator",
]
