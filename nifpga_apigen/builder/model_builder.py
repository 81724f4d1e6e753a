"""
Builds the complete :class:`FpgaApi` model from interface header text.

Order of work: signature (which names the bitfile), declaration
extraction, type resolution, then array and group assembly. Any error
aborts the build; a partially built model is never returned.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from nifpga_apigen.model import (
    DEFAULT_NAMESPACE,
    Datatype,
    FpgaApi,
    RegisterDescriptor,
    RegisterKind,
)
from nifpga_apigen.parser import (
    DeclarationForm,
    DuplicateDeclarationError,
    HeaderParser,
    RawDeclaration,
    SignatureParser,
    UnknownTypeCodeError,
    UnsupportedDeclarationError,
)

from .arrays import ArrayAssembler
from .groups import GroupAssembler

logger = logging.getLogger(__name__)


class ApiBuilder:
    """Runs the extraction and assembly stages for one header."""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE):
        self.namespace = namespace
        self.signature_parser = SignatureParser(namespace)

    def build_file(self, file_path: Union[str, Path]) -> FpgaApi:
        """Read a header file and build its model."""
        file_path = Path(file_path)
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
        return self.build(content, file_path)

    def build(self, text: str, file_path: Optional[Path] = None) -> FpgaApi:
        """
        Build the interface model of the bitfile described by ``text``.

        Args:
            text: Interface header source
            file_path: Used in error messages only

        Returns:
            FpgaApi: Model with merged arrays and sorted groups

        Raises:
            ParseError: Or one of its subclasses, on any fatal condition
        """
        signature = self.signature_parser.parse_text(text, file_path)
        declarations = HeaderParser(signature.bitfile, self.namespace).parse_text(text, file_path)

        scalars: Dict[RegisterKind, Dict[str, RegisterDescriptor]] = {kind: {} for kind in RegisterKind}
        arrays = ArrayAssembler(file_path)
        groups = GroupAssembler(file_path)

        for declaration in declarations:
            datatype = self._resolve_datatype(declaration, file_path)
            form = declaration.form

            if form is DeclarationForm.SIZE:
                raise UnsupportedDeclarationError(
                    f"Size declaration '{declaration.name}' without the Array flag",
                    file_path,
                    declaration.line,
                )
            if declaration.kind.is_fifo and form is not DeclarationForm.SCALAR:
                raise UnsupportedDeclarationError(
                    f"FIFO '{declaration.name}' cannot be declared as an array",
                    file_path,
                    declaration.line,
                )

            if form is DeclarationForm.ARRAY:
                arrays.add_data(declaration, datatype)
            elif form is DeclarationForm.ARRAY_SIZE:
                arrays.add_length(declaration, datatype)
            else:
                register = self._add_scalar(scalars[declaration.kind], declaration, datatype, file_path)
                groups.add(register, declaration.line)

        indicator_arrays, control_arrays = arrays.finish()
        indicator_groups, control_groups = groups.finish()

        api = FpgaApi(
            signature=signature,
            indicators=list(scalars[RegisterKind.INDICATOR].values()),
            controls=list(scalars[RegisterKind.CONTROL].values()),
            indicator_arrays=indicator_arrays,
            control_arrays=control_arrays,
            indicator_groups=indicator_groups,
            control_groups=control_groups,
            read_fifos=list(scalars[RegisterKind.TARGET_TO_HOST_FIFO].values()),
            write_fifos=list(scalars[RegisterKind.HOST_TO_TARGET_FIFO].values()),
        )
        logger.info(
            "Bitfile %s: %d indicators, %d controls, %d arrays, %d groups, %d FIFOs",
            api.bitfile,
            len(api.indicators),
            len(api.controls),
            len(api.indicator_arrays) + len(api.control_arrays),
            len(api.indicator_groups) + len(api.control_groups),
            len(api.read_fifos) + len(api.write_fifos),
        )
        return api

    @staticmethod
    def _resolve_datatype(declaration: RawDeclaration, file_path: Optional[Path]) -> Datatype:
        try:
            return Datatype.from_code(declaration.type_code)
        except ValueError as e:
            raise UnknownTypeCodeError(
                f"{e} in declaration of '{declaration.name}'", file_path, declaration.line
            ) from None

    @staticmethod
    def _add_scalar(
        registry: Dict[str, RegisterDescriptor],
        declaration: RawDeclaration,
        datatype: Datatype,
        file_path: Optional[Path],
    ) -> RegisterDescriptor:
        if declaration.name in registry:
            raise DuplicateDeclarationError(
                f"Duplicate {declaration.kind.value} '{declaration.name}'",
                file_path,
                declaration.line,
            )
        register = RegisterDescriptor(
            name=declaration.name,
            address=declaration.address,
            datatype=datatype,
            kind=declaration.kind,
        )
        registry[register.name] = register
        return register


def build_api(
    text: str, namespace: str = DEFAULT_NAMESPACE, file_path: Optional[Path] = None
) -> FpgaApi:
    """Convenience wrapper around :meth:`ApiBuilder.build`."""
    return ApiBuilder(namespace).build(text, file_path)
