"""
Session contract for generated register access code.

Generated Python modules call these methods only; a concrete backend
(a binding to the NI FPGA Interface C API, a simulator, a test double)
implements them. The element type is passed explicitly because the
runtime cannot infer it from a bare address.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Tuple

from nifpga_apigen.model import Datatype

logger = logging.getLogger(__name__)


class SessionError(IOError):
    """Raised when a session operation fails.

    Backends should raise this when opening the bitfile, a register
    access, or a FIFO operation fails on the target.
    """


class ReadFifo(ABC):
    """Target-to-host FIFO opened for reading."""

    @abstractmethod
    def read(self, count: int, timeout_ms: int = -1) -> Tuple[List[Any], int]:
        """Read ``count`` elements.

        Returns:
            Tuple of ``(elements, elements_remaining)``

        Raises:
            SessionError: If the read fails or times out.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class WriteFifo(ABC):
    """Host-to-target FIFO opened for writing."""

    @abstractmethod
    def write(self, values: Sequence[Any], timeout_ms: int = -1) -> int:
        """Write ``values``.

        Returns:
            Number of empty elements remaining in the FIFO

        Raises:
            SessionError: If the write fails or times out.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class Session(ABC):
    """
    An open session on one bitfile.

    Addresses are the integer values of the header's address literals.
    """

    @abstractmethod
    def read(self, datatype: Datatype, address: int) -> Any:
        """Read a scalar indicator.

        Raises:
            SessionError: If the operation fails.
        """
        pass

    @abstractmethod
    def write(self, datatype: Datatype, address: int, value: Any) -> None:
        """Write a scalar control.

        Raises:
            SessionError: If the operation fails.
        """
        pass

    @abstractmethod
    def read_array(self, datatype: Datatype, address: int, size: int) -> List[Any]:
        """Read ``size`` elements of an array indicator.

        Raises:
            SessionError: If the operation fails.
        """
        pass

    @abstractmethod
    def write_array(self, datatype: Datatype, address: int, values: Sequence[Any]) -> None:
        """Write every element of an array control.

        Raises:
            SessionError: If the operation fails.
        """
        pass

    @abstractmethod
    def open_read_fifo(self, datatype: Datatype, address: int, depth: int) -> Tuple[ReadFifo, int]:
        """Configure a target-to-host FIFO with a requested depth and start it.

        Returns:
            Tuple of ``(fifo, actual_depth)``
        """
        pass

    @abstractmethod
    def open_write_fifo(self, datatype: Datatype, address: int, depth: int) -> Tuple[WriteFifo, int]:
        """Configure a host-to-target FIFO with a requested depth and start it.

        Returns:
            Tuple of ``(fifo, actual_depth)``
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the session, resetting the bitfile if so configured."""
        pass

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.close()
        except SessionError as e:
            if exc_type is None:
                raise
            # an exception is already propagating
            logger.warning("Failed to close session: %s", e)


class SessionFactory(ABC):
    """Opens sessions; the backend entry point generated code is given."""

    @abstractmethod
    def open(
        self,
        bitfile_path: str,
        signature: str,
        resource: str,
        run: bool = True,
        reset_on_close: bool = True,
    ) -> Session:
        """Open a session on ``resource`` with the bitfile at ``bitfile_path``.

        Raises:
            SessionError: If the bitfile cannot be opened or its signature
                does not match.
        """
        pass
