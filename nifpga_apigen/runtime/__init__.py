"""
Runtime contract that generated Python accessor modules are written against.

This package holds abstract classes only; opening a hardware session is
left to a backend implementing SessionFactory.
"""

from nifpga_apigen.model import Datatype

from .session import ReadFifo, Session, SessionError, SessionFactory, WriteFifo

__all__ = [
    "Datatype",
    "Session",
    "SessionFactory",
    "SessionError",
    "ReadFifo",
    "WriteFifo",
]
