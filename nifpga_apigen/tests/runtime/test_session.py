"""
Test the session contract shared by generated code and backends.
"""

import logging

import pytest

from nifpga_apigen.runtime import Session, SessionError


class FailingCloseSession(Session):
    def read(self, datatype, address):
        raise SessionError("read failed")

    def write(self, datatype, address, value):
        pass

    def read_array(self, datatype, address, size):
        return []

    def write_array(self, datatype, address, values):
        pass

    def open_read_fifo(self, datatype, address, depth):
        raise SessionError("no fifo")

    def open_write_fifo(self, datatype, address, depth):
        raise SessionError("no fifo")

    def close(self):
        raise SessionError("close failed")


def test_session_error_is_io_error():
    assert issubclass(SessionError, IOError)


def test_session_is_abstract():
    with pytest.raises(TypeError):
        Session()


def test_context_manager_closes(recording_factory):
    session = recording_factory.session
    with session as entered:
        assert entered is session
    assert session.closed


def test_close_failure_is_raised():
    with pytest.raises(SessionError, match="close failed"):
        with FailingCloseSession():
            pass


def test_close_failure_does_not_mask_error(caplog):
    session = FailingCloseSession()
    with caplog.at_level(logging.WARNING, logger="nifpga_apigen.runtime.session"):
        with pytest.raises(SessionError, match="read failed"):
            with session:
                session.read(None, 0)
    assert "close failed" in caplog.text
