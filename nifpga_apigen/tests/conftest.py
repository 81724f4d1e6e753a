import os
import sys

import pytest

# Add the project root to sys.path so that nifpga_apigen is importable
# This is needed because of the flat layout structure
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from nifpga_apigen.runtime import ReadFifo, Session, SessionFactory, WriteFifo  # noqa: E402

ROBOT_HEADER = """\
/*
 * Generated with the FPGA Interface C API Generator 19.0
 * for NI-RIO 19.0 or later.
 */
#ifndef __NiFpga_robot_h__
#define __NiFpga_robot_h__

#ifndef NiFpga_Version
   #define NiFpga_Version 190
#endif

#include "NiFpga.h"

/**
 * The filename of the FPGA bitfile.
 */
#define NiFpga_robot_Bitfile "NiFpga_robot.lvbitx"

/**
 * The signature of the FPGA bitfile.
 */
static const char* const NiFpga_robot_Signature = "A3F29C0D51E84B7A9C20E1D4F6B83A57";

typedef enum
{
   NiFpga_robot_IndicatorBool_Ready = 0x1800E,
} NiFpga_robot_IndicatorBool;

typedef enum
{
   NiFpga_robot_IndicatorI16_Temp_2 = 0x1801A,
   NiFpga_robot_IndicatorI16_Temp_0 = 0x18012,
   NiFpga_robot_IndicatorI16_Temp_1 = 0x18016,
} NiFpga_robot_IndicatorI16;

typedef enum
{
   NiFpga_robot_IndicatorU32_Counter = 0x18010,
} NiFpga_robot_IndicatorU32;

typedef enum
{
   NiFpga_robot_ControlSgl_Setpoint = 0x18020,
} NiFpga_robot_ControlSgl;

typedef enum
{
   NiFpga_robot_ControlU8_Pwm_0 = 0x18026,
   NiFpga_robot_ControlU8_Pwm_1 = 0x1802A,
} NiFpga_robot_ControlU8;

typedef enum
{
   NiFpga_robot_IndicatorArrayU8_Samples = 0x18030,
} NiFpga_robot_IndicatorArrayU8;

typedef enum
{
   NiFpga_robot_IndicatorArrayU8Size_Samples = 16,
} NiFpga_robot_IndicatorArrayU8Size;

typedef enum
{
   NiFpga_robot_ControlArrayDblSize_Gains = 3,
} NiFpga_robot_ControlArrayDblSize;

typedef enum
{
   NiFpga_robot_ControlArrayDbl_Gains = 0x18040,
} NiFpga_robot_ControlArrayDbl;

typedef enum
{
   NiFpga_robot_TargetToHostFifoU32_Telemetry = 0,
} NiFpga_robot_TargetToHostFifoU32;

typedef enum
{
   NiFpga_robot_HostToTargetFifoI16_Commands = 1,
} NiFpga_robot_HostToTargetFifoI16;

#endif
"""

ROBOT_SIGNATURE = "A3F29C0D51E84B7A9C20E1D4F6B83A57"


def make_header(*declarations, bitfile="robot", signature=ROBOT_SIGNATURE):
    """Build a minimal header with a signature and one enum of declarations."""
    lines = [f'static const char* const NiFpga_{bitfile}_Signature = "{signature}";', "", "typedef enum", "{"]
    lines.extend(f"   {declaration}," for declaration in declarations)
    lines.extend([f"}} NiFpga_{bitfile}_Declarations;", ""])
    return "\n".join(lines)


@pytest.fixture
def robot_header():
    return ROBOT_HEADER


@pytest.fixture
def robot_header_file(tmp_path):
    path = tmp_path / "NiFpga_robot.h"
    path.write_text(ROBOT_HEADER)
    return path


class RecordingFifo(ReadFifo, WriteFifo):
    def __init__(self, address, depth):
        self.address = address
        self.depth = depth
        self.closed = False

    def read(self, count, timeout_ms=-1):
        return [0] * count, 0

    def write(self, values, timeout_ms=-1):
        return self.depth - len(values)

    def close(self):
        self.closed = True


class RecordingSession(Session):
    """In-memory session that stores register values by address and logs calls."""

    def __init__(self):
        self.values = {}
        self.calls = []
        self.closed = False

    def read(self, datatype, address):
        self.calls.append(("read", datatype, address))
        return self.values.get(address, 0)

    def write(self, datatype, address, value):
        self.calls.append(("write", datatype, address, value))
        self.values[address] = value

    def read_array(self, datatype, address, size):
        self.calls.append(("read_array", datatype, address, size))
        return list(self.values.get(address, [0] * size))

    def write_array(self, datatype, address, values):
        self.calls.append(("write_array", datatype, address, list(values)))
        self.values[address] = list(values)

    def open_read_fifo(self, datatype, address, depth):
        self.calls.append(("open_read_fifo", datatype, address, depth))
        return RecordingFifo(address, depth), depth * 2

    def open_write_fifo(self, datatype, address, depth):
        self.calls.append(("open_write_fifo", datatype, address, depth))
        return RecordingFifo(address, depth), depth * 2

    def close(self):
        self.closed = True


class RecordingFactory(SessionFactory):
    def __init__(self):
        self.opened = []
        self.session = RecordingSession()

    def open(self, bitfile_path, signature, resource, run=True, reset_on_close=True):
        self.opened.append((bitfile_path, signature, resource, run, reset_on_close))
        return self.session


@pytest.fixture
def recording_factory():
    return RecordingFactory()


def load_generated_module(source, name="generated_api"):
    """Execute generated Python source and return its namespace."""
    namespace = {"__name__": name}
    exec(compile(source, f"{name}.py", "exec"), namespace)
    return namespace


@pytest.fixture
def header_factory():
    """Return ``make_header`` for building small headers inline."""
    return make_header


@pytest.fixture
def load_generated():
    """Return ``load_generated_module`` for executing generated Python code."""
    return load_generated_module
