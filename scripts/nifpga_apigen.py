#!/usr/bin/env python3
"""
nifpga-apigen - run from a source checkout without installing.

Usage:
    python scripts/nifpga_apigen.py -i NiFpga_robot.h --groups
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from nifpga_apigen.cli import main

if __name__ == "__main__":
    sys.exit(main())
