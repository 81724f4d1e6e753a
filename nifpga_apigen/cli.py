"""
nifpga-apigen - generate register access APIs from NI FPGA interface headers.

Usage:
    nifpga-apigen -i NiFpga_robot.h
    nifpga-apigen -i NiFpga_robot.h --target rust -o mod.rs --groups
    nifpga-apigen -i NiFpga_robot.h --config apigen.yml --json
"""

import argparse
import json
import logging
import sys

from nifpga_apigen.model import Target
from nifpga_apigen.parser import build_config, load_config
from nifpga_apigen.pipeline import generate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nifpga-apigen",
        description="Generate a typed register/FIFO access API from an NI FPGA interface header",
    )
    parser.add_argument("--input", "-i", required=True, help="Interface header (NiFpga_<bitfile>.h)")
    parser.add_argument(
        "--out", "-o", help="Output file relative to the input directory (default: fpga_api.py / mod.rs)"
    )
    parser.add_argument(
        "--path", "-p", help="Bitfile path on the target (default: /home/lvuser/fpga.lvbitx)"
    )
    parser.add_argument("--resource", "-r", help="Resource name (default: RIO0)")
    parser.add_argument(
        "--no-run", action="store_true", help="Do not run the bitfile when the session opens"
    )
    parser.add_argument(
        "--no-reset", action="store_true", help="Do not reset the bitfile when the session closes"
    )
    parser.add_argument(
        "--groups", action="store_true", help="Emit batch accessors for enumerated controls and indicators"
    )
    parser.add_argument(
        "--target", choices=[t.value for t in Target], help="Generated language (default: python)"
    )
    parser.add_argument("--namespace", help="Declaration prefix (default: NiFpga)")
    parser.add_argument("--config", "-c", help="YAML file with generation settings")
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def resolve_config(args: argparse.Namespace):
    """Merge the optional config file with explicit command-line flags."""
    overrides = {
        "bitfile_path": args.path,
        "resource": args.resource,
        "output": args.out,
        "target": args.target,
        "namespace": args.namespace,
        # Flags only override when given
        "run": False if args.no_run else None,
        "reset_on_close": False if args.no_reset else None,
        "groups": True if args.groups else None,
    }
    if args.config:
        return load_config(args.config, **overrides)
    return build_config({}, **overrides)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
        output_path = generate(args.input, config)
    except Exception as e:
        if args.json:
            print(json.dumps({"success": False, "error": str(e)}))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({"success": True, "output": str(output_path), "target": config.target.value}))
    else:
        print(f"generated {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
