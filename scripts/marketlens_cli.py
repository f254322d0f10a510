#!/usr/bin/env python3
"""
marketlens CLI wrapper for running from a source checkout.

Usage:
    python marketlens_cli.py <group> <command> [args...]

Examples:
    python marketlens_cli.py market quote AAPL
    python marketlens_cli.py market chart MSFT --range 6mo --interval 1wk
    python marketlens_cli.py analysis trend NVDA
"""

import sys
import os

# Add the src directory to the path for development
script_dir = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.join(os.path.dirname(script_dir), "src")
if os.path.exists(src_dir):
    sys.path.insert(0, src_dir)


def main() -> None:
    """Main entry point - delegates to the Click CLI."""
    from marketlens.cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
