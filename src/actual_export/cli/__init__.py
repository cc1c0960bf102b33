"""
Command Line Interface Package

Command Structure:
- actual-export: Main entry point with utility commands (version, config)
- actual-export export: Write one month of transactions to {output_dir}/{YYYY-MM}.csv
"""

from .main import main

__all__ = ["main"]
