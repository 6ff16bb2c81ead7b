"""
CLI commands for the UpCloud client.
"""

from upcloud_client.cli.main import build_parser, main, run_command

__all__ = [
    "build_parser",
    "main",
    "run_command",
]
