# Quickrun Services Package
"""
System integration for the launcher.

Services hand the chosen entry off to the operating system.
"""

from .launch import LaunchInvoker, split_command_line

__all__ = ["LaunchInvoker", "split_command_line"]
