# Quickrun Launcher Package
"""
Keyboard-driven application launcher.

Components:
  - Catalog: desktop entries normalized into label + command line
  - Engine: input buffer, filter index, pagination, root controller
  - Services: process hand-off for the chosen entry
"""

__version__ = "0.1.0-dev"
