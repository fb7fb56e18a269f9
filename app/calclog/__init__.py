"""
calclog - A Logging Command Line Calculator

This package contains the components of calclog:
- calculator: The four operations, parsing and formatting
- console: User interaction (rich)
- files: Log directory and log file storage
- menu: Startup handling and the interactive loop
- config: Configuration loading
"""

from .config import Config
from .menu import MenuController

__version__ = "0.1.0"
__all__ = ["Config", "MenuController"]
