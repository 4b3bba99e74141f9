"""User interface components."""

from autosubber.ui.console import ConsoleUI

__all__ = ["ConsoleUI"]
