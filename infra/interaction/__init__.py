from .console_renderer import HELP_TEXT, ConsoleRenderer

__all__ = ["ConsoleRenderer", "HELP_TEXT"]
