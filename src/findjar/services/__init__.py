from .console_output import ConsoleOutputHandler

__all__ = ["ConsoleOutputHandler"]
