from agenda.handlers.console import ConsoleSession

__all__ = ["ConsoleSession"]
