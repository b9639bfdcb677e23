"""Console front end: command dispatcher and text view."""

from stoneboard.console.controller import AppState
from stoneboard.console.view import ConsoleView

__all__ = ["AppState", "ConsoleView"]
