"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter, ConsoleProgressCallback

__all__ = ["ConsolePresenter", "ConsoleProgressCallback"]
