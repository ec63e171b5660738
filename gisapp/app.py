"""Main window of the application and its command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from gisapp import config
from gisapp.controller import PanelController
from gisapp.model import GISAction, get_global_receiver

_POLL_INTERVAL_MS = 50


class MainWindow:
    """The application's top-level window holding the main panel."""

    def __init__(self, app: Any, poll_interval_ms: int = _POLL_INTERVAL_MS) -> None:
        if poll_interval_ms <= 0:
            raise ValueError("poll interval must be positive")
        self._app = app
        self._panel = PanelController()
        self._poll_interval_ms = poll_interval_ms
        self._receiver = get_global_receiver()

    def show(self) -> None:
        """Build the window's widgets and start listening for actions."""
        self._app.title(config.APP_TITLE)
        self._app.geometry(f"{config.APP_WIDTH}x{config.APP_HEIGHT}")
        self._panel.init(self._app)
        self._panel.layout().pack(fill="both", expand=True)
        self._app.after(self._poll_interval_ms, self._tick)

    def handle_action(self, action: GISAction) -> None:
        """React to a single action received from the channel."""
        if not isinstance(action, GISAction):
            raise TypeError(f"expected a GISAction, got {type(action).__name__}")
        if action is GISAction.MAP_IMAGE_UPDATED:
            print("Map image updated!")

    def poll_actions(self) -> list[GISAction]:
        """Handle every action waiting on the channel; return them in order."""
        handled: list[GISAction] = []
        while True:
            try:
                action = self._receiver.receive(timeout=0)
            except TimeoutError:
                return handled
            self.handle_action(action)
            handled.append(action)

    def _tick(self) -> None:
        self.poll_actions()
        self._app.after(self._poll_interval_ms, self._tick)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the application and run its event loop until it closes."""
    parser = argparse.ArgumentParser(
        prog="gisapp", description="Geographic information system."
    )
    parser.parse_args(argv)

    import tkinter as tk

    try:
        root = tk.Tk(className=config.APP_ID)
    except tk.TclError as exc:
        print(f"gisapp: cannot open a window: {exc}", file=sys.stderr)
        return 1

    window = MainWindow(root)
    window.show()
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())