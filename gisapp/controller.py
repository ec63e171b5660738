"""Controllers connecting the views to the application model."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from gisapp.model import (
    GISAction,
    get_global_sender,
    get_project_context,
    with_project_extension,
)
from gisapp.view import MapView, MenuView

_IMAGE_FILETYPES = (
    ("Image Files", "*.jpg *.jpeg *.png *.gif *.bmp *.tif *.tiff"),
    ("All Files", "*.*"),
)


def on_project_file_chosen(path: str | os.PathLike[str]) -> Path:
    """Record a new project file, adding the project extension to ``path``."""
    project_file = with_project_extension(path)
    with get_project_context() as context:
        context.project_file = project_file
    return project_file


def on_map_image_chosen(path: str | os.PathLike[str]) -> Path:
    """Record the map image and announce that the map changed."""
    image_file = Path(path)
    with get_project_context() as context:
        context.map_image_file = image_file
    get_global_sender().send(GISAction.MAP_IMAGE_UPDATED)
    return image_file


def new_project(parent: Any) -> Path | None:
    """Ask for a new project file; return its path, or None if cancelled."""
    from tkinter import filedialog

    chosen = filedialog.asksaveasfilename(
        parent=parent, title="Open File", initialdir=os.getcwd()
    )
    if not chosen:
        return None
    return on_project_file_chosen(chosen)


def new_map(parent: Any) -> Path | None:
    """Ask for a map image; return its path, or None if cancelled."""
    from tkinter import filedialog

    chosen = filedialog.askopenfilename(
        parent=parent,
        title="Open File",
        initialdir=os.getcwd(),
        filetypes=_IMAGE_FILETYPES,
    )
    if not chosen:
        return None
    return on_map_image_chosen(chosen)


def exit_app() -> None:
    """Leave the application with a success status."""
    raise SystemExit(0)


class MapController:
    """Handles user interaction with the map area."""

    def __init__(self) -> None:
        self._view = MapView()

    def init(self, master: Any) -> None:
        """Build the map area inside ``master``."""
        self._view.init(master)

    def layout(self) -> Any:
        """Return the map container."""
        return self._view.layout()


class MenuController:
    """Handles user interaction with the menu bar."""

    def __init__(self) -> None:
        self._view = MenuView()
        self._master: Any = None

    def init(self, master: Any) -> None:
        """Build the menu bar inside ``master`` and attach its handlers."""
        self._master = master
        self._view.init(master)
        handlers = self.handlers()
        for item in self._view.items():
            handler = handlers.get((item.menu_label, item.label))
            if handler is not None:
                item.connect(handler)

    def layout(self) -> Any:
        """Return the menu bar container."""
        return self._view.layout()

    def handlers(self) -> dict[tuple[str, str], Callable[[], object]]:
        """Map (menu, entry) labels to the callables run on activation."""
        parent = self._master
        return {
            ("Project", "New"): lambda: new_project(parent),
            ("Project", "Exit"): exit_app,
            ("Map", "New"): lambda: new_map(parent),
        }


class PanelController:
    """Lays out the menu bar above the control area holding the map."""

    def __init__(self) -> None:
        self._menu = MenuController()
        self._map = MapController()
        self._layout: Any = None

    def init(self, master: Any) -> None:
        """Build the whole panel inside ``master``."""
        import tkinter as tk

        main_layout = tk.Frame(master)
        self._menu.init(main_layout)
        control_layout = tk.Frame(main_layout)
        self._map.init(control_layout)

        self._map.layout().pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self._menu.layout().pack(side=tk.TOP, fill=tk.X)
        control_layout.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self._layout = main_layout

    def layout(self) -> Any:
        """Return the panel's main container."""
        if self._layout is None:
            raise RuntimeError("panel is not initialised")
        return self._layout