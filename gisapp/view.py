"""Presentation layer: the menu bar and the map area."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MenuSpec:
    """A top-level menu and the labels of its entries, in display order."""

    label: str
    items: tuple[str, ...]


def menu_structure() -> tuple[MenuSpec, ...]:
    """Return the application's menus in the order they appear on the bar."""
    return (
        MenuSpec("Project", ("New", "Open", "Save", "Exit")),
        MenuSpec("Map", ("New",)),
    )


@dataclass
class _MenuEntry:
    """One clickable entry of a drop-down menu."""

    menu_label: str
    label: str
    menu: Any
    index: int

    def connect(self, callback: Callable[[], object]) -> None:
        """Run ``callback`` whenever the entry is activated."""
        self.menu.entryconfigure(self.index, command=callback)


class MapView:
    """Manages the area of the window that holds the map."""

    def __init__(self) -> None:
        self._layout: Any = None

    def init(self, master: Any) -> None:
        """Create the map container inside ``master``."""
        import tkinter as tk

        self._layout = tk.Frame(master)

    def layout(self) -> Any:
        """Return the container holding the map."""
        if self._layout is None:
            raise RuntimeError("map view is not initialised")
        return self._layout


class MenuView:
    """Manages the menu bar and its drop-down menus."""

    def __init__(self) -> None:
        self._layout: Any = None
        self._items: list[_MenuEntry] = []

    def init(self, master: Any) -> None:
        """Build the menu bar inside ``master``."""
        import tkinter as tk

        self._items = []
        layout = tk.Frame(master)
        bar = tk.Frame(layout)
        for spec in menu_structure():
            button = tk.Menubutton(bar, text=spec.label)
            menu = tk.Menu(button, tearoff=0)
            for index, label in enumerate(spec.items):
                menu.add_command(label=label)
                self._items.append(_MenuEntry(spec.label, label, menu, index))
            button.configure(menu=menu)
            button.pack(side=tk.LEFT)
        bar.pack(side=tk.TOP, fill=tk.X)
        self._layout = layout

    def layout(self) -> Any:
        """Return the container holding the menu bar."""
        if self._layout is None:
            raise RuntimeError("menu view is not initialised")
        return self._layout

    def items(self) -> list[_MenuEntry]:
        """Return every menu entry, in bar order then menu order."""
        return list(self._items)