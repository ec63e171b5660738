# gisapp

A small desktop geographic information system window built with Tkinter.
It opens a main window titled "GIS" (1024×768) with a menu bar above a
map area, and keeps track of the current project file and the map image
chosen for it.

## Installation

```
pip install .
```

Tkinter ships with most Python installations. Python 3.10 or later is
required.

## Running

```
gisapp
```

The command takes no options beyond `--help`. If no display is
available, it prints `gisapp: cannot open a window: ...` to standard
error and exits with status 1.

## Menus

**Project**

- *New*: opens a save dialog in the current directory. The extension
  `.gisproj` is appended to the chosen name, and the result is stored as
  the current project file. Nothing is written to disk.
- *Open*, *Save*: shown in the menu but have no action attached.
- *Exit*: quits the application with status 0.

**Map**

- *New*: opens a file dialog in the current directory, filtered to image
  files (JPEG, PNG, GIF, BMP, TIFF) or all files. The chosen path is
  stored as the project's map image, and a `GISAction.MAP_IMAGE_UPDATED`
  action is sent to the main window, which prints `Map image updated!`.

## What it does not do

- It does not display the map image; the map area stays empty.
- It does not open, read or save project files; only the path of a new
  project file is remembered while the application runs.
- There is no further GIS functionality (layers, coordinates, editing).

## Using the model from Python

The project state and the action channel between the menus and the main
window live in `gisapp.model`:

```python
from gisapp.model import (
    GISAction,
    get_global_receiver,
    get_global_sender,
    get_project_context,
    with_project_extension,
)

with get_project_context() as context:
    context.project_file = with_project_extension("survey")   # survey.gisproj

get_global_sender().send(GISAction.MAP_IMAGE_UPDATED)
action = get_global_receiver().receive(timeout=1.0)
```

- `get_project_context()` is a context manager that holds a lock on the
  shared `ProjectContext` (fields `project_file` and `map_image_file`,
  both `None` at start) for the `with` block.
- `get_global_channel()` returns the shared `GISChannel`;
  `get_global_sender()` and `get_global_receiver()` return the same
  channel. `send()` accepts only `GISAction` values (anything else raises
  `TypeError`), `receive(timeout)` raises `TimeoutError` when nothing
  arrives in time, and iterating over the channel yields actions as they
  arrive.

`gisapp.controller` has `on_project_file_chosen(path)` and
`on_map_image_chosen(path)`, which update the project context (and, for
the map image, send the action) without any dialog. `gisapp.view` has
`menu_structure()`, which lists the menus and their entries in order.
In `gisapp.app`, `MainWindow.poll_actions()` handles every waiting action
and returns them in order.

## Running the tests

```
pip install .[test]
pytest
```