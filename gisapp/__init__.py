"""Desktop geographic information system window: project and map image state, an action channel and a Tk interface."""

__version__ = "0.1.0"