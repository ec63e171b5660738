"""Application configuration values."""

APP_ID = "com.app.gis"
APP_TITLE = "GIS"
APP_WIDTH = 1024
APP_HEIGHT = 768
APP_FILE_EXT = ".gisproj"