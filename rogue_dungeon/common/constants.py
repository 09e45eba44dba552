"""Shared constants for map generation and display."""

# Terminal area the game is laid out for
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

# Map dimensions
MAP_WIDTH = 80
MAP_HEIGHT = 45

# Dungeon generator parameters
ROOM_MAX_SIZE = 10
ROOM_MIN_SIZE = 6
MAX_ROOMS = 30

# Background colors (r, g, b)
COLOR_DARK_WALL = (0, 0, 100)
COLOR_DARK_GROUND = (50, 50, 150)

# Lines below the map reserved for the status bar and recent log messages
STATUS_LINES = SCREEN_HEIGHT - MAP_HEIGHT
