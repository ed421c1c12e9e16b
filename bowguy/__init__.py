"""The Tale of Bow Guy: a top-down arcade shooter, its map file format, and the RoboGuy toy."""

__version__ = "0.1.0"