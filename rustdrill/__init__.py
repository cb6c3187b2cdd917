"""An exercise runner that compiles, tests and watches exercise files, and worked drills."""

__version__ = "0.1.0"