"""nolearn: a keyboard-driven terminal task list backed by a JSON file."""

__version__ = "0.1.0"
