"""todo - a command-line todo list manager."""

__version__ = "0.1.0"
