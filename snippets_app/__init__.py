"""snippets-app: store, read and delete named text snippets from the command line."""

__version__ = "0.1.0"
