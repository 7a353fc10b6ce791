"""Mirror GitHub issues and pull requests into a local, versioned JSON snapshot."""

__version__ = "0.1.0"
