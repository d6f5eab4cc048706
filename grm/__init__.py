"""grm: fetch the latest GitHub release of a repository."""

__version__ = "1.0.0"
