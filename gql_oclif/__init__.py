"""Generate oclif commands from GraphQL operations."""

__version__ = "0.1.0"
