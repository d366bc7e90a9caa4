"""commitpick - look up or randomly sample commits from a git repository."""

__version__ = "0.1.0"
