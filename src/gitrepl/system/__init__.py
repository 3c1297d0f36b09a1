"""Operating-system collaborator for gitrepl."""

from gitrepl.system.ops import DirEntry, SystemOps

__all__ = ["DirEntry", "SystemOps"]
