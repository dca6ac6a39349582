"""Exception types shared by the parser, discovery and view layers."""

from __future__ import annotations

from pathlib import Path


class NorthstarModsError(Exception):
    """Base exception for northstar-mods errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ModParseError(NorthstarModsError):
    """A mod directory's required ``mod.json`` could not be read or decoded."""

    def __init__(self, mod_dir: Path, reason: str) -> None:
        super().__init__(
            f"Invalid mod.json in {mod_dir.name}: {reason}",
            {"path": str(mod_dir)},
        )
        self.mod_dir = mod_dir
        self.reason = reason


class DiscoveryError(NorthstarModsError):
    """The top-level directory for a view kind could not be scanned."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"{reason}: {root}")
        self.root = root
        self.reason = reason


class RootNotFoundError(DiscoveryError):
    """The kind's root directory does not exist or is not a directory."""


class RootNotReadableError(DiscoveryError):
    """The kind's root directory exists but could not be opened or listed."""
