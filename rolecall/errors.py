"""
rolecall.errors — Error Taxonomy
=================================

Only :class:`ResolutionError` ever aborts an operation.  The others are
reported (``ParseError``, ``ReactAttachError``) or silently absorbed
(``ReconcileSkip``) by the layer that raises them.
"""

from __future__ import annotations


class RolecallError(Exception):
    """Base class for all Rolecall errors."""


class ParseError(RolecallError):
    """The board text contains no role/emoji definition."""


class ResolutionError(RolecallError):
    """Discord rejected fetching or creating the role called *name*."""

    def __init__(self, name: str, reason: str = "") -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Could not resolve role {name!r}: {reason}" if reason
                         else f"Could not resolve role {name!r}")


class ReactAttachError(RolecallError):
    """A single emoji could not be attached to a published board."""

    def __init__(self, emoji: str, reason: str = "") -> None:
        self.emoji = emoji
        self.reason = reason
        super().__init__(f"Unable to react with {emoji}: {reason}" if reason
                         else f"Unable to react with {emoji}")


class ReconcileSkip(RolecallError):
    """A reaction event does not map to a board definition."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
