"""
Error taxonomy for the framing layer.

Three families, none of them retried here:
- ConfigurationError: rejected at session construction.
- CodecError: one encode call failed; the session stays usable.
- PreconditionError: capacity or internal misuse, surfaced immediately.

A page is either fully built and checksummed or not returned at all.
"""

from __future__ import annotations


class OggFrameError(Exception):
    """Base class for framing layer errors."""


# -------------------------
# Configuration
# -------------------------

class ConfigurationError(OggFrameError):
    """
    Raised when a sampling rate / channel count / application combination
    is invalid.

    Fatal to session construction.
    """


# -------------------------
# Codec
# -------------------------

class CodecError(OggFrameError):
    """
    Raised when a single codec call fails (malformed input, bad block size).

    No page is emitted and the page sequence counter is not advanced.
    """


# -------------------------
# Preconditions
# -------------------------

class PreconditionError(OggFrameError):
    """Base class for capacity and internal precondition violations."""


class HeaderTooLarge(PreconditionError):
    """
    Raised when a computed page header does not fit in the space reserved
    ahead of the payload.
    """


class SegmentTableOverflow(PreconditionError):
    """
    Raised when a page would need more than 255 lacing values.

    Pages are never split across physical pages.
    """


class FramingModeError(PreconditionError):
    """
    Raised for an unknown framing mode, or a container-only operation
    requested in bare-payload mode.
    """


class SessionClosed(PreconditionError):
    """Raised when an encoder session is used after close()."""
