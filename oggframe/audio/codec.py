"""
Codec contract.

This module defines the *interface only*. The framing layer treats the
perceptual codec as a black box: one block of PCM in, one compressed
packet out, or a CodecError.

Key invariants:
- One encode() call == one codec invocation == at most one packet.
- The codec keeps adaptive state; calls on one instance must be serialized
  by the caller (single writer).
- close() releases the native resource exactly once; further calls are no-ops.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from audio.pcm import PcmBlock


class Codec(ABC):
    """
    Abstract interface for a block codec.

    Implementations are responsible for:
    - Encoding INT16 and FLOAT32 blocks
    - Raising errors.CodecError when a block cannot be encoded
    - Releasing their native handle in close()

    Non-responsibilities:
    - No framing, paging or sequence numbers
    - No retries
    """

    @abstractmethod
    def encode(self, block: PcmBlock, frame_size: int) -> bytes:
        """
        Encode one block.

        Args:
            block: Interleaved samples in INT16 or FLOAT32 layout.
            frame_size: Samples per channel in `block`.

        Returns:
            One compressed packet.

        Raises:
            errors.CodecError if the codec rejects the block.
        """
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """
        Release the codec resource.

        MUST be idempotent.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def closed(self) -> bool:
        raise NotImplementedError
