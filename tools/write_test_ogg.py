"""
Write a short 440 Hz Ogg Opus test stream.

    python tools/write_test_ogg.py /tmp/test.ogg --blocks 10 --silence-ms 500
"""

import argparse

import numpy as np

from config import DEFAULT_CONFIG
from session.encoder_session import EncoderSession

BLOCK_SIZE = 1920  # 40 ms @ 48 kHz


def sine_block(sample_rate_hz: int, channels: int) -> np.ndarray:
    # Left channel only, matching the reference test tone
    t = np.arange(BLOCK_SIZE) / sample_rate_hz
    tone = (0.5 * np.sin(2 * np.pi * 440.0 * t)).astype(np.float32)
    block = np.zeros((BLOCK_SIZE, channels), dtype=np.float32)
    block[:, 0] = tone
    return block.reshape(-1)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("--blocks", type=int, default=10)
    parser.add_argument("--silence-ms", type=int, default=0)
    args = parser.parse_args()

    config = DEFAULT_CONFIG
    block = sine_block(config.sample_rate_hz, config.channels)

    with open(args.path, "wb") as out, EncoderSession(config) as enc:
        out.write(enc.stream_header())
        for _ in range(args.blocks):
            out.write(enc.encode_float(block))
        if args.silence_ms > 0:
            out.write(enc.encode_silence(enc.create_silence(args.silence_ms / 1000)))

    print("wrote", args.path)


if __name__ == "__main__":
    main()
