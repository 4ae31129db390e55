# app/services/audio_services.py
import struct

WAV_HEADER_SIZE = 44
DEFAULT_SAMPLE_RATE = 24000
CHANNELS = 1
BITS_PER_SAMPLE = 16

# RIFF header, fmt chunk and data chunk header for 16-bit mono PCM.
_WAV_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


def pcm_to_wav(pcm: bytes, sample_rate: int = DEFAULT_SAMPLE_RATE) -> bytes:
    """
    Wrap raw little-endian 16-bit mono PCM in a 44-byte WAV header.
    An empty payload produces a header describing zero-length audio.
    """
    block_align = CHANNELS * BITS_PER_SAMPLE // 8
    header = _WAV_HEADER.pack(
        b"RIFF",
        WAV_HEADER_SIZE - 8 + len(pcm),
        b"WAVE",
        b"fmt ",
        16,
        1,  # PCM
        CHANNELS,
        sample_rate,
        sample_rate * block_align,
        block_align,
        BITS_PER_SAMPLE,
        b"data",
        len(pcm),
    )
    return header + pcm
