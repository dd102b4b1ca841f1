# protocol_constants.py

DEFAULT_SEED = 1              # Default seed of the deterministic and simple sources
MT_DEFAULT_SEED = 5489        # Default seed of the Mersenne Twister reference code
MT_ARRAY_SEED = 19650218      # Seed used by init_by_array before mixing in the key

MASK32 = 0xFFFFFFFF
MASK63 = 0x7FFFFFFFFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
UINT64_SIZE = 8               # Bytes per 64-bit draw


def to_int64(value: int) -> int:
    """Reduce an arbitrary Python integer to a signed 64-bit seed (two's complement)."""
    value &= MASK64
    return value - (1 << 64) if value > MASK63 else value
