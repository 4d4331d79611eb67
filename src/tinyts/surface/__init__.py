"""Surface boundary: decoding parser output into core terms."""

from tinyts.surface.decode import (
    DecodeError,
    Decoder,
    decode_env,
    decode_term,
    decode_type,
    load_env,
    load_term,
    loads_term,
)

__all__ = [
    "DecodeError",
    "Decoder",
    "decode_env",
    "decode_term",
    "decode_type",
    "load_env",
    "load_term",
    "loads_term",
]
