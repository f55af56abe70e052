"""Decoding and encoding of Location documents."""

from src.codec.records import (
    decode_location,
    decode_record,
    dumps_location,
    encode_location,
    encode_record,
    find_unknown_codes,
    load_location_file,
    loads_location,
)

__all__ = [
    "decode_record",
    "encode_record",
    "decode_location",
    "encode_location",
    "loads_location",
    "dumps_location",
    "load_location_file",
    "find_unknown_codes",
]
