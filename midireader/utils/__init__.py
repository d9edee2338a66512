"""Utility functions for midireader."""

from midireader.utils.vlq import encode_vlq, decode_vlq, read_vlq
from midireader.utils.validation import validate_smf_header

__all__ = [
    "encode_vlq",
    "decode_vlq",
    "read_vlq",
    "validate_smf_header",
]
