"""Browser fingerprint used to deduplicate likes.

The fingerprint is a 32-bit string hash of whatever the browser renders for a
fixed canvas probe (its data URL). It is spoofable and collides easily; it is
only a convenience key for "this browser already liked this post" and must
never be treated as an identity.
"""

from __future__ import annotations

FINGERPRINT_PREFIX = "fp_"
_MASK_32 = 0xFFFFFFFF


def _utf16_units(value: str) -> list[int]:
    raw = value.encode("utf-16-le")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def string_hash(value: str) -> int:
    """Return the signed 32-bit ``h * 31 + c`` hash over UTF-16 code units.

    Matches what a browser computes with ``((h << 5) - h + code) | 0`` so a
    fingerprint derived server-side equals the one the page derives.
    """
    h = 0
    for unit in _utf16_units(value):
        h = ((h << 5) - h + unit) & _MASK_32
    if h & 0x80000000:
        h -= 1 << 32
    return h


def generate_fingerprint(probe: str) -> str:
    """Return the ``fp_<digits>`` fingerprint for a canvas probe data URL."""
    return f"{FINGERPRINT_PREFIX}{abs(string_hash(probe))}"
