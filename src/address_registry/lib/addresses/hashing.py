"""Deterministic 32-bit raw-text hash used as the address dedup key.

Python's built-in ``hash()`` is salted per process, so the key is computed
with a fixed 31-based polynomial over UTF-16 code units, wrapped to a
signed 32-bit integer.  Hashes already persisted in the ``addresses``
table therefore stay comparable.

The key is narrow by construction: two different raw texts may share a hash,
in which case the second one is reported as a duplicate.
"""

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def raw_text_hash(raw_text: str) -> int:
    """Compute the signed 32-bit dedup hash of an address's raw text.

    Args:
        raw_text: Original, untruncated address text.

    Returns:
        Integer in ``[-2**31, 2**31)``.
    """
    encoded = raw_text.encode("utf-16-be")
    h = 0
    for i in range(0, len(encoded), 2):
        h = (31 * h + ((encoded[i] << 8) | encoded[i + 1])) & _MASK
    return h - (1 << 32) if h & _SIGN_BIT else h
