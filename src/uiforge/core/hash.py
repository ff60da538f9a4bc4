"""Design fingerprints for the generated-code cache."""

import xxhash

FIELD_SEPARATOR = "\x00"


def hash_string(text: str) -> str:
    """xxhash64 hex digest (16 chars) of UTF-8 text."""
    return xxhash.xxh64(text.encode("utf-8")).hexdigest()


def hash_fields(*fields: str) -> str:
    """
    Hash multiple fields together (deterministic, order-sensitive).

    Fields are joined with a null byte so ``("ab", "c")`` and ``("a", "bc")``
    produce different keys.
    """
    return hash_string(FIELD_SEPARATOR.join(fields))


__all__ = ["hash_string", "hash_fields"]
