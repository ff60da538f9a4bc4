"""Tests for hash module."""

import pytest
from hypothesis import given, strategies as st

from uiforge.core.hash import hash_string, hash_fields


@pytest.mark.unit
def test_hash_string():
    result = hash_string("design")

    assert isinstance(result, str)
    assert len(result) == 16  # xxhash64 produces 16 hex chars
    assert hash_string("design") == result


@pytest.mark.unit
def test_hash_fields_order_sensitive():
    result = hash_fields('{"framework":"react"}', '[{"id":"root"}]')

    assert result != hash_fields('[{"id":"root"}]', '{"framework":"react"}')
    assert result == hash_fields('{"framework":"react"}', '[{"id":"root"}]')


@pytest.mark.unit
def test_hash_fields_separator():
    """Field boundaries take part in the digest."""
    assert hash_fields("ab", "c") != hash_fields("a", "bc")


@given(st.text(max_size=1000))
def test_hash_deterministic(text):
    """Property test: hashing is deterministic."""
    assert hash_string(text) == hash_string(text)
