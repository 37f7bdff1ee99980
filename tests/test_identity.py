"""
Tests for conversation id derivation and generated ids.
"""

import re

import pytest

from teamhub.core.exceptions import ValidationError
from teamhub.core.identity import canonical_pair, derive_direct_id, generate_id


class TestDeriveDirectId:
    """Tests for derive_direct_id."""

    def test_is_commutative(self):
        assert derive_direct_id("user_b", "user_a") == derive_direct_id("user_a", "user_b")

    def test_uses_sorted_ids_with_prefix(self):
        assert derive_direct_id("zed", "amy") == "dm_amy_zed"

    def test_distinct_pairs_get_distinct_ids(self):
        ids = {
            derive_direct_id(a, b)
            for a, b in [("u1", "u2"), ("u1", "u3"), ("u2", "u3"), ("u3", "u1")]
        }
        assert len(ids) == 3

    def test_is_deterministic(self):
        assert derive_direct_id("x", "y") == derive_direct_id("x", "y")

    def test_empty_identity_is_rejected(self):
        with pytest.raises(ValidationError):
            derive_direct_id("", "u1")


class TestCanonicalPair:
    """Tests for canonical_pair."""

    def test_orders_lexicographically(self):
        assert canonical_pair("b", "a") == ("a", "b")
        assert canonical_pair("a", "b") == ("a", "b")


class TestGenerateId:
    """Tests for generate_id."""

    def test_format(self):
        assert re.fullmatch(r"group_\d{13}_[0-9a-f]{8}", generate_id("group"))

    def test_rapid_calls_do_not_collide(self):
        ids = {generate_id("project") for _ in range(500)}
        assert len(ids) == 500
