"""Tests for CallableResult.

Tests cover:
- Holds whatever value it was given, unchanged
- Immutability
- Equality by value
"""

import dataclasses

import pytest
from httpscallable.callable import CallableResult


class TestCallableResultData:
    """Tests for the wrapped payload."""

    def test_dict_payload(self):
        """data should be the decoded mapping."""
        result = CallableResult(data={"message": "HELLO"})
        assert result.data == {"message": "HELLO"}

    def test_list_payload(self):
        """data should be the decoded list."""
        result = CallableResult(data=[1, "two", None])
        assert result.data == [1, "two", None]

    def test_none_payload_default(self):
        """data defaults to None (trigger returned null)."""
        assert CallableResult().data is None

    def test_payload_is_not_copied(self):
        """The same object handed in is exposed, no transformation."""
        payload = {"nested": {"k": [1, 2]}}
        result = CallableResult(data=payload)
        assert result.data is payload


class TestCallableResultImmutability:
    """Tests that the result cannot be rebound after construction."""

    def test_cannot_reassign_data(self):
        result = CallableResult(data="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.data = "y"

    def test_equality_by_value(self):
        assert CallableResult(data={"a": 1}) == CallableResult(data={"a": 1})
        assert CallableResult(data={"a": 1}) != CallableResult(data={"a": 2})
