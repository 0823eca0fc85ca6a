"""Shared fixtures for jsontree-core tests."""

import pytest

from jsontree_core import JArray, JObject, JPrimitive, Null


@pytest.fixture
def sample_tree():
    """Object{"a": 1, "b": Null, "c": [2, Null]}"""
    return JObject({
        "a": JPrimitive(1),
        "b": Null,
        "c": JArray([JPrimitive(2), Null]),
    })
