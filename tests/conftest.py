"""Pytest fixtures for all tests."""

import pytest

from config import StampingConfig
from stamping.rewriter import NestedCreateRewriter


@pytest.fixture
def prefix_map():
    """Prefix table for a small blog/shop schema."""
    return {
        "User": "usr_",
        "Profile": "prof_",
        "Post": "post_",
        "Tag": "tag_",
        "Category": "cat_",
        "Comment": "cmt_",
        "Order": "ord_",
        "OrderItem": "oi_",
        "Product": "prod_",
        "X": "x_",
    }


@pytest.fixture
def stamping_config(prefix_map):
    """Default stamping config with nested processing on."""
    return StampingConfig(prefix_map=prefix_map)


@pytest.fixture
def rewriter(stamping_config):
    """Rewriter over the test schema."""
    return NestedCreateRewriter(stamping_config)


@pytest.fixture
def flat_rewriter(prefix_map):
    """Rewriter with nested processing disabled."""
    return NestedCreateRewriter(StampingConfig(prefix_map=prefix_map, process_nested=False))
