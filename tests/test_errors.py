"""Unit tests for the error taxonomy."""

import re

from core.errors import BaseKsuidError, ConfigError, MalformedIdentifier, PrefixNotDefined
from utils import base62


class TestErrors:
    """Tests for tracked errors."""

    def test_error_has_tracking_id(self):
        """Every error carries a KSUID and a timestamp."""
        error = BaseKsuidError("boom")
        assert re.match(r"^[0-9A-Za-z]{27}$", error.error_id)
        assert error.timestamp.endswith("Z")
        assert str(error) == f"[{error.error_id}] boom"

    def test_prefix_not_defined_message(self):
        """Message names the offending entity type."""
        error = PrefixNotDefined("Widget")
        assert 'Prefix not defined or invalid for model "Widget".' in str(error)
        assert error.entity_type == "Widget"
        assert error.context == {"entity_type": "Widget"}

    def test_config_error_default_message(self):
        """ConfigError defaults to the prefix map message."""
        error = ConfigError()
        assert error.message == "A valid prefixMap must be provided."

    def test_config_error_field_context(self):
        """Field is recorded in context."""
        assert ConfigError("bad", field="prefix_fn").context == {"field": "prefix_fn"}

    def test_malformed_identifier_reexported(self):
        """core.errors exposes the codec error."""
        assert MalformedIdentifier is base62.MalformedIdentifier
