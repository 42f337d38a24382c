"""Feature tests for the derived properties view."""

import pytest

from garbageman_embassy.config.constants import REDACTED_PLACEHOLDER
from garbageman_embassy.platform.options import Option
from garbageman_embassy.platform.properties import PropertiesView


class TestPropertiesView:
    """Test cases for rendering the properties tab."""

    @pytest.fixture
    def view(self, package_schema):
        return PropertiesView(package_schema)

    def test_render_keys_by_display_name(self, view, sample_config):
        rendered = view.render(sample_config)

        assert list(rendered) == [
            "API Port",
            "UI Port",
            "Supervisor Port",
            "Admin Password",
            "Log Level",
            "Enable Tor Proxy",
            "Maximum Instances",
            "Advanced Settings",
        ]
        assert rendered["API Port"] == "8181"

    def test_sensitive_values_redacted(self, view, sample_config):
        rendered = view.render(sample_config)
        entries = view.render_entries(sample_config)

        assert rendered["Admin Password"] == REDACTED_PLACEHOLDER
        assert "S3cret!Pass" not in repr(rendered)
        assert "S3cret!Pass" not in repr(entries)

    def test_units_and_labels(self, view, sample_config):
        rendered = view.render(sample_config)

        assert rendered["Maximum Instances"] == "10 instances"
        assert rendered["Log Level"] == "Debug (Very Verbose)"
        assert rendered["Enable Tor Proxy"] == "Enabled"

    def test_nested_objects(self, view, sample_config):
        advanced = view.render(sample_config)["Advanced Settings"]

        assert advanced["Peer Discovery Interval"] == "30 minutes"
        assert advanced["Artifact Cache Size"] == "5 artifacts"
        assert advanced["Tor Proxy Port"] == "9050"

    def test_missing_values(self, view):
        rendered = view.render({})

        assert rendered["API Port"] == "Not set"
        assert rendered["Advanced Settings"]["Tor Proxy Host"] == "Not set"

    def test_render_entries_format(self, view, sample_config):
        entries = view.render_entries(sample_config)

        assert entries["API Port"] == {
            "type": "string",
            "value": "8181",
            "description": "Internal port for the API server (Fastify backend)",
            "copyable": False,
            "masked": False,
            "qr": False,
        }
        assert entries["Admin Password"]["masked"] is True
        assert entries["Admin Password"]["copyable"] is False
        assert entries["Advanced Settings"]["type"] == "object"
        assert entries["Advanced Settings"]["value"]["Tor Proxy Host"]["value"] == "127.0.0.1"

    def test_display_value_for_disabled_boolean(self):
        option = Option.boolean("enable-tor-proxy", "Enable Tor Proxy", default=True)

        assert PropertiesView.display_value(option, False) == "Disabled"

    def test_view_is_pure(self, view, sample_config):
        before = repr(sample_config)

        view.render(sample_config)
        view.render_entries(sample_config)

        assert repr(sample_config) == before
