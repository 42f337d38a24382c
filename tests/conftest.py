"""Pytest configuration and fixtures for garbageman-embassy tests."""

import httpx
import pytest

from garbageman_embassy.config.settings import EmbassySettings
from garbageman_embassy.package import build_config_schema
from garbageman_embassy.platform.options import Option
from garbageman_embassy.platform.schema import ConfigurationSchema
from garbageman_embassy.platform.store import ConfigurationStore, InMemoryConfigurationRepository
from garbageman_embassy.procedures import EmbassyProcedures


@pytest.fixture
def package_schema():
    """The Garbageman package schema."""
    return build_config_schema()


@pytest.fixture
def port_schema():
    """Single integral port option, range [1024,65535], default 8080."""
    return ConfigurationSchema([
        Option.number("port", "Port", range="[1024,65535]", integral=True, default=8080),
    ])


@pytest.fixture
def repository():
    return InMemoryConfigurationRepository()


@pytest.fixture
def store(package_schema, repository):
    return ConfigurationStore(package_schema, repository, "0.1.0.1")


@pytest.fixture
def settings():
    return EmbassySettings(
        service_host="garbageman-nm.embassy",
        package_version="0.1.0.1",
        health_timeout_seconds=1.0,
    )


@pytest.fixture
def web_requests():
    """Requests seen by the stubbed web UI."""
    return []


@pytest.fixture
def web_ui_transport(web_requests):
    """httpx transport standing in for a healthy web UI."""
    def handler(request: httpx.Request) -> httpx.Response:
        web_requests.append(request)
        return httpx.Response(200, text="ok")
    return httpx.MockTransport(handler)


@pytest.fixture
def procedures(settings, repository, web_ui_transport):
    return EmbassyProcedures.create(settings=settings, repository=repository, transport=web_ui_transport)


@pytest.fixture
def sample_config(package_schema):
    """A valid configuration that differs from the defaults."""
    config = package_schema.default_value()
    config["api-port"] = 8181
    config["admin-password"] = "S3cret!Pass"
    config["log-level"] = "debug"
    config["advanced"]["peer-discovery-interval"] = 30
    return config
