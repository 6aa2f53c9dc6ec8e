"""Tests for logging setup and request context."""

import logging

import structlog

from catalog import __version__
from catalog.config import Settings
from catalog.infra.logging import (
    add_service_context,
    bind_request_context,
    clear_request_context,
    library_levels,
)


def test_service_context_added_to_events():
    event = add_service_context(None, "info", {"event": "Products fetched"})

    assert event["service"] == "catalog-api"
    assert event["version"] == __version__
    assert event["environment"] in {"dev", "staging", "prod"}


def test_service_context_keeps_explicit_fields():
    event = add_service_context(None, "info", {"event": "x", "service": "seed-script"})

    assert event["service"] == "seed-script"


def test_library_levels_from_settings():
    config = Settings(_env_file=None, log_library_levels={"httpx": "error"}, debug=False)

    assert library_levels(config) == {"httpx": logging.ERROR}


def test_library_levels_show_sql_in_debug():
    config = Settings(_env_file=None, log_library_levels={"sqlalchemy.engine": "WARNING"}, debug=True)

    assert library_levels(config)["sqlalchemy.engine"] == logging.INFO


class TestRequestContext:
    """Tests for request-scoped log context."""

    def teardown_method(self):
        clear_request_context()

    def test_binds_given_request_id(self):
        request_id = bind_request_context("GET", "/api/products", "abc123")

        assert request_id == "abc123"
        assert structlog.contextvars.get_contextvars() == {
            "request_id": "abc123",
            "method": "GET",
            "path": "/api/products",
        }

    def test_generates_request_id(self):
        first = bind_request_context("GET", "/health")
        second = bind_request_context("GET", "/health")

        assert len(first) == 32
        assert first != second

    def test_clear(self):
        bind_request_context("GET", "/health")

        clear_request_context()

        assert structlog.contextvars.get_contextvars() == {}
