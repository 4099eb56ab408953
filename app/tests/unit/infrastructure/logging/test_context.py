"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_request_context() context manager
- Context isolation and cleanup
"""

import pytest
import structlog

from infrastructure.logging.context import bind_request_context


@pytest.fixture(autouse=True)
def clean_contextvars():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_binds_request_path(self):
        """Request path is bound to context."""
        with bind_request_context(request_path="/products"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("request_path") == "/products"

    def test_binds_locale(self):
        """Resolved locale is bound to context."""
        with bind_request_context(locale="de"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("locale") == "de"

    def test_binds_extra_context(self):
        with bind_request_context(request_method="GET", client="tests"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("request_method") == "GET"
            assert ctx.get("client") == "tests"

    def test_omits_none_values(self):
        """Unset arguments are not bound."""
        with bind_request_context():
            ctx = structlog.contextvars.get_contextvars()
            assert "request_path" not in ctx
            assert "locale" not in ctx

    def test_context_cleared_after_block(self):
        """Bound keys are removed when the block exits."""
        with bind_request_context(request_path="/", locale="en"):
            pass

        ctx = structlog.contextvars.get_contextvars()
        assert "request_path" not in ctx
        assert "locale" not in ctx

    def test_context_cleared_on_exception(self):
        """Bound keys are removed even if the block raises."""
        with pytest.raises(RuntimeError):
            with bind_request_context(locale="de"):
                raise RuntimeError("boom")

        assert "locale" not in structlog.contextvars.get_contextvars()

    def test_nested_contexts_restore_outer_keys(self):
        """Inner keys are dropped while outer ones stay bound."""
        with bind_request_context(request_path="/outer"):
            with bind_request_context(locale="fr"):
                ctx = structlog.contextvars.get_contextvars()
                assert ctx["request_path"] == "/outer"
                assert ctx["locale"] == "fr"

            ctx = structlog.contextvars.get_contextvars()
            assert ctx["request_path"] == "/outer"
            assert "locale" not in ctx
