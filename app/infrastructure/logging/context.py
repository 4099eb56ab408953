"""Request context binding for structured logging.

Binds request-scoped values (request path, resolved locale) to every log
entry emitted while a request is being handled.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(request_path="/", locale="de"):
        logger.info("rendering_page")
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    request_path: Optional[str] = None,
    locale: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind request-scoped context to all logs within the block.

    Args:
        request_path: HTTP request path (e.g., "/products").
        locale: Active locale resolved for the request.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {}

    if request_path is not None:
        context["request_path"] = request_path

    if locale is not None:
        context["locale"] = locale

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
