"""Observability helpers for instrumenting engine operations."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from stylist_app.logging_config import (
    ensure_correlation_id,
    get_logger,
    log_event,
    scrub_fields,
)

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        if isinstance(value, (list, tuple)):
            preview[key] = f"<{len(value)} entries>"
        else:
            preview[key] = value
    return scrub_fields(preview)


def instrument_operation(
    operation_name: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap a callable to emit structured logs and optional payload validation.

    When ``input_model`` is given the keyword arguments are validated against it
    and replaced by the model's aliased dump before the call.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            start = time.perf_counter()

            if input_model:
                try:
                    validated = input_model.model_validate(kwargs)
                    kwargs = validated.model_dump(by_alias=True)
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "operation_validation_failed",
                        operation=operation_name,
                        correlation_id=correlation_id,
                        error_count=exc.error_count(),
                    )
                    if on_validation_error:
                        return on_validation_error(exc)
                    raise

            log_event(
                LOGGER,
                logging.INFO,
                "operation_started",
                operation=operation_name,
                correlation_id=correlation_id,
                kwargs=_preview_kwargs(kwargs),
            )
            try:
                result = func(*args, **kwargs)
            except Exception:
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "operation_failed",
                    operation=operation_name,
                    correlation_id=correlation_id,
                    duration_ms=duration_ms,
                    exc_info=True,
                )
                raise
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            log_event(
                LOGGER,
                logging.INFO,
                "operation_completed",
                operation=operation_name,
                correlation_id=correlation_id,
                duration_ms=duration_ms,
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
