"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

import structlog

from logmask.adapters.structlog.processors import CopyOnWriteMaskingProcessor, MaskingProcessor

if TYPE_CHECKING:
    from logmask.application.masking.engine import MaskingEngine


class JsonLoggerFactory:
    """Configure structlog and the stdlib root logger.

    When *engine* is given a masking processor runs before rendering, for
    structlog events and for records emitted through plain :mod:`logging`.
    Only the event dict entries named in *mask_keys* are masked; by default
    that is the rendered message (``event``), so values bound as keyword
    arguments such as ``card=...`` stay as they are unless listed.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        engine: MaskingEngine | None = None,
        *,
        copy_on_write: bool = False,
        json: bool = True,
        cache_logger_on_first_use: bool = True,
        mask_keys: Iterable[str] = ("event",),
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if engine is not None:
            masker_cls = CopyOnWriteMaskingProcessor if copy_on_write else MaskingProcessor
            shared_processors.append(masker_cls(engine, keys=mask_keys))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=cache_logger_on_first_use,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(
    level: int = logging.INFO,
    engine: MaskingEngine | None = None,
    *,
    copy_on_write: bool = False,
    json: bool = True,
    cache_logger_on_first_use: bool = True,
    mask_keys: Iterable[str] = ("event",),
) -> None:
    """Shorthand for :meth:`JsonLoggerFactory.configure`.

    Masks only the *mask_keys* entries of each event dict (``event`` by
    default); pass e.g. ``mask_keys=("event", "card")`` to cover values
    logged as keyword arguments.
    """
    JsonLoggerFactory.configure(
        level,
        engine,
        copy_on_write=copy_on_write,
        json=json,
        cache_logger_on_first_use=cache_logger_on_first_use,
        mask_keys=mask_keys,
    )


__all__ = ["JsonLoggerFactory", "configure_logging"]
