"""
Opt-in logging for the matching engine.

Usage in library code:
    from patchforge._logging import resolve_logger

    def find_things(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("scanning %d lines", n)  # no-op unless enabled or logger passed

The engine never prints. Callers opt in by passing a logger or `log=True`.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Return the logger to use for one engine call.

    - A passed `logger` always wins.
    - `enabled=True` returns the named stdlib logger at `level`; records
      propagate to the root so host handlers (and pytest's caplog) see them.
    - Otherwise a NoopLogger that discards everything.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "patchforge")
        lg.setLevel(level)
        lg.propagate = True
        return lg
    return NoopLogger()
