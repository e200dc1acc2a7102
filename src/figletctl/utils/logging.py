"""Logging utilities for figletctl."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on every call.
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics from rendering runs."""

    rendered_count: int = 0
    failed_count: int = 0
    durations_ms: list[float] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def avg_render_time_ms(self) -> float | None:
        """Average render time, or None if nothing was rendered."""
        if not self.durations_ms:
            return None
        return sum(self.durations_ms) / len(self.durations_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to stderr and, optionally, a file.

    Standard output is reserved for figures, so no handler ever writes there.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for stderr output
        file_level: Logging level for file output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    root_logger.setLevel(min(handler.level for handler in _installed_handlers))
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("figletctl")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking font loading and rendering."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("figletctl")
        self._stats = RenderStats()

    def log_font_loaded(self, font_name: str, height: int, glyph_count: int) -> None:
        """Log a successfully loaded font."""
        self._logger.debug(
            "Font loaded",
            font=font_name,
            height=height,
            glyphs=glyph_count,
        )

    def log_render_complete(
        self,
        message: str,
        height: int,
        width: int,
        duration_ms: float,
    ) -> None:
        """Log a successful render."""
        self._logger.info(
            "Figure rendered",
            chars=len(message),
            height=height,
            width=width,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.durations_ms.append(duration_ms)

    def log_render_failed(self, message: str, error: Exception) -> None:
        """Log a rejected or failed render."""
        self._logger.info(
            "Render failed",
            chars=len(message),
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_count += 1
        self._stats.errors.append((message, str(error)))

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
