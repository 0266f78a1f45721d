"""
Structured logging utility for provider adapters.

Every adapter logs through a ``ProviderLogger`` so that records carry the
same ``provider``/``model``/``request_id`` fields. Logging is trace-level
only: failures are recorded at debug level and always re-raised.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Optional


class ProviderLogger:
    """Structured logger for provider adapters."""

    def __init__(self, provider_name: str):
        """
        Initialize logger for a specific provider.

        Args:
            provider_name: Name of the provider (e.g., "openai", "claude")
        """
        self.provider = provider_name
        self.logger = logging.getLogger(f"contentgen_sdk.providers.{provider_name}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"provider={self.provider}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                self._format_message(message, model=model, request_id=request_id, **kwargs)
            )

    def info(self, message: str, model: Optional[str] = None,
             request_id: Optional[str] = None, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    @contextmanager
    def track_request(self, method: str, model: str, request_id: Optional[str] = None):
        """
        Context manager to track request timing.

        Args:
            method: The operation being called (e.g., "generate_content")
            model: The model being used
            request_id: Optional request ID (generated if not provided)

        Yields:
            Dict with request metadata including request_id
        """
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]

        start_time = time.time()

        self.debug(
            f"Starting {method} request",
            model=model,
            request_id=request_id,
            method=method
        )

        metadata = {
            'request_id': request_id,
            'model': model,
            'method': method,
            'start_time': start_time
        }

        try:
            yield metadata

            duration = time.time() - start_time
            self.debug(
                f"Completed {method} request",
                model=model,
                request_id=request_id,
                method=method,
                duration_ms=int(duration * 1000)
            )

        except BaseException as e:
            duration = time.time() - start_time
            self.debug(
                f"Failed {method} request",
                model=model,
                request_id=request_id,
                method=method,
                duration_ms=int(duration * 1000),
                error_type=type(e).__name__
            )
            raise

    def log_usage(self, usage: Any, model: str, request_id: str):
        """Log token counters reported by the backend."""
        if usage is None:
            return
        self.debug(
            "Token usage",
            model=model,
            request_id=request_id,
            prompt_tokens=getattr(usage, "prompt_token_count", None),
            completion_tokens=getattr(usage, "candidates_token_count", None),
            total_tokens=getattr(usage, "total_token_count", None)
        )

    def log_streaming_metrics(self, chunks: int, total_chars: int, duration: float,
                              model: str, request_id: str):
        """Log streaming throughput once a stream is exhausted."""
        chars_per_second = total_chars / duration if duration > 0 else 0

        self.debug(
            "Streaming metrics",
            model=model,
            request_id=request_id,
            chunks=chunks,
            total_chars=total_chars,
            duration_ms=int(duration * 1000),
            chars_per_second=int(chars_per_second)
        )
