#!/usr/bin/env python3

"""Progress tracking for declaration walks over a translation unit."""

import logging
from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from time import time

import psutil


class ProgressTracker:
    """
    Track and report extraction progress with per-table statistics.

    Provides contextual timing, declaration counting and table-entry
    counting for performance analysis and debugging.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.declaration_count = 0
        self.entry_counts: Counter[str] = Counter()
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    def count_declaration(self) -> None:
        """Increment the visited-declaration counter."""
        self.declaration_count += 1

    def count_entry(self, table: str) -> None:
        """Increment the counter for entries written into ``table``."""
        self.entry_counts[table] += 1

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time
        rate = self.declaration_count / total_time if total_time > 0 else 0

        self.logger.info(
            f"Walk complete: {self.declaration_count} declarations in {total_time:.2f}s "
            f"({rate:.1f} decls/s); structs={self.entry_counts['structs']}, "
            f"functions={self.entry_counts['functions']}, "
            f"constants={self.entry_counts['constants']}"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"

        return " > ".join(op[0] for op in self.operation_stack)

    def log_memory_usage(self) -> None:
        """Log the resident set size of the current process."""
        memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.declaration_count = 0
        self.entry_counts.clear()
        self.operation_stack.clear()
