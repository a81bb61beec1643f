"""Structured warnings collected during a generation run.

Soft problems never abort generation. Each one is logged and recorded here
so that callers (and tests) can inspect what degraded and by how much.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class Severity(enum.Enum):
    INFO = "info"
    WARNING = "warning"


class Category(enum.Enum):
    """What a diagnostic is about."""

    INPUT = "input"  # Tolerated anomaly in caller-supplied data
    SHORTFALL = "shortfall"  # Fewer bodies placed than rolled
    ZONE = "zone"  # Zone table could not supply a usable orbit
    ORBIT = "orbit"  # Satellite orbit search gave up
    PLACEMENT = "placement"  # Main world seated somewhere other than a bare slot


@dataclass
class Diagnostic:
    severity: Severity
    category: Category
    message: str
    data: dict = field(default_factory=dict)


class Diagnostics:
    """Ordered collection of diagnostics for one run."""

    def __init__(self, source: logging.Logger | None = None) -> None:
        self.entries: list[Diagnostic] = []
        self._logger = source or logger

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def warn(self, category: Category, message: str, **data) -> Diagnostic:
        entry = Diagnostic(Severity.WARNING, category, message, data)
        self.entries.append(entry)
        self._logger.warning("[%s] %s", category.value, message)
        return entry

    def note(self, category: Category, message: str, **data) -> Diagnostic:
        """Record a generation decision the caller may want to know about."""
        entry = Diagnostic(Severity.INFO, category, message, data)
        self.entries.append(entry)
        self._logger.info("[%s] %s", category.value, message)
        return entry

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.severity == Severity.WARNING]

    def by_category(self, category: Category) -> list[Diagnostic]:
        return [d for d in self.entries if d.category == category]
