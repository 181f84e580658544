"""
Interning Store - process-wide hash-consing of graded bits

Every operator result is submitted to the store before it is handed back
to the caller. If a value with an equal fingerprint is already present,
that canonical instance is returned and the freshly computed candidate is
discarded; otherwise the candidate becomes canonical.

    canonical = store.intern(candidate)

The store never evicts: it retains every unique derived expression for
the lifetime of the process. Get-or-insert is serialized by one lock, so
expressions may be built from several threads at once.
"""

from __future__ import annotations
from typing import Dict, Iterable, Protocol, TypeVar
import logging
import threading

from .fingerprint import Fingerprint

logger = logging.getLogger(__name__)


class Fingerprinted(Protocol):
    """Anything carrying a structural fingerprint."""

    @property
    def fingerprint(self) -> Fingerprint: ...


T = TypeVar("T", bound=Fingerprinted)


class InterningStore:
    """
    Thread-safe get-or-insert table keyed by fingerprint equality.

    Args:
        canonical: Values registered up front (e.g. the TRUE/FALSE constants),
                   which then win over any later candidate with the same tag.
    """

    def __init__(self, canonical: Iterable[Fingerprinted] = ()):
        self._entries: Dict[Fingerprint, Fingerprinted] = {}
        self._lock = threading.Lock()
        self._next_report = 1
        for value in canonical:
            self._entries.setdefault(value.fingerprint, value)

    def intern(self, candidate: T) -> T:
        """Return the canonical instance for `candidate`'s fingerprint."""
        report = None
        with self._lock:
            existing = self._entries.get(candidate.fingerprint)
            if existing is not None:
                return existing
            self._entries[candidate.fingerprint] = candidate
            size = len(self._entries)
            if size >= self._next_report:
                report = size
                while self._next_report <= size:
                    self._next_report *= 2

        if report is not None:
            logger.debug(f"Interning store reached {report} entries")
        return candidate

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, value: Fingerprinted) -> bool:
        with self._lock:
            return value.fingerprint in self._entries

    def __repr__(self) -> str:
        return f"InterningStore(size={len(self)})"
