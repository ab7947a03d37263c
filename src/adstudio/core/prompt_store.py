"""Ephemeral storage for base prompts.

Every batch call stores the base prompt of each of its five variants under
the variant id.  A later regenerate call looks the base prompt up again by
that id and applies the user's tweak to it.

The store is an explicit capability (:class:`PromptStore`) injected into the
image service.  The only implementation shipped is
:class:`InMemoryPromptStore`: a process-lifetime dictionary guarded by a
lock.  Entries are never evicted and are lost when the process restarts.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from adstudio.core.errors import PromptNotFoundError
from adstudio.core.records import StoredBasePrompt

logger = logging.getLogger(__name__)


class PromptStore(ABC):
    """Key-value association from variant id to its stored base prompt."""

    @abstractmethod
    def put(self, base_prompt_id: str, record: StoredBasePrompt) -> None:
        """Insert or overwrite the record stored under *base_prompt_id*."""

    @abstractmethod
    def get(self, base_prompt_id: str) -> StoredBasePrompt:
        """Return the record stored under *base_prompt_id*.

        Raises:
            PromptNotFoundError: If no record exists for the id.
        """


class InMemoryPromptStore(PromptStore):
    """Thread-safe in-memory prompt store with no eviction."""

    def __init__(self) -> None:
        self._records: dict[str, StoredBasePrompt] = {}
        self._lock = threading.Lock()

    def put(self, base_prompt_id: str, record: StoredBasePrompt) -> None:
        with self._lock:
            self._records[base_prompt_id] = record
        logger.debug(f"Stored base prompt {base_prompt_id} ({record.style})")

    def get(self, base_prompt_id: str) -> StoredBasePrompt:
        with self._lock:
            record = self._records.get(base_prompt_id)
        if record is None:
            raise PromptNotFoundError(base_prompt_id)
        return record

    def __contains__(self, base_prompt_id: object) -> bool:
        with self._lock:
            return base_prompt_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
