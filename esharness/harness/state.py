"""Per-run provisioning state: a one-way chain from client creation to flush."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Tuple


class ProvisioningState(enum.IntEnum):
    UNINITIALIZED = 0
    CLIENT_READY = 1
    INDICES_CLEANED = 2
    INDICES_CREATED = 3
    DOCUMENTS_SEEDED = 4
    FLUSHED = 5


@dataclass
class FixtureRun:
    """What a setup call reached and which documents it wrote, in write order."""

    state: ProvisioningState = ProvisioningState.UNINITIALIZED
    documents: List[Tuple[str, str, str]] = field(default_factory=list)

    def advance(self, state: ProvisioningState) -> None:
        if state <= self.state:
            raise ValueError(f"cannot move from {self.state.name} back to {state.name}")
        self.state = state

    def record(self, index: str, doc_type: str, doc_id: str) -> None:
        self.documents.append((index, doc_type, doc_id))

    def ids(self, doc_type: str) -> List[str]:
        return [doc_id for _, t, doc_id in self.documents if t == doc_type]


__all__ = ["ProvisioningState", "FixtureRun"]
