"""Abstract store for the Document aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Union

from storefront.domain.model.document import Document


@dataclass(frozen=True)
class Loaded:
    """The document was read cleanly (or created because it was absent)."""

    document: Document
    recovered: bool = False


@dataclass(frozen=True)
class Recovered:
    """The stored document was unusable; *document* is an empty stand-in.

    The stand-in is not written back. A later save repairs the file.
    """

    document: Document
    cause: str
    recovered: bool = True


LoadResult = Union[Loaded, Recovered]


class DocumentStore(ABC):

    @abstractmethod
    def load(self) -> LoadResult:
        """Read the whole document. Never raises."""

    @abstractmethod
    def save(self, document: Document) -> bool:
        """Overwrite the whole document. Returns False on failure, never raises."""

    @abstractmethod
    def lock(self) -> AbstractContextManager:
        """Serialize a load -> mutate -> save cycle against other writers."""
