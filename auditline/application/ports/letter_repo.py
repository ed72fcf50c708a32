"""Port interfaces for read-only letter / addendum snapshots."""

from abc import ABC, abstractmethod

from auditline.domain.entities.source import Addendum, Letter


class LetterRepository(ABC):
    @abstractmethod
    async def get_all(self) -> list[Letter]:
        ...


class AddendumRepository(ABC):
    @abstractmethod
    async def get_all(self) -> list[Addendum]:
        ...
