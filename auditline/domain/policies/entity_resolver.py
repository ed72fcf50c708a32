"""EntityResolver — cluster raw name spellings into canonical auditors.

Greedy single pass over tokens in order of first appearance:

  1. exact:  the normalized token is already a known member
  2. prefix: an auditor key is a prefix of the token or vice versa
             (truncated "Andre" vs. full "Andre Perkasa Ginting");
             a strictly longer variant renames the auditor in place
             and moves it to the end of the scan order
  3. first:  the first names match
  4. new:    otherwise a fresh auditor is created

The result depends on processing order; this is accepted behaviour. The
resolver is a plain object owned by the caller, one per computation.
"""

from __future__ import annotations

import logging

from auditline.domain.entities.auditor import Auditor
from auditline.domain.policies.name_normalizer import (
    clean_display_name,
    normalize_name,
)

logger = logging.getLogger(__name__)


class EntityResolver:
    def __init__(self) -> None:
        self._auditors: dict[int, Auditor] = {}
        self._by_member: dict[str, int] = {}
        self._next_id = 1

    def resolve(self, raw: str | None) -> Auditor | None:
        """Return the auditor for *raw*, creating one if needed.

        Returns None when the token is not a name (academic title, too short).
        """
        key = normalize_name(raw)
        if key is None:
            return None
        display = clean_display_name(raw)

        # 1. Exact match
        auditor_id = self._by_member.get(key)
        if auditor_id is not None:
            return self._auditors[auditor_id]

        # 2. Prefix containment, either direction
        for auditor in self._auditors.values():
            if auditor.key.startswith(key) or key.startswith(auditor.key):
                if len(display) > len(auditor.display_name):
                    logger.debug("Renaming auditor %r -> %r", auditor.display_name, display)
                    auditor.rename(display, key)
                    # a renamed auditor moves to the end of the scan order
                    self._auditors[auditor.id] = self._auditors.pop(auditor.id)
                return self._register(auditor, key)

        # 3. First-name match
        first = key.split(" ", 1)[0]
        for auditor in self._auditors.values():
            if auditor.first_token == first:
                logger.debug("First-name match %r -> %r", display, auditor.display_name)
                return self._register(auditor, key)

        # 4. New identity
        auditor = Auditor(id=self._next_id, display_name=display, key=key)
        self._next_id += 1
        self._auditors[auditor.id] = auditor
        return self._register(auditor, key)

    def get(self, auditor_id: int) -> Auditor | None:
        return self._auditors.get(auditor_id)

    def auditors(self) -> list[Auditor]:
        """Live auditors in scan order: creation order, renamed ones last."""
        return list(self._auditors.values())

    def _register(self, auditor: Auditor, key: str) -> Auditor:
        auditor.members.add(key)
        self._by_member[key] = auditor.id
        return auditor
