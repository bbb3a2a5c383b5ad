"""
LayoutEditor - editing session over SiteConfig.home_layout.

Key behaviors:
- add/move/toggle/delete address sections by index, payload edits by id
- new ids are "{type}_{millis}_{counter}"; the per-session counter keeps two
  additions in the same clock tick apart, and loaded ids are never reissued
- moving past either end of the sequence is a no-op
- deleting the selected section clears the selection
- the session works on its own copy; nothing reaches the ConfigStore until
  to_config_patch() is saved
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from typing import Any, Literal

from storefront.domain.defaults import default_home_layout
from storefront.domain.entities import LayoutSection
from storefront.domain.errors import SectionNotFoundError
from storefront.domain.sections import FieldSpec, default_payload, edit_schema, merge_payload
from storefront.ports.clock import ClockPort

Direction = Literal["up", "down"]


class SectionIdFactory:
    """Issues section ids that never collide within a session."""

    def __init__(self, clock: ClockPort, taken: Iterable[str] = ()) -> None:
        self._clock = clock
        self._counter = itertools.count(1)
        self._issued: set[str] = set(taken)

    def reserve(self, section_id: str) -> None:
        self._issued.add(section_id)

    def is_taken(self, section_id: str) -> bool:
        return section_id in self._issued

    def next_id(self, section_type: str) -> str:
        millis = int(self._clock.now_utc().timestamp() * 1000)
        while True:
            candidate = f"{section_type}_{millis}_{next(self._counter)}"
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate


class LayoutEditor:
    def __init__(self, sections: Iterable[LayoutSection], clock: ClockPort) -> None:
        self._sections: list[LayoutSection] = [s.model_copy(deep=True) for s in sections]
        self._ids = SectionIdFactory(clock, (s.id for s in self._sections))
        self.selected_id: str | None = None

    @property
    def sections(self) -> list[LayoutSection]:
        return [s.model_copy(deep=True) for s in self._sections]

    def __len__(self) -> int:
        return len(self._sections)

    def _index_of(self, section_id: str) -> int:
        for i, section in enumerate(self._sections):
            if section.id == section_id:
                return i
        raise SectionNotFoundError(f"No section with id '{section_id}'")

    def get(self, section_id: str) -> LayoutSection:
        return self._sections[self._index_of(section_id)].model_copy(deep=True)

    def add_section(self, section_type: str) -> LayoutSection:
        """
        Append a new section of `section_type` with its default payload.

        Raises:
            UnknownSectionTypeError: If the type has no registered payload.
        """
        data = default_payload(section_type)
        section = LayoutSection(
            id=self._ids.next_id(section_type),
            type=section_type,
            is_visible=True,
            data=data,
        )
        self._sections.append(section)
        return section.model_copy(deep=True)

    def move_section(self, index: int, direction: Direction) -> bool:
        """
        Swap the section at `index` with its neighbour.

        Returns False (and leaves the order alone) at either boundary.
        """
        if direction not in ("up", "down"):
            raise ValueError(f"Unknown direction: {direction}")
        target = index - 1 if direction == "up" else index + 1
        if not (0 <= index < len(self._sections)) or not (0 <= target < len(self._sections)):
            return False
        self._sections[index], self._sections[target] = self._sections[target], self._sections[index]
        return True

    def toggle_visibility(self, index: int) -> bool:
        """Flip is_visible in place. Returns the new value."""
        section = self._sections[index]
        section.is_visible = not section.is_visible
        return section.is_visible

    def delete_section(self, index: int) -> LayoutSection:
        removed = self._sections.pop(index)
        if self.selected_id == removed.id:
            self.selected_id = None
        return removed

    def update_section_field(self, section_id: str, key: str, value: Any) -> LayoutSection:
        """
        Merge one payload key into the section found by id.

        Raises:
            SectionNotFoundError: If no section has this id.
            SectionFieldError: If the key is not in the type's schema or the value is invalid.
        """
        section = self._sections[self._index_of(section_id)]
        section.data = merge_payload(section.type, section.data, key, value)
        return section.model_copy(deep=True)

    def select(self, section_id: str | None) -> None:
        if section_id is not None:
            self._index_of(section_id)
        self.selected_id = section_id

    def edit_schema(self, section_id: str) -> list[FieldSpec]:
        """Editable fields for the section with this id."""
        return edit_schema(self._sections[self._index_of(section_id)].type)

    def reset(self) -> None:
        """
        Replace the layout with the default section list.

        Default sections keep their canonical ids unless this session has
        already issued them, in which case they get fresh ones.
        """
        self._sections = default_home_layout()
        for section in self._sections:
            if self._ids.is_taken(section.id):
                section.id = self._ids.next_id(section.type)
            else:
                self._ids.reserve(section.id)
        self.selected_id = None

    def to_config_patch(self) -> dict[str, Any]:
        """Partial update for ConfigStore.save()."""
        return {"homeLayout": [s.model_dump(by_alias=True, mode="json") for s in self._sections]}
