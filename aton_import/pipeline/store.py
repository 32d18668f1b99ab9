"""JSON file store of AtoN entities keyed by identifier."""

from __future__ import annotations

from pathlib import Path

from aton_import.common.fs import read_json, write_json
from aton_import.common.models import AtonEntity


class JsonEntityStore:
    def __init__(self, path: Path) -> None:
        self.path = path
        self._entities: dict[str, AtonEntity] = {}
        if path.exists():
            payload = read_json(path)
            for item in payload.get("entities", []):
                entity = AtonEntity.from_dict(item)
                self._entities[entity.identifier] = entity

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._entities

    def get(self, identifier: str) -> AtonEntity | None:
        return self._entities.get(identifier)

    def upsert(self, entity: AtonEntity) -> None:
        self._entities[entity.identifier] = entity

    def save(self) -> Path:
        payload = {
            "entities": [self._entities[key].to_dict() for key in sorted(self._entities)],
        }
        write_json(self.path, payload)
        return self.path
