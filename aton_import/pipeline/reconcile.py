"""Reconciliation of freshly imported entities with already stored ones."""

from __future__ import annotations

from typing import Iterable

from aton_import.common.constants import TAG_TYPE
from aton_import.common.errors import ContractError
from aton_import.common.models import AtonEntity


def in_namespace(key: str, namespace: str) -> bool:
    return key == namespace or key.startswith(f"{namespace}:")


def reconcile(
    existing: AtonEntity | None,
    candidate: AtonEntity,
    *,
    owned_namespace: str,
    guarded_tags: Iterable[str] = (TAG_TYPE,),
) -> AtonEntity:
    """Merge ``candidate`` into ``existing`` and return the entity to persist.

    The steps run in a fixed order:

    1. tags listed in ``guarded_tags`` that ``existing`` already carries are
       dropped from the candidate, so another importer keeps ownership;
    2. every tag of ``existing`` in ``owned_namespace`` is removed, so
       sub-tags the candidate no longer produces do not linger;
    3. the remaining candidate tags are laid over what is left.

    Neither argument is modified. Identity and version come from
    ``existing``; position, timestamp and attribution from ``candidate``.
    """
    if existing is None:
        return candidate
    if existing.identifier != candidate.identifier:
        raise ContractError(
            f"Cannot reconcile {candidate.identifier!r} into entity {existing.identifier!r}"
        )

    incoming = dict(candidate.tags)
    for key in guarded_tags:
        if existing.tag(key) is not None:
            incoming.pop(key, None)

    merged = existing.copy(
        lat=candidate.lat,
        lon=candidate.lon,
        timestamp=candidate.timestamp,
        user=candidate.user,
        uid=candidate.uid,
        changeset=candidate.changeset,
        visible=candidate.visible,
    )
    merged.remove_tags(lambda key: in_namespace(key, owned_namespace))
    for key, value in incoming.items():
        merged.update_tag(key, value)
    return merged
