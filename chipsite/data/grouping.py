"""Group a chip's flat specs into display tables."""

from collections.abc import Mapping, Sequence
from typing import Any

from ..core.models import GroupedField, GroupedSpecGroup, SpecGroup


def group_specs(
    specs: Mapping[str, Any] | None,
    groups: Sequence[SpecGroup],
) -> list[GroupedSpecGroup]:
    """Lay out ``specs`` according to ``groups``.

    Groups and fields come out in definition order. Fields whose value is
    ``None`` or missing are dropped, but ``0``, ``False`` and ``""`` are kept.
    Groups left without fields are dropped. Anything other than a mapping
    counts as no specs.
    """
    if not isinstance(specs, Mapping):
        specs = {}
    result: list[GroupedSpecGroup] = []

    for group in groups:
        fields = [
            GroupedField(key=field.key, label=field.label, value=specs[field.key])
            for field in group.fields
            if specs.get(field.key) is not None
        ]
        if fields:
            result.append(GroupedSpecGroup(name=group.name, fields=fields))

    return result
