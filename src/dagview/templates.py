# templates.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from .model import NodeType, Template


@dataclass(frozen=True)
class TemplateEntry:
    node_type: NodeType
    template: Template


class TemplateIndex:
    """
    Read-only name -> TemplateEntry lookup, built once before traversal.

    Templates that are neither a container nor a dag are not indexed and
    can't be resolved later. Duplicate names: last one wins.
    """

    def __init__(self, entries: Dict[str, TemplateEntry]):
        self._entries = dict(entries)

    def lookup(self, name: str | None) -> Optional[TemplateEntry]:
        if name is None:
            return None
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def classify(template: Template) -> Optional[NodeType]:
    if template.container:
        return "container"
    if template.dag:
        return "dag"
    return None


def build_template_index(templates: Iterable[Template]) -> TemplateIndex:
    entries: Dict[str, TemplateEntry] = {}
    for template in templates:
        node_type = classify(template)
        if node_type is None:
            continue
        entries[template.name] = TemplateEntry(node_type=node_type, template=template)
    return TemplateIndex(entries)
