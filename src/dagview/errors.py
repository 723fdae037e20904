# errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class GraphError(Exception):
    """
    Raised when a workflow document can't be turned into a graph.

    `kind` names the failure, `details` carries whatever helps locate it
    in the document (template or task names).
    """
    kind: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)


@dataclass
class InvalidSpec(GraphError):
    """The workflow cannot be turned into a graph at all (e.g. no templates)."""
    kind: str = "InvalidSpec"
    message: str = "Could not generate graph. Provided workflow had no components."
