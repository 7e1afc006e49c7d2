"""Guest snapshot configuration and formatting of snapshot listings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pvekit.util import itob


@dataclass
class ConfigSnapshot:
    """Settings for creating a snapshot."""

    name: str = ""
    description: str = ""
    vm_state: bool = False

    def to_api_values(self) -> dict[str, Any]:
        """Return the parameters the API expects when creating a snapshot."""
        return {
            "snapname": self.name,
            "description": self.description,
            "vmstate": self.vm_state,
        }


@dataclass
class Snapshot:
    """A snapshot as shown when listing a guest's snapshots."""

    name: str = ""
    snap_time: int = 0
    description: str = ""
    vm_state: bool = False
    children: list[Snapshot] = field(default_factory=list)
    parent: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict, omitting empty fields other than the name."""
        result: dict[str, Any] = {"name": self.name}
        if self.snap_time:
            result["time"] = self.snap_time
        if self.description:
            result["description"] = self.description
        if self.vm_state:
            result["ram"] = True
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        if self.parent:
            result["parent"] = self.parent
        return result


def format_snapshots_list(task_response: Iterable[Mapping[str, Any]]) -> list[Snapshot]:
    """Turn the raw API snapshot entries into a flat list of Snapshot objects."""
    snapshots = []
    for entry in task_response:
        snapshot = Snapshot()
        if "description" in entry:
            snapshot.description = entry["description"]
        if "name" in entry:
            snapshot.name = entry["name"]
        if "parent" in entry:
            snapshot.parent = entry["parent"]
        if "snaptime" in entry:
            snapshot.snap_time = int(entry["snaptime"])
        if "vmstate" in entry:
            snapshot.vm_state = itob(int(entry["vmstate"]))
        snapshots.append(snapshot)
    return snapshots


def format_snapshots_tree(task_response: Iterable[Mapping[str, Any]]) -> list[Snapshot]:
    """Arrange the raw API snapshot entries as a tree of root snapshots.

    Each snapshot is attached to the first snapshot named as its parent; parent
    names are cleared afterwards.
    """
    snapshots = format_snapshots_list(task_response)
    for snapshot in snapshots:
        parent = next((s for s in snapshots if s.name == snapshot.parent), None)
        if parent is not None:
            parent.children.append(snapshot)
    roots = [s for s in snapshots if s.parent == ""]
    for snapshot in snapshots:
        snapshot.parent = ""
    return roots