"""In-memory dialog graph."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from sortium.config.loader import DialogLoader
from sortium.config.models import DialogNode
from sortium.core.errors import DialogLookupError

logger = logging.getLogger(__name__)


class DialogGraph:
    """Immutable collection of dialog nodes indexed by id.

    Edges are not checked when the graph is built: a dangling ``next_id``
    only fails when a conversation actually follows it.
    """

    def __init__(self, nodes: Iterable[DialogNode]):
        index: dict[str, DialogNode] = {}
        for node in nodes:
            if node.id in index:
                logger.warning(f"Duplicate dialog node id {node.id!r}; keeping first occurrence")
                continue
            index[node.id] = node
        self._nodes = index

    @classmethod
    def from_file(cls, path: Path | str) -> "DialogGraph":
        """Build a graph from a dialog YAML file."""
        return cls(DialogLoader.load(path))

    def lookup(self, node_id: str) -> DialogNode:
        """Return the node with the given id.

        Raises:
            DialogLookupError: If no node has that id.
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise DialogLookupError(node_id) from None

    @property
    def node_ids(self) -> list[str]:
        return list(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[DialogNode]:
        return iter(self._nodes.values())
