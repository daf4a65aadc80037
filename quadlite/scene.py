"""A scene of nodes updated and drawn every frame, addressed by generational handles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TypeVar

from quadlite.coroutines import Coroutines

N = TypeVar("N")


@dataclass(frozen=True)
class Handle:
    """Reference to a node; stale once the node is deleted."""

    index: int | None = None
    generation: int = 0

    @classmethod
    def null(cls) -> Handle:
        """A handle that refers to no node."""
        return cls()

    @property
    def is_null(self) -> bool:
        return self.index is None


class Node:
    """Base class for scene nodes; override the hooks that are needed."""

    handle: Handle = Handle()

    def ready(self, scene: Scene) -> None:
        """Called once, on the first scene update after the node was added."""

    def update(self, scene: Scene) -> None:
        """Called on every scene update."""

    def draw(self, scene: Scene) -> None:
        """Called on every scene update, after all nodes were updated."""


@dataclass
class _Cell:
    node: Node
    generation: int
    permanent: bool = False
    initialized: bool = False
    used: bool = False


class Scene:
    """Holds nodes and runs their hooks; a node being run cannot be fetched."""

    def __init__(self, coroutines: Coroutines | None = None) -> None:
        self._cells: list[_Cell | None] = []
        self._free: list[tuple[int, int]] = []
        self._dense: list[tuple[int, int]] = []
        self._pending_removals: list[tuple[int, int]] = []
        self._coroutines = coroutines

    def add_node(self, node: Node) -> Handle:
        """Add ``node`` and return its handle, also stored as ``node.handle``."""
        if not isinstance(node, Node):
            raise TypeError(f"{type(node).__name__} is not a Node")
        if self._free:
            index, generation = self._free.pop(0)
            generation += 1
        else:
            index, generation = len(self._cells), 0
            self._cells.append(None)
        self._cells[index] = _Cell(node, generation)
        handle = Handle(index, generation)
        node.handle = handle
        self._dense.append((index, generation))
        return handle

    def _cell(self, handle: Handle) -> _Cell | None:
        if handle.index is None or not 0 <= handle.index < len(self._cells):
            return None
        cell = self._cells[handle.index]
        if cell is None or cell.generation != handle.generation:
            return None
        return cell

    def try_get_node(self, handle: Handle) -> Node | None:
        """The node, or None if it was deleted or is currently being run."""
        cell = self._cell(handle)
        if cell is None or cell.used:
            return None
        return cell.node

    def get_node(self, handle: Handle) -> Node:
        """The node; raise LookupError if it was deleted or is currently being run."""
        node = self.try_get_node(handle)
        if node is None:
            raise LookupError(f"node {handle} is deleted or in use")
        return node

    def delete(self, handle: Handle) -> None:
        """Remove the node; deleting an already removed node does nothing."""
        if handle.index is None:
            raise ValueError("cannot delete through a null handle")
        if not 0 <= handle.index < len(self._cells):
            raise LookupError(f"no node slot {handle.index}")
        cell = self._cells[handle.index]
        if cell is None:
            return
        if cell.generation != handle.generation:
            raise ValueError(f"stale handle {handle}")
        key = (handle.index, handle.generation)
        self._cells[handle.index] = None
        self._pending_removals.append(key)
        self._free.append(key)

    def persist(self, handle: Handle) -> None:
        """Keep the node across :meth:`clear`."""
        cell = self._cell(handle)
        if cell is None:
            raise LookupError(f"node {handle} does not exist")
        cell.permanent = True

    def clear(self) -> None:
        """Remove every node not persisted and stop the scene's coroutines."""
        if self._coroutines is not None:
            self._coroutines.stop_all()
        for index, cell in enumerate(self._cells):
            if cell is None or cell.permanent:
                continue
            if cell.used:
                raise RuntimeError("cannot clear the scene while a node is in use")
            key = (index, cell.generation)
            self._dense.remove(key)
            self._cells[index] = None
            self._free.append(key)

    def _live(self) -> Iterator[_Cell]:
        for index, generation in self._dense[:]:
            cell = self._cells[index]
            if cell is None or cell.generation != generation or cell.used:
                continue
            yield cell

    def _run(self, cell: _Cell, hook: str) -> None:
        cell.used = True
        try:
            getattr(cell.node, hook)(self)
        finally:
            cell.used = False

    def update(self) -> None:
        """Run ready on new nodes, then update and draw on all of them."""
        for cell in self._live():
            if not cell.initialized:
                cell.initialized = True
                self._run(cell, "ready")
        for cell in self._live():
            self._run(cell, "update")
        for cell in self._live():
            self._run(cell, "draw")
        for key in self._pending_removals:
            if key in self._dense:
                self._dense.remove(key)
        self._pending_removals.clear()

    def all_nodes(self) -> Iterator[Node]:
        """Every node not currently being run, in insertion order."""
        for cell in self._live():
            yield cell.node

    def find_node_by_type(self, kind: type[N]) -> N | None:
        """The first node that is an instance of ``kind``, or None."""
        return next((node for node in self.all_nodes() if isinstance(node, kind)), None)

    def find_nodes_by_type(self, kind: type[N]) -> list[N]:
        """All nodes that are instances of ``kind``."""
        return [node for node in self.all_nodes() if isinstance(node, kind)]