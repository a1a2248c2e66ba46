"""A flat, row-based view of an expandable and checkable tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One entry of the tree."""

    key: str = ""
    title: str = ""
    depth: int = 0
    checked: bool = False
    is_expanded: bool = True
    children: list[Node] = field(default_factory=list, repr=False)
    parent: Node | None = field(default=None, repr=False)

    def has_children(self) -> bool:
        """Whether the node has any children."""
        return bool(self.children)

    def has_next_node_by_index(self, index: int) -> bool:
        """Whether the ancestor at depth ``index`` has a following sibling."""
        node = self
        for _ in range(self.depth - index - 1):
            if node.parent is None:
                raise ValueError(f"no ancestor at depth {index}")
            node = node.parent
        if node.parent is None:
            raise ValueError("node has no parent")
        siblings = node.parent.children
        return siblings.index(node) != len(siblings) - 1

    def is_checked(self) -> bool:
        """A leaf's own state; for a branch, whether every leaf below it is checked."""
        if not self.has_children():
            return self.checked
        return all(child.is_checked() for child in self.children)

    def hide_line_footer(self) -> bool:
        """Whether the connector line below this node should be hidden."""
        if self.parent is None:
            return False
        siblings = self.parent.children
        position = siblings.index(self)
        if position == len(siblings) - 1:
            return True
        return siblings[position + 1].has_children()

    def is_shown(self) -> bool:
        """Whether every ancestor is expanded."""
        node = self.parent
        while node is not None:
            if not node.is_expanded:
                return False
            node = node.parent
        return True


def _descendants(nodes: Iterable[Node]) -> Iterator[Node]:
    """Depth-first, pre-order walk over the given nodes and all below them."""
    stack = list(nodes)[::-1]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class TreeModel:
    """Visible rows of a tree, kept in display order."""

    def __init__(self) -> None:
        self._rows: list[Node] = []
        self._data_source: list[Node] = []
        self._root = Node()
        self.data_source_size = 0
        self.selection: list[Node] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, row: int) -> Node:
        if not 0 <= row < len(self._rows):
            raise IndexError(f"row out of range: {row}")
        return self._rows[row]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._rows)

    @property
    def root(self) -> Node:
        """The invisible node holding the top-level entries."""
        return self._root

    @property
    def data_source(self) -> list[Node]:
        """Every node of the tree in pre-order."""
        return list(self._data_source)

    def set_rows(self, rows: Iterable[Node]) -> None:
        """Replace the visible rows."""
        self._rows = list(rows)

    def remove_rows(self, row: int, count: int) -> None:
        """Remove ``count`` rows starting at ``row``; out-of-range requests do nothing."""
        if row < 0 or count <= 0 or row + count > len(self._rows):
            return
        del self._rows[row:row + count]

    def insert_rows(self, row: int, nodes: Sequence[Node]) -> None:
        """Insert nodes before ``row``; out-of-range or empty requests do nothing."""
        if row < 0 or row > len(self._rows) or not nodes:
            return
        self._rows[row:row] = list(nodes)

    def set_data_source(self, data: Iterable[Mapping[str, Any]]) -> None:
        """Build the tree from nested mappings with ``title``, ``key`` and ``children``."""
        self._data_source = []
        self._root = Node()
        stack: list[tuple[Mapping[str, Any], int, Node]] = [
            (item, 0, self._root) for item in reversed(list(data))
        ]
        while stack:
            item, depth, parent = stack.pop()
            node = Node(
                key=_text(item.get("key")),
                title=_text(item.get("title")),
                depth=depth,
                parent=parent,
            )
            parent.children.append(node)
            self._data_source.append(node)
            children = item.get("children") or []
            stack.extend((child, depth + 1, node) for child in reversed(list(children)))
        self._rows = list(self._data_source)
        self.data_source_size = len(self._data_source)

    def collapse(self, row: int) -> None:
        """Hide every row below ``row`` that lies deeper than it."""
        node = self[row]
        if not node.is_expanded:
            return
        node.is_expanded = False
        count = 0
        for other in self._rows[row + 1:]:
            if other.depth <= node.depth:
                break
            count += 1
        self.remove_rows(row + 1, count)

    def expand(self, row: int) -> None:
        """Show the descendants of ``row`` whose ancestors are all expanded."""
        node = self[row]
        if node.is_expanded:
            return
        node.is_expanded = True
        shown = [item for item in _descendants(node.children) if item.is_shown()]
        self.insert_rows(row + 1, shown)

    def drag_and_drop(self, drag_index: int, drop_index: int, is_drop_top_area: bool) -> None:
        """Move the row at ``drag_index`` above or below the row at ``drop_index``."""
        if not 0 <= drop_index < len(self._rows):
            return
        drag_item = self[drag_index]
        drop_item = self._rows[drop_index]

        destination = drop_index if is_drop_top_area else drop_index + 1
        if destination in (drag_index, drag_index + 1):
            return

        if drop_index > drag_index:
            target = drop_index - 1 if is_drop_top_area else drop_index
        else:
            target = drop_index if is_drop_top_area else drop_index + 1
        self._rows.insert(target, self._rows.pop(drag_index))

        if drag_item.parent is drop_item.parent:
            assert drag_item.parent is not None
            siblings = drag_item.parent.children
            src = siblings.index(drag_item)
            dest = siblings.index(drop_item)
            if drop_index > drag_index:
                target = dest - 1 if is_drop_top_area else dest
            else:
                target = dest if is_drop_top_area else dest + 1
            siblings.insert(target, siblings.pop(src))
            return

        assert drag_item.parent is not None and drop_item.parent is not None
        src_children = drag_item.parent.children
        dest_children = drop_item.parent.children
        src = src_children.index(drag_item)
        dest = dest_children.index(drop_item)
        drag_item.depth = drop_item.depth
        drag_item.parent = drop_item.parent
        for descendant in _descendants(drag_item.children):
            assert descendant.parent is not None
            descendant.depth = descendant.parent.depth + 1
        del src_children[src]
        dest_children.insert(dest if is_drop_top_area else dest + 1, drag_item)

    def check_row(self, row: int, checked: bool) -> None:
        """Check or uncheck a leaf, or every leaf below a branch, and refresh the selection."""
        node = self[row]
        if node.has_children():
            for item in _descendants(node.children):
                if not item.has_children():
                    item.checked = checked
        else:
            if node.checked == checked:
                return
            node.checked = checked
        self.selection = [
            item for item in self._data_source if not item.has_children() and item.checked
        ]

    def hit_has_children_expanded(self, row: int) -> bool:
        """Whether the row is an expanded branch."""
        node = self[row]
        return node.has_children() and node.is_expanded

    def all_expand(self) -> None:
        """Expand every branch and show every node."""
        rows = []
        for node in _descendants(self._root.children):
            if node.has_children():
                node.is_expanded = True
            rows.append(node)
        self._rows = rows

    def all_collapse(self) -> None:
        """Collapse every branch and show only the top level."""
        for node in _descendants(self._root.children):
            if node.has_children():
                node.is_expanded = False
        self._rows = list(self._root.children)