"""Snake body: a linked run of segments with a mirrored occupancy set."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from .grid import Grid
from .state import Heading, Position

logger = logging.getLogger(__name__)


class Segment:
    """One occupied cell.

    ``prev`` points toward the head and ``next`` toward the tail. Both hold
    segment ids owned by the enclosing :class:`Body`, never objects.
    """

    __slots__ = ("position", "prev", "next")

    def __init__(self, position: Position, prev: int | None = None, next: int | None = None):
        self.position = position
        self.prev = prev
        self.next = next

    def __repr__(self) -> str:
        return f"Segment({self.position}, prev={self.prev}, next={self.next})"


class Body:
    """The snake.

    Segments live in an arena keyed by a stable integer id; ``head_id`` and
    ``tail_id`` index into it. ``_occupied`` mirrors the set of segment
    positions and every mutation updates both together.
    """

    def __init__(self, start: Position, heading: Heading = Heading.RIGHT) -> None:
        self._segments: dict[int, Segment] = {}
        self._ids = 0
        self._occupied: set[Position] = set()
        self._heading = heading
        self.head_id = self.tail_id = self._alloc(Segment(start))
        self._occupied.add(start)

    @classmethod
    def from_positions(cls, positions: Iterable[Position], heading: Heading = Heading.RIGHT) -> Body:
        """Build a body from head-first positions, each adjacent to the last."""
        positions = [Position(*p) for p in positions]
        if not positions:
            raise ValueError("Body needs at least one position.")
        if len(set(positions)) != len(positions):
            raise ValueError("Body positions must be distinct.")
        body = cls(positions[0], heading)
        for prev, pos in zip(positions, positions[1:]):
            Heading.between(prev, pos)  # raises ValueError unless adjacent
            body._append_tail(pos)
        return body

    def _alloc(self, segment: Segment) -> int:
        seg_id = self._ids
        self._ids += 1
        self._segments[seg_id] = segment
        return seg_id

    def _append_tail(self, pos: Position) -> None:
        new_id = self._alloc(Segment(pos, prev=self.tail_id))
        self._segments[self.tail_id].next = new_id
        self.tail_id = new_id
        self._occupied.add(pos)

    @property
    def head(self) -> Segment:
        return self._segments[self.head_id]

    @property
    def tail(self) -> Segment:
        return self._segments[self.tail_id]

    def segment(self, seg_id: int) -> Segment:
        return self._segments[seg_id]

    @property
    def current_heading(self) -> Heading:
        return self._heading

    def set_heading(self, heading: Heading) -> None:
        """Change heading, ignoring a reversal onto the neck."""
        if heading == self._heading.opposite:
            logger.debug("Rejected reversal %s -> %s", self._heading.name, heading.name)
            return
        self._heading = heading

    def peek_next_head_position(self) -> Position:
        return self.head.position.moved(self._heading)

    def advance(self) -> None:
        """Slide one cell forward: new head in front, old tail dropped."""
        new_pos = self.peek_next_head_position()
        new_id = self._alloc(Segment(new_pos, next=self.head_id))
        self.head.prev = new_id
        self.head_id = new_id

        old_tail = self._segments.pop(self.tail_id)
        self._occupied.discard(old_tail.position)
        self._occupied.add(new_pos)
        self.tail_id = old_tail.prev
        self.tail.next = None

    def grow_tail(
        self,
        grid: Grid,
        is_occupied_elsewhere: Callable[[Position], bool] | None = None,
    ) -> Position | None:
        """Add one segment behind the tail.

        Candidates are tried in order: straight on from the tail's local
        direction of travel, then its first and second orthogonal. A
        single-segment body only tries the reverse of its heading. Returns
        the new tail position, or ``None`` when no candidate is free.
        """
        tail = self.tail
        if len(self) == 1:
            candidates = [self._heading.opposite]
        else:
            tail_heading = Heading.between(self.segment(tail.prev).position, tail.position)
            candidates = [tail_heading, *tail_heading.orthogonals]

        for heading in candidates:
            pos = tail.position.moved(heading)
            if not grid.is_valid(pos) or pos in self._occupied:
                continue
            if is_occupied_elsewhere is not None and is_occupied_elsewhere(pos):
                continue
            self._append_tail(pos)
            logger.debug("Grew tail to %s (length %d)", pos, len(self))
            return pos

        logger.warning("No free cell behind tail at %s; growth skipped", tail.position)
        return None

    def contains(self, pos: Position) -> bool:
        return pos in self._occupied

    def length(self) -> int:
        return len(self._occupied)

    def __contains__(self, pos: Position) -> bool:
        return self.contains(pos)

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[Position]:
        seg_id = self.head_id
        while seg_id is not None:
            seg = self._segments[seg_id]
            yield seg.position
            seg_id = seg.next

    def __reversed__(self) -> Iterator[Position]:
        seg_id = self.tail_id
        while seg_id is not None:
            seg = self._segments[seg_id]
            yield seg.position
            seg_id = seg.prev

    def __repr__(self) -> str:
        return f"Body(length={len(self)}, heading={self._heading.name}, head={self.head.position})"
