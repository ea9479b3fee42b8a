"""Board and lesson navigation with lazily loaded lessons.

Boards are fetched once when the tree mounts. A board's lessons are fetched
the first time it is expanded and then served from `LessonCache` for the
rest of the session, so collapsing and expanding again costs nothing.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from lexiboard_client.client import CatalogGateway
from lexiboard_client.errors import CatalogError, ErrorClassifier, as_catalog_error

logger = logging.getLogger(__name__)

LessonLoader = Callable[[str], Awaitable[Sequence[Mapping[str, Any]]]]


class NodeState(StrEnum):
    COLLAPSED = "collapsed"
    LOADING = "loading"
    EXPANDED = "expanded"


class LoadStatus(StrEnum):
    LOADING = "loading"
    LOADED = "loaded"


@dataclass
class _CacheEntry:
    status: LoadStatus
    lessons: tuple[Mapping[str, Any], ...] = ()
    task: "asyncio.Task[tuple[Mapping[str, Any], ...]] | None" = None


class LessonCache:
    """Lessons keyed by board id, each board loaded at most once.

    Concurrent loads of the same board share one request. A failed load
    leaves no entry behind, so the next load tries again.
    """

    def __init__(self, loader: LessonLoader) -> None:
        self._loader = loader
        self._entries: dict[str, _CacheEntry] = {}
        self.fetch_count = 0

    def status(self, board_id: str) -> LoadStatus | None:
        entry = self._entries.get(board_id)
        return entry.status if entry else None

    def get(self, board_id: str) -> tuple[Mapping[str, Any], ...] | None:
        """Cached lessons, or None when the board has not been loaded."""
        entry = self._entries.get(board_id)
        if entry is None or entry.status is not LoadStatus.LOADED:
            return None
        return entry.lessons

    def __contains__(self, board_id: object) -> bool:
        return isinstance(board_id, str) and self.get(board_id) is not None

    async def load(self, board_id: str) -> tuple[Mapping[str, Any], ...]:
        """Return the board's lessons, fetching them only if not cached."""
        entry = self._entries.get(board_id)
        if entry is not None and entry.status is LoadStatus.LOADED:
            return entry.lessons
        if entry is not None and entry.task is not None and not entry.task.done():
            return await asyncio.shield(entry.task)

        task = asyncio.ensure_future(self._fetch(board_id))
        self._entries[board_id] = _CacheEntry(status=LoadStatus.LOADING, task=task)
        return await asyncio.shield(task)

    async def _fetch(self, board_id: str) -> tuple[Mapping[str, Any], ...]:
        self.fetch_count += 1
        try:
            lessons = tuple(await self._loader(board_id))
        except Exception:
            self._entries.pop(board_id, None)
            raise
        self._entries[board_id] = _CacheEntry(status=LoadStatus.LOADED, lessons=lessons)
        return lessons

    def invalidate(self, board_id: str) -> None:
        """Forget one board so its next expand fetches again."""
        self._entries.pop(board_id, None)

    def clear(self) -> None:
        self._entries.clear()


def board_path(board_type: str, board_id: str) -> str:
    return f"/dashboard/{board_type}/board/{board_id}"


def lesson_path(board_type: str, lesson_id: str) -> str:
    return f"/dashboard/{board_type}/lesson/{lesson_id}"


def is_active(node_path: str, current_path: str) -> bool:
    """Whether a node is the one the current location points at."""
    return node_path.rstrip("/") == current_path.rstrip("/")


@dataclass
class BoardNode:
    board: Mapping[str, Any]
    state: NodeState = NodeState.COLLAPSED

    @property
    def id(self) -> str:
        return str(self.board["id"])

    @property
    def name(self) -> str:
        return str(self.board.get("name", ""))

    @property
    def order(self) -> int:
        return int(self.board.get("order", 0))


@dataclass(frozen=True)
class NavEntry:
    """One visible row of the tree."""

    kind: str
    id: str
    title: str
    path: str
    depth: int
    active: bool
    expanded: bool = False
    children: tuple["NavEntry", ...] = field(default=())


class NavigationTree:
    """Boards of one catalog type with their lessons, expanded on demand."""

    def __init__(
        self,
        gateway: CatalogGateway,
        board_type: str,
        cache: LessonCache | None = None,
        classifier: ErrorClassifier | None = None,
    ) -> None:
        self.gateway = gateway
        self.board_type = board_type
        self.cache = cache or LessonCache(gateway.list_lessons)
        self.classifier = classifier or ErrorClassifier()
        self.nodes: list[BoardNode] = []
        self.mounted = False
        self.boards_loaded = False

    async def mount(self) -> list[BoardNode]:
        """Fetch the board list once."""
        self.mounted = True
        if self.boards_loaded:
            return self.nodes

        try:
            boards = await self.gateway.list_boards(self.board_type)
        except CatalogError:
            raise
        except Exception as e:
            raise as_catalog_error(e, self.classifier) from e

        if not self.mounted:
            return self.nodes
        ordered = sorted(boards, key=lambda board: board.get("order", 0))
        self.nodes = [BoardNode(board) for board in ordered]
        self.boards_loaded = True
        return self.nodes

    def unmount(self) -> None:
        """Stop applying late responses to node state."""
        self.mounted = False

    def node(self, board_id: str) -> BoardNode:
        for node in self.nodes:
            if node.id == board_id:
                return node
        raise KeyError(board_id)

    async def expand(self, board_id: str) -> tuple[Mapping[str, Any], ...]:
        """
        Expand a board, loading its lessons if this is the first time.

        Raises:
            CatalogError: If the lesson load fails; the node goes back to collapsed
        """
        node = self.node(board_id)
        cached = self.cache.get(board_id)
        if cached is not None:
            node.state = NodeState.EXPANDED
            return cached

        node.state = NodeState.LOADING
        try:
            lessons = await self.cache.load(board_id)
        except Exception as e:
            if self.mounted and node.state is NodeState.LOADING:
                node.state = NodeState.COLLAPSED
            logger.warning(f"Failed to load lessons for board {board_id}: {e!s}")
            if isinstance(e, CatalogError):
                raise
            raise as_catalog_error(e, self.classifier) from e

        if self.mounted and node.state is NodeState.LOADING:
            node.state = NodeState.EXPANDED
        return lessons

    def collapse(self, board_id: str) -> None:
        """Collapse a board. Never fetches."""
        self.node(board_id).state = NodeState.COLLAPSED

    async def toggle(self, board_id: str) -> None:
        if self.node(board_id).state is NodeState.COLLAPSED:
            await self.expand(board_id)
        else:
            self.collapse(board_id)

    def lessons(self, board_id: str) -> tuple[Mapping[str, Any], ...]:
        return self.cache.get(board_id) or ()

    def _lesson_entry(self, lesson: Mapping[str, Any], current_path: str) -> NavEntry:
        path = lesson_path(self.board_type, str(lesson["id"]))
        return NavEntry(
            kind="lesson",
            id=str(lesson["id"]),
            title=str(lesson.get("title", "")),
            path=path,
            depth=1,
            active=is_active(path, current_path),
        )

    def entries(self, current_path: str) -> list[NavEntry]:
        """Visible rows for the given location, boards in display order."""
        result = []
        for node in self.nodes:
            children: tuple[NavEntry, ...] = ()
            expanded = node.state is NodeState.EXPANDED
            if expanded:
                children = tuple(
                    self._lesson_entry(lesson, current_path) for lesson in self.lessons(node.id)
                )
            path = board_path(self.board_type, node.id)
            result.append(
                NavEntry(
                    kind="board",
                    id=node.id,
                    title=node.name,
                    path=path,
                    depth=0,
                    active=is_active(path, current_path),
                    expanded=expanded,
                    children=children,
                )
            )
        return result
