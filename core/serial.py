# core/serial.py
# This file is part of Seqex - Sequence Expression Matching
#
# Serial composition engine: path-tracking simulation over child matchers

"""Serial composition of matchers.

A serial matcher splits the input into consecutive runs and aligns each run
with one of its *inferior* (child) matchers. Which child may handle the next
run is decided by a *superior* matcher, which consumes the chosen child
indices as its own token stream. With ``index_range(n)`` as the superior the
children are used once each, in order (this is ``seq``). Other superiors allow
repeated, optional or reordered use of the children.

Every candidate alignment is tracked as a :class:`Path`. After each token the
engine

1. ages the paths: drops those whose child cannot continue, feeds the token to
   the child of each remaining path and drops those that became INVALID;
2. branches: every path whose child is matching and whose superior may
   continue spawns one successor per child index the superior accepts, with
   that child freshly begun. Successors are added only when not already
   present, and branching repeats until no new path appears;
3. judges: a path may continue if its superior or its child may continue, and
   is matching only if both are matching. The serial verdict is the union over
   all paths (INVALID when no path survives).

Deduplicating equal paths plays the role of state merging in an NFA subset
construction and bounds the frontier by the number of distinct
(superior state, child, child state) triples.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Set, Tuple

from utils.logger import get_logger

from .exceptions import MatcherDefinitionError
from .matcher import Matcher, Step
from .stateful import index_range
from .verdict import Verdict, union_all

logger = get_logger()


@dataclass(frozen=True, slots=True)
class Path:
    """One candidate alignment of the input with the inferior matchers.

    Attributes:
        superior_state: State of the superior matcher
        superior_verdict: Verdict of the superior matcher
        inferior: Child matcher handling the current run, None for the root
        inferior_state: State of that child
        inferior_verdict: Verdict of that child
    """

    superior_state: Any
    superior_verdict: Verdict
    inferior: Optional[Matcher]
    inferior_state: Any
    inferior_verdict: Verdict

    @property
    def can_branch(self) -> bool:
        """The child accepted its run and the superior allows another child."""
        return self.superior_verdict.may_continue and self.inferior_verdict.is_matching

    def judge(self) -> Verdict:
        sv, iv = self.superior_verdict, self.inferior_verdict
        return (Verdict.CONTINUE & (sv | iv)) | (Verdict.MATCHING & (sv & iv))


class PathSet:
    """Ordered, deduplicated collection of paths built during one step.

    The set is mutable only while a step is being computed; the serial
    matcher hands out the frozen tuple returned by :meth:`freeze`.
    """

    def __init__(self) -> None:
        self._paths: List[Path] = []
        self._seen: Set[Path] = set()

    def add(self, path: Path) -> bool:
        """Add ``path`` unless an equal path is present; report whether it was added."""
        if path in self._seen:
            return False
        self._seen.add(path)
        self._paths.append(path)
        return True

    def freeze(self) -> Tuple[Path, ...]:
        return tuple(self._paths)

    def __contains__(self, path: Path) -> bool:
        return path in self._seen

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)


@dataclass(frozen=True, slots=True)
class Serial(Matcher):
    """Input split into runs, each matched by a child chosen by ``superior``.

    The state is a tuple of :class:`Path` records.

    Attributes:
        superior: Matcher over child indices governing order and repetition
        inferiors: Child matchers, addressed by their position
    """

    superior: Matcher
    inferiors: Tuple[Matcher, ...]

    def begin(self) -> Step:
        superior_state, superior_verdict = self.superior.begin()
        # The root has no child yet; a MATCHING placeholder lets it branch
        root = Path(superior_state, superior_verdict, None, None, Verdict.MATCHING)
        paths = self._branch([root])
        if logger.is_debug_enabled():
            logger.path_set_size(len(paths), "begin")
        return paths, self._judge(paths)

    def advance(self, state: Tuple[Path, ...], token: Any) -> Step:
        paths = self._branch(self._age(state, token))
        if logger.is_debug_enabled():
            logger.path_set_size(len(paths), "advance")
        return paths, self._judge(paths)

    @staticmethod
    def path_count(state: Tuple[Path, ...]) -> int:
        """Number of live paths held in a serial matching state."""
        return len(state)

    def _age(self, paths: Iterable[Path], token: Any) -> Iterator[Path]:
        for path in paths:
            if not path.inferior_verdict.may_continue:
                continue
            inferior_state, inferior_verdict = path.inferior.advance(
                path.inferior_state, token
            )
            if inferior_verdict.is_invalid:
                continue
            yield Path(
                path.superior_state,
                path.superior_verdict,
                path.inferior,
                inferior_state,
                inferior_verdict,
            )

    def _successors(self, path: Path) -> Iterator[Path]:
        for index, inferior in enumerate(self.inferiors):
            superior_state, superior_verdict = self.superior.advance(
                path.superior_state, index
            )
            if superior_verdict.is_invalid:
                continue
            inferior_state, inferior_verdict = inferior.begin()
            yield Path(
                superior_state, superior_verdict, inferior, inferior_state, inferior_verdict
            )

    def _branch(self, paths: Iterable[Path]) -> Tuple[Path, ...]:
        frontier = PathSet()
        pending = deque(paths)
        while pending:
            path = pending.popleft()
            if frontier.add(path) and path.can_branch:
                pending.extend(self._successors(path))
        return frontier.freeze()

    @staticmethod
    def _judge(paths: Iterable[Path]) -> Verdict:
        return union_all(path.judge() for path in paths)


def serial(superior: Matcher, *inferiors: Matcher) -> Serial:
    """Compose ``inferiors`` in runs whose child indices must match ``superior``."""
    for m in (superior,) + inferiors:
        if not isinstance(m, Matcher):
            raise MatcherDefinitionError(
                f"serial() expects matchers, got {type(m).__name__}: {m!r}"
            )
    return Serial(superior, tuple(inferiors))


def seq(*matchers: Matcher) -> Serial:
    """Each matcher once, in order, on consecutive runs of the input."""
    return serial(index_range(len(matchers)), *matchers)
