"""
Traversal engine: walks a syntax tree applying a selector registry.

The walk is breadth-first across ordinary siblings. Custom rules can ask for
a subtree to be processed immediately, ahead of everything already queued,
and can merge a header with the captures of that subtree into one fragment
(for example a class header followed by its elided methods).
"""
import logging
import textwrap
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List, Optional, Union

from tree_sitter import Node

from codedigest.core.engine.elision import render_elided
from codedigest.core.engine.grammar import GrammarAdapter, get_node_text
from codedigest.core.engine.selectors import SelectorRegistry
from codedigest.core.error_handling import CodeDigestError, CustomActionFailedError
from codedigest.models.enums import ActionKind
from codedigest.models.fragment import Fragment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeItem:
    node: Node
    accumulating: bool = False


@dataclass(frozen=True)
class Sentinel:
    """Closes the innermost open accumulation when popped.

    ``accumulating`` is the flag of the node that opened the accumulation;
    the closed text is routed with it.
    """
    accumulating: bool = False


QueueItem = Union[NodeItem, Sentinel]


class WorkQueue:
    """
    Work queue with two disciplines behind one ``pop``.

    ``push_sibling`` appends to the back of the breadth queue.
    ``push_immediate`` places items ahead of everything queued, keeping the
    order in which they are given.
    """

    def __init__(self):
        self._immediate: Deque[QueueItem] = deque()
        self._siblings: Deque[QueueItem] = deque()

    def push_sibling(self, item: QueueItem) -> None:
        self._siblings.append(item)

    def push_immediate(self, items: Iterable[QueueItem]) -> None:
        self._immediate.extendleft(reversed(list(items)))

    def pop(self) -> QueueItem:
        if self._immediate:
            return self._immediate.popleft()
        return self._siblings.popleft()

    def __len__(self) -> int:
        return len(self._immediate) + len(self._siblings)

    def __bool__(self) -> bool:
        return bool(self._immediate) or bool(self._siblings)


@dataclass
class Accumulator:
    header: str = ''
    parts: List[str] = field(default_factory=list)

    def render(self, indent_unit: str) -> str:
        if not self.header:
            return '\n'.join(self.parts)
        lines = [self.header]
        lines.extend(textwrap.indent(part, indent_unit) for part in self.parts)
        return '\n'.join(lines)


class TraversalContext:
    """Mutable state of one parse call. Never shared between parses."""

    def __init__(self, registry: SelectorRegistry):
        self.registry = registry
        self.queue = WorkQueue()
        self.fragments: List[Fragment] = []
        self.accumulating = False
        self._accumulators: List[Accumulator] = []

    @property
    def accumulator(self) -> Optional[Accumulator]:
        return self._accumulators[-1] if self._accumulators else None

    def begin_accumulation(self, header: str = '') -> Accumulator:
        """Open an accumulator; it is closed by the next popped ``Sentinel``."""
        accumulator = Accumulator(header=header)
        self._accumulators.append(accumulator)
        logger.debug(f'Opened accumulation (depth {len(self._accumulators)}): {header!r}')
        return accumulator

    def close_accumulation(self) -> str:
        """Close the innermost accumulator into a single string (possibly empty)."""
        if not self._accumulators:
            return ''
        accumulator = self._accumulators.pop()
        logger.debug(f'Closed accumulation with {len(accumulator.parts)} part(s)')
        return accumulator.render(self.registry.indentation.unit)

    def emit(self, content: str, accumulating: Optional[bool] = None) -> None:
        """Append ``content`` to the open accumulator or finalize it as a fragment."""
        if accumulating is None:
            accumulating = self.accumulating
        if accumulating:
            accumulator = self.accumulator
            if accumulator is None:
                accumulator = self.begin_accumulation()
            accumulator.parts.append(content)
        else:
            self.fragments.append(Fragment(content=content))


def traverse(root: Node, code_bytes: bytes, registry: SelectorRegistry) -> List[Fragment]:
    """
    Walk the tree under ``root`` and return the extracted fragments in
    extraction order.

    Raises:
        CustomActionFailedError: If a custom rule rejects the tree shape.
    """
    context = TraversalContext(registry)
    context.queue.push_sibling(NodeItem(root, accumulating=False))
    while context.queue:
        item = context.queue.pop()
        if isinstance(item, Sentinel):
            context.emit(context.close_accumulation(), item.accumulating)
            continue

        node = item.node
        context.accumulating = item.accumulating
        action = registry.lookup(node.type)
        if action is None:
            logger.debug(f"Pruned unregistered node kind '{node.type}'")
            continue

        if action.kind == ActionKind.SELECT_ONLY:
            for child in node.children:
                context.queue.push_sibling(NodeItem(child, accumulating=False))
        elif action.kind == ActionKind.CAPTURE_VERBATIM:
            context.emit(get_node_text(node, code_bytes).strip())
        elif action.kind == ActionKind.CAPTURE_ELIDED:
            context.emit(render_elided(node, code_bytes, registry.indentation, registry.comment_prefix))
        elif action.kind == ActionKind.CUSTOM:
            try:
                content = action.rule(node, code_bytes, context)
            except CodeDigestError:
                raise
            except Exception as e:
                raise CustomActionFailedError(f"{type(e).__name__}: {e}", node_kind=node.type) from e
            if content is not None:
                context.emit(content, item.accumulating)
    return context.fragments


class TraversalEngine:
    """Parses source text with a grammar adapter and traverses the result."""

    def __init__(self, adapter: GrammarAdapter, registry: SelectorRegistry):
        self.adapter = adapter
        self.registry = registry

    def extract(self, code: str) -> List[Fragment]:
        tree, code_bytes = self.adapter.parse(code)
        return traverse(tree.root_node, code_bytes, self.registry)
