"""
Selector registry: which syntax-node kinds take part in a traversal, and how.

Only registered kinds are ever visited. A node whose kind has no action is
dropped together with its whole subtree.
"""
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Protocol, Tuple

from tree_sitter import Node

from codedigest.core.error_handling import ConfigurationError
from codedigest.models.enums import ActionKind, Language
from codedigest.models.indentation import Indentation

if TYPE_CHECKING:
    from codedigest.core.engine.traversal import TraversalContext

logger = logging.getLogger(__name__)


class CustomRule(Protocol):
    """
    Signature of a custom selector rule.

    A returned string (empty included) is emitted like any capture; ``None``
    means the rule emitted nothing. Rules may push work onto
    ``context.queue`` and open accumulations on the context.
    """

    def __call__(self, node: Node, code_bytes: bytes, context: 'TraversalContext') -> Optional[str]:
        ...


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    rule: Optional[CustomRule] = None

    def __repr__(self) -> str:
        if self.kind == ActionKind.CUSTOM:
            return f'Action(custom:{getattr(self.rule, "__name__", self.rule)!r})'
        return f'Action({self.kind.value})'


SELECT_ONLY = Action(ActionKind.SELECT_ONLY)
CAPTURE_VERBATIM = Action(ActionKind.CAPTURE_VERBATIM)
CAPTURE_ELIDED = Action(ActionKind.CAPTURE_ELIDED)


def custom(rule: CustomRule) -> Action:
    """Wrap ``rule`` as a custom action."""
    if not callable(rule):
        raise ConfigurationError('Custom selector rule must be callable', rule=rule)
    return Action(ActionKind.CUSTOM, rule)


class SelectorRegistry:
    """Per-language mapping from node kind to action, plus rendering options."""

    def __init__(self, language: Optional[Language] = None,
                 indentation: Optional[Indentation] = None, comment_prefix: str = '//'):
        self.language = language
        self.indentation = indentation or Indentation.tabs()
        self.comment_prefix = comment_prefix
        self._actions: Dict[str, Action] = {}
        self._frozen = False

    def register(self, node_kind: str, action: Action) -> 'SelectorRegistry':
        """Register ``action`` for ``node_kind``; a later registration wins."""
        if self._frozen:
            raise ConfigurationError('Selector registry is frozen', node_kind=node_kind)
        if not isinstance(action, Action):
            raise ConfigurationError('Expected an Action', node_kind=node_kind, value=action)
        if node_kind in self._actions:
            logger.debug(f"Overwriting selector for '{node_kind}': {self._actions[node_kind]!r} -> {action!r}")
        self._actions[node_kind] = action
        return self

    def lookup(self, node_kind: str) -> Optional[Action]:
        return self._actions.get(node_kind)

    def freeze(self) -> 'SelectorRegistry':
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def items(self) -> Iterator[Tuple[str, Action]]:
        return iter(self._actions.items())

    def __contains__(self, node_kind: str) -> bool:
        return node_kind in self._actions

    def __len__(self) -> int:
        return len(self._actions)
