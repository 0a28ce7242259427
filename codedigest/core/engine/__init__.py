from .elision import render_elided
from .grammar import GrammarAdapter, get_node_text, load_language
from .selectors import (
    CAPTURE_ELIDED,
    CAPTURE_VERBATIM,
    SELECT_ONLY,
    Action,
    CustomRule,
    SelectorRegistry,
    custom,
)
from .traversal import NodeItem, Sentinel, TraversalContext, TraversalEngine, WorkQueue, traverse

__all__ = [
    'Action',
    'CAPTURE_ELIDED',
    'CAPTURE_VERBATIM',
    'CustomRule',
    'GrammarAdapter',
    'NodeItem',
    'SELECT_ONLY',
    'SelectorRegistry',
    'Sentinel',
    'TraversalContext',
    'TraversalEngine',
    'WorkQueue',
    'custom',
    'get_node_text',
    'load_language',
    'render_elided',
    'traverse',
]
