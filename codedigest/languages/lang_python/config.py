"""
Default selectors for Python.

Classes are merged into a single fragment: the class header followed by
its own fields and body-elided methods, in source order.
"""
from typing import Optional

from tree_sitter import Node

from codedigest.core.engine.elision import render_elided
from codedigest.core.engine.grammar import get_node_text
from codedigest.core.engine.selectors import (
    CAPTURE_ELIDED,
    CAPTURE_VERBATIM,
    SELECT_ONLY,
    SelectorRegistry,
    custom,
)
from codedigest.core.engine.traversal import NodeItem, Sentinel, TraversalContext
from codedigest.core.error_handling import CustomActionFailedError
from codedigest.languages.registry import language_selectors
from codedigest.models.enums import Language
from codedigest.models.indentation import Indentation

LANGUAGE_CONFIG = {
    'language': Language.PYTHON,
    'file_extensions': ['.py'],
    'fence_tag': 'python',
    'indentation': Indentation.spaces(4),
    'comment_prefix': '#',
}

IMPORT_KINDS = ('import_statement', 'import_from_statement', 'future_import_statement')


def _open_class(node: Node, code_bytes: bytes, context: TraversalContext, prefix: str = '') -> None:
    body = node.child_by_field_name('body')
    if body is None:
        raise CustomActionFailedError('class_definition has no body block', node_kind=node.type)
    header = code_bytes[node.start_byte:body.start_byte].decode('utf8').strip()
    if prefix:
        header = f'{prefix}\n{header}'
    context.begin_accumulation(header)
    items = [NodeItem(child, accumulating=True) for child in body.children]
    items.append(Sentinel(accumulating=context.accumulating))
    context.queue.push_immediate(items)


def class_definition_rule(node: Node, code_bytes: bytes, context: TraversalContext) -> Optional[str]:
    _open_class(node, code_bytes, context)
    return None


def decorated_definition_rule(node: Node, code_bytes: bytes, context: TraversalContext) -> Optional[str]:
    definition = node.child_by_field_name('definition')
    if definition is None:
        raise CustomActionFailedError('decorated_definition has no definition', node_kind=node.type)
    decorators = '\n'.join(get_node_text(child, code_bytes).strip() for child in node.children if child.type == 'decorator')
    if definition.type == 'class_definition':
        _open_class(definition, code_bytes, context, prefix=decorators)
        return None
    if definition.type == 'function_definition':
        registry = context.registry
        rendered = render_elided(definition, code_bytes, registry.indentation, registry.comment_prefix)
        return f'{decorators}\n{rendered}' if decorators else rendered
    raise CustomActionFailedError(f'unexpected decorated node {definition.type}', node_kind=node.type)


def expression_statement_rule(node: Node, code_bytes: bytes, context: TraversalContext) -> Optional[str]:
    # Assignments only; docstrings and bare calls are not declarations.
    if node.named_child_count and node.named_children[0].type == 'assignment':
        return get_node_text(node, code_bytes).strip()
    return None


@language_selectors(Language.PYTHON)
def python_selectors() -> SelectorRegistry:
    registry = SelectorRegistry(
        Language.PYTHON,
        indentation=LANGUAGE_CONFIG['indentation'],
        comment_prefix=LANGUAGE_CONFIG['comment_prefix'],
    )
    registry.register('module', SELECT_ONLY)
    for kind in IMPORT_KINDS:
        registry.register(kind, CAPTURE_VERBATIM)
    registry.register('function_definition', CAPTURE_ELIDED)
    registry.register('class_definition', custom(class_definition_rule))
    registry.register('decorated_definition', custom(decorated_definition_rule))
    registry.register('expression_statement', custom(expression_statement_rule))
    return registry
