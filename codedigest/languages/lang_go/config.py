"""
Default selectors for Go.
"""
from tree_sitter import Node

from codedigest.core.engine.grammar import get_node_text
from codedigest.core.engine.selectors import (
    CAPTURE_ELIDED,
    CAPTURE_VERBATIM,
    SELECT_ONLY,
    SelectorRegistry,
    custom,
)
from codedigest.core.error_handling import CustomActionFailedError
from codedigest.languages.registry import language_selectors
from codedigest.models.enums import Language
from codedigest.models.indentation import Indentation

LANGUAGE_CONFIG = {
    'language': Language.GO,
    'file_extensions': ['.go'],
    'fence_tag': 'go',
    'indentation': Indentation.tabs(),
    'comment_prefix': '//',
}

COMPOSITE_TYPE_KINDS = frozenset({'struct_type', 'interface_type'})
TYPE_SPEC_KINDS = frozenset({'type_spec', 'type_alias'})


def type_declaration_rule(node: Node, code_bytes: bytes, context) -> str:
    """
    Keep struct and interface declarations whole.

    Any other declared type yields an empty string, which still occupies one
    fragment. A grouped ``type (...)`` block is kept whole when any of its
    specs declares a struct or interface.

    Raises:
        CustomActionFailedError: If the node has no type spec, or a spec has
            no declared type.
    """
    specs = [child for child in node.named_children if child.type in TYPE_SPEC_KINDS]
    if not specs:
        raise CustomActionFailedError('type_declaration has no type_spec', node_kind=node.type)
    for spec in specs:
        declared_type = spec.child_by_field_name('type')
        if declared_type is None:
            raise CustomActionFailedError(f'{spec.type} has no declared type', node_kind=node.type)
        if declared_type.type in COMPOSITE_TYPE_KINDS:
            return get_node_text(node, code_bytes).strip()
    return ''


@language_selectors(Language.GO)
def go_selectors() -> SelectorRegistry:
    registry = SelectorRegistry(
        Language.GO,
        indentation=LANGUAGE_CONFIG['indentation'],
        comment_prefix=LANGUAGE_CONFIG['comment_prefix'],
    )
    registry.register('source_file', SELECT_ONLY)
    registry.register('import_declaration', CAPTURE_VERBATIM)
    registry.register('function_declaration', CAPTURE_ELIDED)
    registry.register('method_declaration', CAPTURE_ELIDED)
    registry.register('type_declaration', custom(type_declaration_rule))
    return registry
