"""
Renders a node with its implementation body replaced by a placeholder.
"""
from tree_sitter import Node

from codedigest.core.engine.grammar import get_node_text
from codedigest.models.indentation import Indentation

BLOCK_KINDS = frozenset({'block'})

# Children rendered without a leading space: parameter lists, the Go
# ``func`` keyword, generic parameter lists and the Python header colon.
NO_SPACE_KINDS = frozenset({'parameter_list', 'func', 'type_parameters', 'type_parameter_list', 'parameters', ':'})


def elision_placeholder(indentation: Indentation, comment_prefix: str = '//') -> str:
    return '{\n' + indentation.unit + comment_prefix + ' ...\n}'


def render_elided(node: Node, code_bytes: bytes, indentation: Indentation, comment_prefix: str = '//') -> str:
    """
    Concatenate the header children of ``node`` and replace its block child
    with the elision placeholder.

    Nodes without a block child are returned as their raw text.
    """
    if not any(child.type in BLOCK_KINDS for child in node.children):
        return get_node_text(node, code_bytes).strip()
    parts = []
    for child in node.children:
        if child.type in BLOCK_KINDS:
            parts.append(' ' + elision_placeholder(indentation, comment_prefix))
            continue
        if child.type not in NO_SPACE_KINDS:
            parts.append(' ')
        parts.append(get_node_text(child, code_bytes))
    return ''.join(parts).strip()
