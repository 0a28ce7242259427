"""
Default selectors for Rust.
"""
from codedigest.core.engine.selectors import CAPTURE_ELIDED, CAPTURE_VERBATIM, SELECT_ONLY, SelectorRegistry
from codedigest.languages.registry import language_selectors
from codedigest.models.enums import Language
from codedigest.models.indentation import Indentation

LANGUAGE_CONFIG = {
    'language': Language.RUST,
    'file_extensions': ['.rs'],
    'fence_tag': 'rust',
    'indentation': Indentation.spaces(4),
    'comment_prefix': '//',
}


@language_selectors(Language.RUST)
def rust_selectors() -> SelectorRegistry:
    registry = SelectorRegistry(
        Language.RUST,
        indentation=LANGUAGE_CONFIG['indentation'],
        comment_prefix=LANGUAGE_CONFIG['comment_prefix'],
    )
    registry.register('source_file', SELECT_ONLY)
    for kind in ('use_declaration', 'struct_item', 'enum_item', 'type_item'):
        registry.register(kind, CAPTURE_VERBATIM)
    registry.register('function_item', CAPTURE_ELIDED)
    registry.register('function_signature_item', CAPTURE_ELIDED)
    return registry
