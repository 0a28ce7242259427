"""
Grammar adapter: turns source text into a tree-sitter syntax tree.
"""
import importlib
import logging
import threading
from typing import Dict, Tuple

from tree_sitter import Language as TSLanguage, Node, Parser, Tree

from codedigest.core.error_handling import GrammarIncompatibleError
from codedigest.models.enums import Language

logger = logging.getLogger(__name__)

_languages: Dict[Language, TSLanguage] = {}
_languages_lock = threading.Lock()


def load_language(language: Language) -> TSLanguage:
    """
    Load (once) the tree-sitter language object for ``language``.

    Raises:
        GrammarIncompatibleError: If the grammar wheel is missing or was built
            for an ABI version the installed binding does not accept.
    """
    with _languages_lock:
        cached = _languages.get(language)
        if cached is not None:
            return cached
        try:
            module = importlib.import_module(language.grammar_module)
            ts_language = TSLanguage(module.language())
        except ImportError as e:
            raise GrammarIncompatibleError(language.value, f'grammar module not installed ({e})') from e
        except ValueError as e:
            raise GrammarIncompatibleError(language.value, str(e)) from e
        logger.debug(f"Loaded tree-sitter grammar for '{language.value}'")
        _languages[language] = ts_language
        return ts_language


def get_node_text(node: Node, code_bytes: bytes) -> str:
    """Raw source text of ``node``."""
    return code_bytes[node.start_byte:node.end_byte].decode('utf8')


class GrammarAdapter:
    """
    Wraps one tree-sitter grammar.

    The language object is shared; a parser is created per call so that
    parses on different threads never share parser state.
    """

    def __init__(self, language: Language):
        self.language = language
        self.ts_language = load_language(language)

    def parse(self, code: str) -> Tuple[Tree, bytes]:
        """
        Parse ``code``. Malformed input still yields a best-effort tree.

        Returns:
            Tuple of (tree, code_bytes)
        """
        code_bytes = code.encode('utf8')
        parser = Parser(self.ts_language)
        tree = parser.parse(code_bytes)
        logger.debug(f'Parsed {len(code_bytes)} bytes of {self.language.value}')
        return (tree, code_bytes)
