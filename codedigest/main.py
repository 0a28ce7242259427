import logging
import os
import threading
from typing import Dict, List, Optional

from .core.engine.grammar import GrammarAdapter
from .core.engine.selectors import SelectorRegistry
from .core.engine.traversal import TraversalEngine
from .languages import default_registry_for_language, get_language_for_file, get_supported_languages
from .models.enums import Language
from .models.fragment import Fragment

logger = logging.getLogger(__name__)

_registries: Dict[Language, SelectorRegistry] = {}
_registries_lock = threading.Lock()


def get_registry(language: Language) -> SelectorRegistry:
    """Shared, frozen default registry for ``language`` (built on first use)."""
    with _registries_lock:
        registry = _registries.get(language)
        if registry is None:
            registry = default_registry_for_language(language).freeze()
            _registries[language] = registry
        return registry


class CodeDigest:
    """
    Main entry point for codedigest.
    Extracts declarations, signatures and imports from source code, eliding
    implementation bodies.
    """

    def __init__(self, language, registry: Optional[SelectorRegistry] = None):
        """
        Initialize for a specific language.

        Args:
            language: ``Language`` or its code (e.g. 'go', 'rust', 'python')
            registry: Custom selector registry; defaults to the language's
                shared default registry

        Raises:
            ValueError: If the language is not supported
            GrammarIncompatibleError: If the grammar cannot be loaded
        """
        try:
            self.language = Language(language)
        except ValueError:
            raise ValueError(f'Unsupported language: {language}') from None
        self.registry = registry if registry is not None else get_registry(self.language)
        self.engine = TraversalEngine(GrammarAdapter(self.language), self.registry)

    @classmethod
    def from_file_path(cls, file_path: str) -> 'CodeDigest':
        """
        Create an instance based on file extension.

        Raises:
            ValueError: If the file extension is not supported
        """
        language = get_language_for_file(file_path)
        if language is None:
            raise ValueError(f'Unsupported file extension: {os.path.splitext(file_path)[1]}')
        return cls(language)

    @staticmethod
    def supported_languages() -> List[str]:
        return [language.value for language in get_supported_languages()]

    @staticmethod
    def load_file(file_path: str) -> str:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()

    def extract(self, code: str) -> List[Fragment]:
        """
        Extract fragments from ``code`` in extraction order.

        Raises:
            CustomActionFailedError: If a custom rule rejects the tree shape.
        """
        return self.engine.extract(code)

    def extract_text(self, code: str) -> List[str]:
        return [fragment.content for fragment in self.extract(code)]
