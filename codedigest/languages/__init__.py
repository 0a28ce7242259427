"""
Language selection and default selector registries.
"""
import logging
import os
from typing import List, Optional

from codedigest.core.config import config
from codedigest.models.enums import Language

from . import lang_go, lang_python, lang_rust  # noqa: F401  (registers default selectors)
from .registry import default_registry_for_language, get_supported_languages, language_selectors

logger = logging.getLogger(__name__)


def get_language_for_file(file_path: str) -> Optional[Language]:
    """Language wired to the file's extension, or ``None`` if unrecognized."""
    _, ext = os.path.splitext(str(file_path))
    if not ext:
        return None
    return config.extensions.get(ext.lower())


def get_supported_extensions() -> List[str]:
    return sorted(config.extensions.keys())


__all__ = [
    'default_registry_for_language',
    'get_language_for_file',
    'get_supported_extensions',
    'get_supported_languages',
    'language_selectors',
]
