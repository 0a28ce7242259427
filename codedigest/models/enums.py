"""
Core enumerations for the codedigest extraction engine.
"""
from enum import Enum


class Language(str, Enum):
    """Languages with a configured grammar and default selector registry"""
    GO = 'go'
    RUST = 'rust'
    PYTHON = 'python'

    @property
    def grammar_module(self) -> str:
        """Name of the tree-sitter grammar wheel providing ``language()``."""
        return f'tree_sitter_{self.value}'


class ActionKind(str, Enum):
    """What the traversal engine does with a node of a registered kind"""
    SELECT_ONLY = 'select_only'
    CAPTURE_VERBATIM = 'capture_verbatim'
    CAPTURE_ELIDED = 'capture_elided'
    CUSTOM = 'custom'


class FileKind(str, Enum):
    FILE = 'file'
    DIRECTORY = 'directory'
