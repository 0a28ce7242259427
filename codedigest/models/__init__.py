from .enums import ActionKind, FileKind, Language
from .file_entry import FileEntry
from .fragment import FileDigest, Fragment
from .indentation import Indentation

__all__ = [
    'ActionKind',
    'FileDigest',
    'FileEntry',
    'FileKind',
    'Fragment',
    'Indentation',
    'Language',
]
