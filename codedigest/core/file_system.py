"""
Directory walking and include-glob matching.
"""
import fnmatch
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

import pathspec

from codedigest.models.enums import FileKind
from codedigest.models.file_entry import FileEntry

logger = logging.getLogger(__name__)

GITIGNORE = '.gitignore'


def _load_gitignore(root: Path) -> Optional[pathspec.PathSpec]:
    gitignore = root / GITIGNORE
    if not gitignore.is_file():
        return None
    with gitignore.open('r', encoding='utf-8') as f:
        return pathspec.PathSpec.from_lines('gitwildmatch', f)


def get_files(root, ignore: Iterable = ()) -> Iterator[FileEntry]:
    """
    Yield the root (depth 0) and every file and directory beneath it.

    Entries are ordered component-wise lexicographically, so each directory is
    immediately followed by its contents. Hidden entries, directories listed
    in ``ignore`` and paths matched by the root ``.gitignore`` are skipped.
    """
    root = Path(root)
    ignored: Set[Path] = set()
    for path in ignore:
        path = Path(path).expanduser()
        if not path.is_absolute():
            path = root / path
        ignored.add(path.resolve())
    spec = _load_gitignore(root)
    yield FileEntry(path=root, kind=FileKind.DIRECTORY, depth=0)
    yield from _walk(root, root, 1, ignored, spec)


def _walk(directory: Path, root: Path, depth: int, ignored: Set[Path],
          spec: Optional[pathspec.PathSpec]) -> Iterator[FileEntry]:
    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning(f'Cannot list directory {directory}: {e}')
        return
    for child in children:
        if child.name.startswith('.'):
            continue
        is_dir = child.is_dir() and not child.is_symlink()
        if is_dir and child.resolve() in ignored:
            logger.debug(f'Ignoring directory {child}')
            continue
        if spec is not None:
            relative = child.relative_to(root).as_posix()
            if spec.match_file(relative + '/' if is_dir else relative):
                logger.debug(f'Ignoring {child} (matched {GITIGNORE})')
                continue
        if is_dir:
            yield FileEntry(path=child, kind=FileKind.DIRECTORY, depth=depth)
            yield from _walk(child, root, depth + 1, ignored, spec)
        elif child.is_file():
            yield FileEntry(path=child, kind=FileKind.FILE, depth=depth)


class GlobPatternMatcher:
    """Decides whether a file's raw content is emitted instead of a digest."""

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: List[str] = [p for p in patterns if p]

    def matches(self, file_path) -> bool:
        path = Path(file_path)
        full = path.as_posix()
        return any(
            fnmatch.fnmatch(path.name, pattern) or fnmatch.fnmatch(full, pattern)
            for pattern in self.patterns
        )
