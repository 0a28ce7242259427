"""
ASCII rendering of a walked directory tree.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List

from codedigest.models.file_entry import FileEntry

BRANCH = '├── '
LAST_BRANCH = '└── '
PIPE = '│   '
SPACE = '    '


@dataclass(frozen=True)
class CallbackArgs:
    """A piece of tree output; ``linebreak`` ends the current line."""
    output: str
    linebreak: bool


def _has_next_sibling(entries: List[FileEntry]) -> List[bool]:
    result = [False] * len(entries)
    pending: Dict[int, bool] = {}
    for i in range(len(entries) - 1, -1, -1):
        depth = entries[i].depth
        result[i] = pending.get(depth, False)
        pending[depth] = True
        for deeper in [d for d in pending if d > depth]:
            del pending[deeper]
    return result


def print_file_tree(entries: Iterable[FileEntry], callback: Callable[[CallbackArgs], None]) -> None:
    """
    Print an indented tree of ``entries`` (root first, as produced by the walker).
    """
    entries = list(entries)
    if not entries:
        return
    callback(CallbackArgs('.', True))
    rest = entries[1:]
    has_next = _has_next_sibling(rest)
    continuation: Dict[int, bool] = {}
    for entry, is_not_last in zip(rest, has_next):
        depth = entry.depth
        for level in range(1, depth):
            callback(CallbackArgs(PIPE if continuation.get(level) else SPACE, False))
        if depth > 0:
            callback(CallbackArgs(BRANCH if is_not_last else LAST_BRANCH, False))
        continuation[depth] = is_not_last
        callback(CallbackArgs(entry.name, True))


def format_file_tree(entries: Iterable[FileEntry]) -> str:
    out: List[str] = []

    def collect(args: CallbackArgs) -> None:
        out.append(args.output)
        if args.linebreak:
            out.append('\n')

    print_file_tree(entries, collect)
    return ''.join(out)
