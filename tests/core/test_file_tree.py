from pathlib import Path

from codedigest.core.file_system import get_files
from codedigest.core.file_tree import CallbackArgs, format_file_tree, print_file_tree
from codedigest.models import FileEntry, FileKind


def entry(path, depth, kind=FileKind.FILE):
    return FileEntry(path=Path(path), kind=kind, depth=depth)


def test_two_directories_three_files(tmp_path):
    (tmp_path / 'a').mkdir()
    (tmp_path / 'b').mkdir()
    for name in ('a/file_a1.txt', 'a/file_a2.txt', 'b/file_b1.txt'):
        (tmp_path / name).touch()

    output = format_file_tree(get_files(tmp_path))
    assert output == (
        '.\n'
        '├── a\n'
        '│   ├── file_a1.txt\n'
        '│   └── file_a2.txt\n'
        '└── b\n'
        '    └── file_b1.txt\n'
    )


def test_continuation_only_for_ancestors_with_pending_siblings():
    entries = [
        entry('.', 0, FileKind.DIRECTORY),
        entry('src', 1, FileKind.DIRECTORY),
        entry('src/pkg', 2, FileKind.DIRECTORY),
        entry('src/pkg/a.go', 3),
        entry('src/main.go', 2),
        entry('README.md', 1),
    ]
    assert format_file_tree(entries) == (
        '.\n'
        '├── src\n'
        '│   ├── pkg\n'
        '│   │   └── a.go\n'
        '│   └── main.go\n'
        '└── README.md\n'
    )


def test_callback_receives_pieces_and_linebreaks():
    calls = []
    print_file_tree([entry('.', 0, FileKind.DIRECTORY), entry('x.rs', 1)], calls.append)
    assert calls == [
        CallbackArgs('.', True),
        CallbackArgs('└── ', False),
        CallbackArgs('x.rs', True),
    ]


def test_empty_input_prints_nothing():
    assert format_file_tree([]) == ''
