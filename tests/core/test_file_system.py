from codedigest.core.file_system import GlobPatternMatcher, get_files
from codedigest.models import FileKind


def layout(root, *names):
    for name in names:
        path = root / name
        if name.endswith('/'):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text('')


def relative(entries, root):
    return [(e.path.relative_to(root).as_posix(), e.depth, e.kind) for e in entries]


def test_entries_are_ordered_with_depths(tmp_path):
    layout(tmp_path, 'b/z.rs', 'a/y.go', 'a-b.rs', 'a/sub/x.go')
    entries = list(get_files(tmp_path))
    assert relative(entries, tmp_path) == [
        ('.', 0, FileKind.DIRECTORY),
        ('a', 1, FileKind.DIRECTORY),
        ('a/sub', 2, FileKind.DIRECTORY),
        ('a/sub/x.go', 3, FileKind.FILE),
        ('a/y.go', 2, FileKind.FILE),
        ('a-b.rs', 1, FileKind.FILE),
        ('b', 1, FileKind.DIRECTORY),
        ('b/z.rs', 2, FileKind.FILE),
    ]


def test_hidden_ignored_and_gitignored_entries_are_skipped(tmp_path):
    layout(tmp_path, '.git/config', 'vendor/lib.go', 'target/debug.rs', 'src/main.rs', 'notes.log')
    (tmp_path / '.gitignore').write_text('target/\n*.log\n')
    entries = list(get_files(tmp_path, ignore=['vendor']))
    assert [path for path, _, _ in relative(entries, tmp_path)] == ['.', 'src', 'src/main.rs']


def test_glob_matcher():
    matcher = GlobPatternMatcher(['*.md', 'docs/*.txt'])
    assert matcher.matches('README.md')
    assert matcher.matches('project/docs/guide.md')
    assert matcher.matches('docs/notes.txt')
    assert not matcher.matches('main.go')
    assert not GlobPatternMatcher().matches('README.md')
