"""
Per-file digest processing and fenced-block rendering.

Each file is read, matched against the include globs, and either emitted
verbatim or digested with the default registry for its language. Failures
of a single file are reported and the batch continues; grammar failures
abort the batch.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from codedigest.core.config import config
from codedigest.core.engine.grammar import load_language
from codedigest.core.error_handling import CodeDigestError, FileProcessingError, GrammarIncompatibleError
from codedigest.core.file_system import GlobPatternMatcher
from codedigest.languages import get_language_for_file
from codedigest.main import CodeDigest, get_registry
from codedigest.models.fragment import FileDigest
from codedigest.models.file_entry import FileEntry

logger = logging.getLogger(__name__)

Callback = Callable[[str], None]


def read_source(file_path: Path) -> str:
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileProcessingError(str(file_path), f'error reading file: {e}') from e


def digest_file(file_path, glob_matcher: GlobPatternMatcher) -> Optional[FileDigest]:
    """
    Digest one file.

    Returns:
        ``None`` for files that are neither glob-matched nor of a recognized
        extension.

    Raises:
        FileProcessingError: If the file cannot be read.
        CustomActionFailedError: If extraction of this file fails.
        GrammarIncompatibleError: If the language's grammar cannot be loaded.
    """
    file_path = Path(file_path)
    if glob_matcher.matches(file_path):
        return FileDigest(path=str(file_path), verbatim=True, raw_content=read_source(file_path))
    language = get_language_for_file(str(file_path))
    if language is None:
        logger.debug(f'Skipping {file_path}: unrecognized extension')
        return None
    source = read_source(file_path)
    fragments = CodeDigest(language).extract(source)
    return FileDigest(path=str(file_path), language=language, fragments=fragments)


def render_digest(digest: FileDigest, callback: Callback) -> None:
    """Render a path line and a fenced block for ``digest``."""
    callback(f'`{digest.path}`')
    if digest.verbatim:
        callback('```')
        callback((digest.raw_content or '').rstrip('\n'))
        callback('```')
        return
    callback(f'```{config.fence_tag(digest.language)}')
    for i, fragment in enumerate(digest.fragments):
        callback(fragment.content)
        if i < len(digest.fragments) - 1:
            callback('')
    callback('```')


def process_file(file_path, glob_matcher: GlobPatternMatcher, callback: Callback) -> bool:
    """Digest and render one file. Returns ``False`` if the file was skipped."""
    digest = digest_file(file_path, glob_matcher)
    if digest is None:
        return False
    render_digest(digest, callback)
    return True


def warm_up_languages() -> None:
    """Load every wired grammar and registry before any parallel work."""
    for language in set(config.extensions.values()):
        load_language(language)
        get_registry(language)


def _safe_digest(path: Path, glob_matcher: GlobPatternMatcher) -> Tuple[Optional[FileDigest], Optional[CodeDigestError]]:
    try:
        return digest_file(path, glob_matcher), None
    except GrammarIncompatibleError:
        raise
    except CodeDigestError as e:
        return None, e


def process_files(entries: Iterable[FileEntry], glob_matcher: GlobPatternMatcher,
                  callback: Callback = print, console: Optional[Console] = None, jobs: int = 1) -> int:
    """
    Digest and render every file entry, separated by blank lines.

    Returns:
        Number of files that failed.

    Raises:
        GrammarIncompatibleError: Fatal for the whole batch.
    """
    console = console or Console(stderr=True)
    paths: List[Path] = [entry.path for entry in entries if entry.is_file]
    warm_up_languages()
    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            results = list(executor.map(lambda p: _safe_digest(p, glob_matcher), paths))
    else:
        results = [_safe_digest(p, glob_matcher) for p in paths]

    failures = 0
    rendered = 0
    for path, (digest, error) in zip(paths, results):
        if error is not None:
            failures += 1
            logger.debug(f'Failed to digest {path}', exc_info=error)
            console.print(f'[bold red]Error processing file[/bold red] {escape(str(path))}: {escape(str(error))}', highlight=False)
            continue
        if digest is None:
            continue
        if rendered:
            callback('')
        render_digest(digest, callback)
        rendered += 1
    return failures
