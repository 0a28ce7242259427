"""
Error handling for codedigest.

Per-file failures (a custom rule whose assumption about the tree shape does
not hold, an unreadable file) are raised as exceptions and caught at the
file-processing boundary. Grammar failures are fatal for the whole run,
since no file of that language could ever be processed.
"""
import logging
from typing import Any, Optional

logger = logging.getLogger('codedigest')


class CodeDigestError(Exception):
    """Base class for all codedigest exceptions.

    Keyword arguments other than ``context`` are folded into the context
    dictionary and rendered by ``__str__``.
    """
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = dict(kwargs.get('context', {}))
        for key, value in kwargs.items():
            if key != 'context':
                self.context[key] = value
        super().__init__(message)

    def add_context(self, key: str, value: Any) -> None:
        self.context[key] = value

    def __str__(self) -> str:
        context = {k: v for k, v in self.context.items() if v is not None}
        if not context:
            return self.message
        context_str = ', '.join(f"{k}={v}" for k, v in context.items())
        return f"{self.message} [Context: {context_str}]"


class ConfigurationError(CodeDigestError):
    """Invalid configuration, e.g. registering on a frozen selector registry."""
    pass


class GrammarIncompatibleError(CodeDigestError):
    """The linked tree-sitter grammar cannot be loaded by the installed binding."""
    def __init__(self, language: str, reason: str, **kwargs):
        message = f"Incompatible tree-sitter grammar for '{language}': {reason}"
        super().__init__(message, language=language, **kwargs)
        self.language = language
        self.reason = reason


class CustomActionFailedError(CodeDigestError):
    """A custom selector rule found a tree shape it did not expect."""
    def __init__(self, reason: str, node_kind: Optional[str] = None, **kwargs):
        super().__init__(f"Custom selector action failed: {reason}", node_kind=node_kind, **kwargs)
        self.reason = reason
        self.node_kind = node_kind


class FileProcessingError(CodeDigestError):
    """A single file could not be read or digested."""
    def __init__(self, path: str, reason: str, **kwargs):
        super().__init__(f"Error processing file {path}: {reason}", **kwargs)
        self.path = path
        self.reason = reason
