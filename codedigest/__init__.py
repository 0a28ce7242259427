from .core.engine import (
    CAPTURE_ELIDED,
    CAPTURE_VERBATIM,
    SELECT_ONLY,
    Action,
    SelectorRegistry,
    TraversalContext,
    custom,
)
from .core.error_handling import (
    CodeDigestError,
    ConfigurationError,
    CustomActionFailedError,
    FileProcessingError,
    GrammarIncompatibleError,
)
from .languages import default_registry_for_language
from .main import CodeDigest
from .models import FileDigest, Fragment, Indentation, Language

__version__ = "0.1.0"
__all__ = [
    "Action",
    "CAPTURE_ELIDED",
    "CAPTURE_VERBATIM",
    "CodeDigest",
    "CodeDigestError",
    "ConfigurationError",
    "CustomActionFailedError",
    "FileDigest",
    "FileProcessingError",
    "Fragment",
    "GrammarIncompatibleError",
    "Indentation",
    "Language",
    "SELECT_ONLY",
    "SelectorRegistry",
    "TraversalContext",
    "custom",
    "default_registry_for_language",
]
