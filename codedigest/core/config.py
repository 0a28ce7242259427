"""
Configuration management for codedigest.
"""
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from codedigest.core.error_handling import ConfigurationError
from codedigest.models.enums import Language


class Configuration:
    """Process-wide configuration with per-section defaults."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Configuration, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config = {
            'extraction': {
                'extensions': {
                    '.go': Language.GO,
                    '.rs': Language.RUST,
                },
            },
            'rendering': {
                'fence_tags': {
                    Language.GO: 'go',
                    Language.RUST: 'rust',
                    Language.PYTHON: 'python',
                },
            },
            'logging': {
                'level': 'WARNING',
            },
        }

    def get(self, section: str, key: str, default: Any = None) -> Any:
        try:
            return self._config[section][key]
        except KeyError:
            return default

    def set(self, section: str, key: str, value: Any):
        if section not in self._config:
            self._config[section] = {}
        self._config[section][key] = value

    def reset(self):
        """Restore the defaults."""
        self._initialize()

    @property
    def extensions(self) -> Dict[str, Language]:
        return self.get('extraction', 'extensions', {})

    def register_extension(self, extension: str, language: Language):
        extension = extension.lower()
        if not extension.startswith('.'):
            extension = '.' + extension
        self._config['extraction']['extensions'][extension] = language

    def fence_tag(self, language: Language) -> str:
        return self.get('rendering', 'fence_tags', {}).get(language, language.value)


def parse_extension_mapping(value: str) -> Dict[str, Language]:
    """Parse ``EXT=LANGUAGE`` (e.g. ``py=python``)."""
    extension, sep, language_name = value.partition('=')
    if not sep or not extension.strip() or not language_name.strip():
        raise ConfigurationError('Expected EXT=LANGUAGE', value=value)
    try:
        language = Language(language_name.strip().lower())
    except ValueError as e:
        raise ConfigurationError('Unknown language', value=language_name,
                                 expected=', '.join(lang.value for lang in Language)) from e
    extension = extension.strip().lower()
    if not extension.startswith('.'):
        extension = '.' + extension
    return {extension: language}


class AppConfig(BaseModel):
    """Options for one command-line run."""
    directory: Path
    ignore: List[Path] = Field(default_factory=list)
    include: List[str] = Field(default_factory=list)
    tree: bool = False
    extensions: Dict[str, Language] = Field(default_factory=dict)
    jobs: int = Field(default=1, ge=1)

    @field_validator('ignore', mode='before')
    @classmethod
    def _expand_ignore(cls, value):
        if value is None:
            return []
        return [Path(v).expanduser() for v in value]

    @classmethod
    def from_args(cls, args) -> 'AppConfig':
        extensions: Dict[str, Language] = {}
        for mapping in getattr(args, 'extension', None) or []:
            extensions.update(parse_extension_mapping(mapping))
        return cls(
            directory=args.directory,
            ignore=args.ignore or [],
            include=args.include or [],
            tree=args.tree,
            extensions=extensions,
            jobs=args.jobs,
        )


config = Configuration()
