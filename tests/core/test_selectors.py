import pytest

from codedigest import (
    CAPTURE_ELIDED,
    CAPTURE_VERBATIM,
    SELECT_ONLY,
    ConfigurationError,
    Indentation,
    Language,
    SelectorRegistry,
    custom,
    default_registry_for_language,
)
from codedigest.main import CodeDigest, get_registry
from codedigest.models.enums import ActionKind


def test_lookup_unregistered_kind_returns_none():
    registry = SelectorRegistry()
    assert registry.lookup('anything') is None
    assert 'anything' not in registry


def test_last_registration_wins():
    registry = SelectorRegistry()
    registry.register('function_item', CAPTURE_ELIDED)
    registry.register('function_item', CAPTURE_VERBATIM)
    assert registry.lookup('function_item') is CAPTURE_VERBATIM
    assert len(registry) == 1


def test_frozen_registry_rejects_registration():
    registry = SelectorRegistry().register('source_file', SELECT_ONLY).freeze()
    with pytest.raises(ConfigurationError):
        registry.register('source_file', CAPTURE_VERBATIM)
    assert registry.lookup('source_file') is SELECT_ONLY


def test_custom_requires_callable():
    with pytest.raises(ConfigurationError):
        custom('not callable')
    action = custom(lambda node, code_bytes, context: '')
    assert action.kind == ActionKind.CUSTOM


def test_register_rejects_non_actions():
    with pytest.raises(ConfigurationError):
        SelectorRegistry().register('x', 'select_only')


@pytest.mark.parametrize('language, root_kind, unit', [
    (Language.GO, 'source_file', '\t'),
    (Language.RUST, 'source_file', '    '),
    (Language.PYTHON, 'module', '    '),
])
def test_default_registries(language, root_kind, unit):
    registry = default_registry_for_language(language)
    assert registry.lookup(root_kind) is SELECT_ONLY
    assert registry.indentation.unit == unit
    assert registry.language == language
    assert not registry.frozen


def test_default_registries_are_independent():
    first = default_registry_for_language(Language.RUST)
    first.register('impl_item', SELECT_ONLY)
    second = default_registry_for_language(Language.RUST)
    assert 'impl_item' not in second


def test_shared_registry_is_frozen_and_cached():
    assert get_registry(Language.GO) is get_registry(Language.GO)
    assert get_registry(Language.GO).frozen


def test_indentation_units():
    assert Indentation.tabs().unit == '\t'
    assert Indentation.spaces(2).unit == '  '
    assert Indentation().unit == '\t'


def test_unsupported_language_is_rejected():
    with pytest.raises(ValueError, match='Unsupported language: cobol') as exc_info:
        CodeDigest('cobol')
    assert exc_info.value.__cause__ is None
    assert exc_info.value.__suppress_context__
