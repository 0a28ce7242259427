import pytest

from codedigest import (
    CAPTURE_VERBATIM,
    SELECT_ONLY,
    CodeDigest,
    Language,
    default_registry_for_language,
)

RUST_SOURCE = '''use std::collections::HashMap;

pub struct Point {
    x: f64,
    y: f64,
}

pub enum Shape {
    Circle(Point, f64),
    Rectangle(Point, Point),
}

pub type PointMap = HashMap<String, Point>;

pub fn distance(p1: &Point, p2: &Point) -> f64 {
    ((p2.x - p1.x).powi(2) + (p2.y - p1.y).powi(2)).sqrt()
}

pub fn area(shape: &Shape) -> f64 {
    // ...
    0.0
}
'''


@pytest.fixture
def digest():
    return CodeDigest(Language.RUST)


def test_six_fragments_in_source_order(digest):
    result = digest.extract_text(RUST_SOURCE)
    assert len(result) == 6, f'Expected 6 fragments, got {len(result)}'
    assert result[0] == 'use std::collections::HashMap;'
    assert result[1] == 'pub struct Point {\n    x: f64,\n    y: f64,\n}'
    assert result[2] == 'pub enum Shape {\n    Circle(Point, f64),\n    Rectangle(Point, Point),\n}'
    assert result[3] == 'pub type PointMap = HashMap<String, Point>;'
    assert result[4] == 'pub fn distance(p1: &Point, p2: &Point) -> f64 {\n    // ...\n}'
    assert result[5] == 'pub fn area(shape: &Shape) -> f64 {\n    // ...\n}'


def test_verbatim_fragments_match_source(digest):
    result = digest.extract_text(RUST_SOURCE)
    for fragment in result[:4]:
        assert fragment in RUST_SOURCE, f'Verbatim fragment was altered: {fragment!r}'


def test_unregistered_kind_prunes_its_subtree(digest):
    code = 'mod inner {\n    pub fn hidden() {}\n    pub struct Hidden;\n}\n\nfn visible() {\n    inner::hidden();\n}\n'
    result = digest.extract_text(code)
    assert result == ['fn visible() {\n    // ...\n}']


def test_repeated_extraction_is_identical(digest):
    first = digest.extract(RUST_SOURCE)
    second = digest.extract(RUST_SOURCE)
    assert first == second


def test_signature_without_body_is_kept_verbatim():
    registry = default_registry_for_language(Language.RUST)
    registry.register('trait_item', SELECT_ONLY)
    registry.register('declaration_list', SELECT_ONLY)
    digest = CodeDigest(Language.RUST, registry=registry)
    code = 'pub trait Area {\n    fn area(&self) -> f64;\n}\n'
    assert digest.extract_text(code) == ['fn area(&self) -> f64;']


def test_nested_select_only_is_breadth_first():
    registry = default_registry_for_language(Language.RUST)
    registry.register('mod_item', SELECT_ONLY)
    registry.register('declaration_list', SELECT_ONLY)
    digest = CodeDigest(Language.RUST, registry=registry)
    code = 'mod a {\n    fn inner() {}\n}\n\nfn outer() {}\n'
    result = digest.extract_text(code)
    assert result == ['fn outer() {\n    // ...\n}', 'fn inner() {\n    // ...\n}']


def test_reregistering_overwrites_previous_action():
    registry = default_registry_for_language(Language.RUST)
    registry.register('function_item', CAPTURE_VERBATIM)
    digest = CodeDigest(Language.RUST, registry=registry)
    code = 'fn main() {\n    println!("hi");\n}\n'
    assert digest.extract_text(code) == [code.strip()]
