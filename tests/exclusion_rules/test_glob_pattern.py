"""Unit tests for glob pattern compilation and matching."""

import pytest

from copytree.exclusion_rules.glob_pattern import AnyDepth, GlobPattern, Segment, compile_pattern, matches


def test_compile_splits_on_slash_and_drops_empty_components():
    pattern = compile_pattern("/src//**/*.rs/")
    assert pattern.components == (Segment("src"), AnyDepth(), Segment("*.rs"))
    assert pattern.source == "/src//**/*.rs/"
    assert str(pattern) == "src/**/*.rs"


def test_compile_accepts_every_string():
    assert compile_pattern("").components == ()
    assert compile_pattern("[a-z]{x,y}\\").components == (Segment("[a-z]{x,y}\\"),)


def test_double_star_inside_a_component_is_not_any_depth():
    pattern = compile_pattern("a**b")
    assert pattern.components == (Segment("a**b"),)
    assert pattern.matches(["axxb"])
    assert not pattern.matches(["a", "b"])


def test_compiled_patterns_are_immutable():
    pattern = compile_pattern("src/*")
    with pytest.raises(AttributeError):
        pattern.source = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "text,candidate,expected",
    [
        ("main.rs", "main.rs", True),
        ("main.rs", "Main.rs", False),
        ("*", "", True),
        ("*", "anything", True),
        ("*.py", "main.py", True),
        ("*.py", "main.pyc", False),
        ("?.txt", "a.txt", True),
        ("?.txt", "ab.txt", False),
        ("?", "", False),
        ("a*b*c", "aXbYc", True),
        ("a*b*c", "acb", False),
        ("**", "x", True),
    ],
)
def test_segment_matching(text, candidate, expected):
    assert Segment(text).matches(candidate) is expected


@pytest.mark.parametrize(
    "pattern,path,expected",
    [
        # AnyDepth may match zero components
        ("a/**/b", ["a", "b"], True),
        ("a/**/b", ["a", "x", "y", "b"], True),
        ("a/**/b", ["a", "x", "c"], False),
        ("**/target", ["x", "target"], True),
        ("**/target", ["target"], True),
        ("**/target/**", ["x", "target", "y"], True),
        ("**/target/**", ["target"], True),
        ("**", [], True),
        ("**", ["a", "b", "c"], True),
        # Whole-path matching
        ("docs", ["docs", "index.md"], False),
        ("index.md", ["docs", "index.md"], False),
        ("src/*", ["src", "main.rs"], True),
        ("src/*", ["src", "nested", "main.rs"], False),
        # '*' never crosses a component boundary
        ("src*", ["src", "main.rs"], False),
        ("*", [], False),
        ("", [], True),
        ("", ["a"], False),
    ],
)
def test_pattern_matching(pattern, path, expected):
    assert matches(pattern, path) is expected


def test_matches_accepts_compiled_patterns():
    compiled = GlobPattern.compile("**/*.lock")
    assert matches(compiled, ["Cargo.lock"])
    assert matches(compiled, ["crates", "core", "Cargo.lock"])


def test_matching_is_deterministic():
    pattern = compile_pattern("**/a/**/b/*")
    path = ["x", "a", "y", "b", "c"]
    assert [pattern.matches(path) for _ in range(5)] == [True] * 5


def test_pathological_pattern_finishes():
    # Exponential in the number of wildcards without memoization
    pattern = compile_pattern("/".join(["**"] * 12 + ["nomatch"]))
    assert not pattern.matches(["a"] * 30)

    segment = Segment("*a" * 20 + "b")
    assert not segment.matches("a" * 60)
