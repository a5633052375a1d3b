"""Tests for recursive error decomposition."""

from __future__ import annotations

import pytest

from packages.errkit.config import ErrorConfig
from packages.errkit.errors import (
    ERR_KIND_DEADLINE,
    ERR_KIND_UNKNOWN,
    ErrorX,
    MessageError,
    from_error,
    new,
    parse_error,
)


class CausedError(Exception):
    """Synthetic error exposing a root cause inside its message."""

    def __init__(self, message: str, root: BaseException | None) -> None:
        super().__init__(message)
        self._root = root

    def cause(self) -> BaseException | None:
        return self._root


class TextCauseError(Exception):
    """Synthetic error whose cause is plain text instead of an error."""

    def cause(self) -> str:
        return "timeout"


class WrappingError(Exception):
    """Synthetic error wrapping one child."""

    def __init__(self, message: str, inner: BaseException | None) -> None:
        super().__init__(message)
        self.inner = inner

    def unwrap(self) -> BaseException | None:
        return self.inner


class MultiError(Exception):
    """Synthetic error exposing several children."""

    def __init__(self, message: str, children: list[BaseException]) -> None:
        super().__init__(message)
        self.children = children

    def unwrap_errors(self) -> list[BaseException]:
        return self.children


def _leaves(err: BaseException, config: ErrorConfig | None = None) -> list[str]:
    """Classify ``err`` and return its leaf messages."""
    error = from_error(err, config=config)
    assert error is not None
    return [str(leaf) for leaf in error.errors()]


def test_plain_error_is_single_leaf_with_unknown_kind() -> None:
    """A plain error should be kept as-is with the default kind."""
    original = ValueError("invalid port")
    error = from_error(original)

    assert error is not None
    assert error.errors() == [original]
    assert error.kind == ERR_KIND_UNKNOWN
    assert str(error) == "invalid port"


def test_plain_error_with_empty_message_is_kept() -> None:
    """Classification should always succeed, even without a message."""
    assert _leaves(RuntimeError()) == [""]


def test_plain_error_text_is_trimmed() -> None:
    """Surrounding whitespace should not survive as part of a leaf."""
    assert _leaves(RuntimeError("  padded  ")) == ["padded"]


def test_arrow_joined_text_is_reversed_into_causal_order() -> None:
    """Arrow segments should be visited innermost first."""
    error = from_error(RuntimeError("disk full <- write failed <- save config"))

    assert error is not None
    assert [str(leaf) for leaf in error.errors()] == [
        "save config",
        "write failed",
        "disk full",
    ]
    assert all(isinstance(leaf, MessageError) for leaf in error.errors())
    assert str(error) == "save config; write failed; disk full"


def test_rendered_leaves_reclassify_to_same_order() -> None:
    """Classifying a rendered error string should rebuild the same leaves."""
    error = new("a").add_message("b").add_message("c")

    assert str(error) == "a; b; c"
    assert _leaves(RuntimeError(str(error))) == ["a", "b", "c"]


def test_serialized_arrow_text_is_split() -> None:
    """The JSON-escaped arrow marker should split like the plain arrow."""
    assert _leaves(RuntimeError("dial failed \\u003c- fetch page")) == [
        "fetch page",
        "dial failed",
    ]


def test_semicolon_joined_text_keeps_forward_order() -> None:
    """Semicolon segments should be visited in written order."""
    assert _leaves(RuntimeError("first; second; third")) == [
        "first",
        "second",
        "third",
    ]


def test_multiline_block_is_split_and_empty_fragments_skipped() -> None:
    """Multi-line joined errors should yield one leaf per listed error."""
    text = "the following errors occurred:\n -  bad header\n -  bad body"

    assert _leaves(RuntimeError(text)) == ["bad header", "bad body"]


def test_arrow_marker_takes_priority_over_semicolon() -> None:
    """Arrow splitting should run first, then parts split further."""
    assert _leaves(RuntimeError("x; y <- z")) == ["z", "x", "y"]


def test_duplicate_segments_are_deduplicated() -> None:
    """Repeated text segments should produce a single leaf."""
    assert _leaves(RuntimeError("a; a; b")) == ["a", "b"]


def test_depth_bound_truncates_long_chains() -> None:
    """A chain longer than the bound should keep exactly max_depth leaves."""
    text = "e1 <- e2 <- e3 <- e4 <- e5"

    assert _leaves(RuntimeError(text)) == ["e5", "e4", "e3"]
    assert _leaves(RuntimeError(text), ErrorConfig(max_depth=5)) == [
        "e5",
        "e4",
        "e3",
        "e2",
        "e1",
    ]


def test_cause_shaped_error_keeps_cause_and_remaining_context() -> None:
    """The cause should be a leaf and the rest of the message another."""
    root = TimeoutError("timeout")
    error = from_error(CausedError("timeout while connecting to host", root))

    assert error is not None
    assert error.errors()[0] is root
    assert [str(leaf) for leaf in error.errors()] == [
        "timeout",
        "while connecting to host",
    ]


def test_cause_shaped_error_without_remaining_text() -> None:
    """A message equal to its cause should contribute just the cause."""
    assert _leaves(CausedError("refused", RuntimeError("refused"))) == ["refused"]


def test_cause_shaped_error_without_cause_is_plain() -> None:
    """A missing cause should fall through to text decomposition."""
    assert _leaves(CausedError("a; b", None)) == ["a", "b"]


def test_wrapping_error_descends_into_child() -> None:
    """Single-child errors should be replaced by their child's decomposition."""
    inner = ValueError("inner failure")

    error = from_error(WrappingError("outer", inner))

    assert error is not None
    assert error.errors() == [inner]


def test_wrapping_error_without_child_uses_own_text() -> None:
    """A wrapper with no child should decompose its own message."""
    assert _leaves(WrappingError("lonely <- text", None)) == ["text", "lonely"]


def test_nested_wrappers_are_followed() -> None:
    """Chains of wrappers should reach the innermost error."""
    inner = KeyError("missing")
    chain = WrappingError("a", WrappingError("b", WrappingError("c", inner)))

    error = from_error(chain)

    assert error is not None
    assert error.errors() == [inner]


def test_cyclic_wrappers_terminate_with_outer_error_as_leaf() -> None:
    """A cyclic unwrap chain should stop and keep the outer error."""
    first = WrappingError("first", None)
    second = WrappingError("second", first)
    first.inner = second

    error = from_error(first)

    assert error is not None
    assert error.errors() == [first]


def test_self_wrapping_error_is_kept_as_leaf() -> None:
    """An error unwrapping to itself should still classify to its text."""
    loop = WrappingError("self-loop failure", None)
    loop.inner = loop

    assert _leaves(loop) == ["self-loop failure"]


@pytest.mark.parametrize(
    "text",
    ["<-", " ; ", "the following errors occurred:", "  <-  <-  "],
)
def test_delimiter_only_text_is_kept_as_single_leaf(text: str) -> None:
    """Text made only of delimiters should survive as one opaque leaf."""
    error = from_error(RuntimeError(text))

    assert error is not None
    assert [str(leaf) for leaf in error.errors()] == [text.strip()]
    assert str(error) == text.strip()
    assert error.cause() is not None


def test_non_exception_cause_falls_back_to_text() -> None:
    """A cause() returning plain text should not make the error cause-shaped."""
    error = from_error(TextCauseError("timeout while dialing"))

    assert error is not None
    assert [str(leaf) for leaf in error.errors()] == ["timeout while dialing"]
    assert all(isinstance(leaf, BaseException) for leaf in error.errors())
    assert not error.matches(RuntimeError("x"))
    assert error.matches(MessageError("timeout while dialing"))


def test_non_exception_children_are_ignored() -> None:
    """Children that are not errors should be skipped when unwrapping."""
    multi = MultiError("outer", [])
    multi.children = ["text", ValueError("kept")]  # type: ignore[list-item]
    wrapper = WrappingError("a <- b", None)
    wrapper.inner = "not an error"  # type: ignore[assignment]

    assert _leaves(multi) == ["kept"]
    assert _leaves(wrapper) == ["b", "a"]


def test_exception_group_children_are_decomposed() -> None:
    """Native exception groups should contribute every child in order."""
    group = ExceptionGroup("batch", [ValueError("a"), OSError("b <- c")])

    assert _leaves(group) == ["a", "c", "b"]


def test_multi_child_error_skips_itself_and_missing_children() -> None:
    """Self references and None children should be ignored."""
    multi = MultiError("outer", [])
    multi.children = [multi, None, ValueError("x")]  # type: ignore[list-item]

    assert _leaves(multi) == ["x"]


def test_multi_child_error_without_children_uses_own_text() -> None:
    """An empty child list should fall back to the error's own message."""
    assert _leaves(MultiError("p; q", [])) == ["p", "q"]


def test_existing_container_is_merged_with_kind() -> None:
    """Decomposing an ErrorX should merge leaves and combine kinds."""
    source = new("inner").set_kind(ERR_KIND_DEADLINE)
    target = new("outer")

    parse_error(target, source)

    assert [str(leaf) for leaf in target.errors()] == ["outer", "inner"]
    assert target.kind == ERR_KIND_DEADLINE


def test_parse_error_ignores_none() -> None:
    """None input should leave the target untouched."""
    target = ErrorX(config=ErrorConfig())
    parse_error(target, None)

    assert target.errors() == []


def test_input_error_is_not_mutated() -> None:
    """Decomposition should not alter the input error."""
    original = RuntimeError("a <- b")
    from_error(original)

    assert original.args == ("a <- b",)
    assert original.__cause__ is None
