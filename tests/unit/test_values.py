import pytest

from verity import ConstraintViolation, NullArgument


def test_is_empty_string(checker):
    checker.is_empty("")

    with pytest.raises(ConstraintViolation, match="empty string expected expected <> but was <abc>"):
        checker.is_empty("abc")


def test_is_empty_collection(checker):
    checker.is_empty([])
    checker.is_empty({})

    with pytest.raises(ConstraintViolation, match="no elements expected expected <0> but was <2>"):
        checker.is_empty({1, 2})


def test_is_empty_requires_value(checker):
    with pytest.raises(NullArgument):
        checker.is_empty(None)


def test_has_size(checker):
    checker.has_size(2, ["a", "b"])

    with pytest.raises(ConstraintViolation, match="^rows .*wrong size expected <3> but was <2>"):
        checker.has_size(3, ["a", "b"], message="rows")


def test_has_size_at_least(checker):
    checker.has_size_at_least(2, [1, 2, 3])
    checker.has_size_at_least(0, [])

    with pytest.raises(ConstraintViolation, match="expected <4> but was <3>"):
        checker.has_size_at_least(4, [1, 2, 3])


class TestNotEquals:
    """Tests for not_equals."""

    def test_different_values(self, checker):
        checker.not_equals(1, 2)
        checker.not_equals(None, 0)
        checker.not_equals("a", None)

    def test_same_object(self, checker):
        items = [1]
        with pytest.raises(ConstraintViolation, match="both objects are the same"):
            checker.not_equals(items, items)

    def test_both_none(self, checker):
        with pytest.raises(ConstraintViolation, match="both objects are the same"):
            checker.not_equals(None, None)

    def test_equal_values(self, checker):
        with pytest.raises(ConstraintViolation, match="both objects are equal"):
            checker.not_equals([1], [1])


def test_equals_without_whitespace(checker):
    checker.equals_without_whitespace("a b c", "abc ")

    with pytest.raises(ConstraintViolation, match="expected <abc> but was <abd>") as excinfo:
        checker.equals_without_whitespace("a b c", "a b d")

    assert excinfo.value.expected == "abc"
    assert excinfo.value.found == "abd"
