import re

import pytest

from verity import (
    NATIVE,
    ArgumentViolation,
    ConstraintViolation,
    NullArgument,
    RelationError,
    relation,
)


@relation
def same_name(person: dict, name: str) -> bool:
    return person["name"] == name


# --- same_size ---------------------------------------------------------------


def test_same_size_passes_for_equal_sizes(checker):
    checker.same_size([1, 2, 3], ("a", "b", "c"))
    checker.same_size([], set())


def test_same_size_reports_both_sizes(checker):
    with pytest.raises(ConstraintViolation, match="expected <3> but was <2>") as excinfo:
        checker.same_size([1, 2, 3], [1, 2])

    assert excinfo.value.expected == 3
    assert excinfo.value.found == 2


def test_same_size_prefixes_message(checker):
    with pytest.raises(ConstraintViolation, match=r"^orders \[Assertion failed\]"):
        checker.same_size([1], [], message="orders")


def test_same_size_requires_containers(checker):
    with pytest.raises(NullArgument, match="argument found must not be None"):
        checker.same_size([1], None)


# --- contains_exact ----------------------------------------------------------


def test_contains_exact_ignores_order(checker):
    checker.contains_exact({1, 2, 3}, {3, 2, 1})
    checker.contains_exact([1, 2, 3], [3, 1, 2])


def test_contains_exact_fails_on_missing_element(checker):
    with pytest.raises(ConstraintViolation, match="does not contain 3"):
        checker.contains_exact({1, 2, 3}, {1, 2, 4})


def test_contains_exact_fails_on_size_mismatch(checker):
    with pytest.raises(ConstraintViolation, match="do not have the same size"):
        checker.contains_exact([1, 2], [1, 2, 2])


def test_contains_exact_does_not_count_duplicates(checker):
    # Both have size 3 and each expected element is in found: passes
    # even though the multisets differ.
    checker.contains_exact([1, 1, 2], [1, 2, 2])


def test_contains_exact_with_relation_across_types(checker):
    people = [{"name": "ada"}, {"name": "grace"}]
    checker.contains_exact(people, ["grace", "ada"], same_name)


def test_contains_exact_with_relation_reports_first_unmatched(checker):
    people = [{"name": "ada"}, {"name": "grace"}]
    with pytest.raises(ConstraintViolation, match="first not found element=.*grace"):
        checker.contains_exact(people, ["ada", "linus"], same_name)


def test_contains_exact_with_relation_does_not_consume_matches(checker, integers):
    checker.contains_exact([1, 1, 2], [1, 2, 2], integers)


def test_contains_exact_item(checker):
    checker.contains_exact_item(5, [5])
    checker.contains_exact_item(None, [None])


def test_contains_exact_item_requires_single_element(checker):
    with pytest.raises(ConstraintViolation, match="does not have exactly one item"):
        checker.contains_exact_item(5, [5, 5])


def test_contains_exact_item_requires_equal_element(checker):
    with pytest.raises(ConstraintViolation, match="does not contain expected element"):
        checker.contains_exact_item(5, [6])


def test_contains_exact_item_with_relation(checker):
    checker.contains_exact_item("ada", [{"name": "ada"}], relation(lambda name, person: person["name"] == name))

    with pytest.raises(ConstraintViolation, match="collection has wrong size"):
        checker.contains_exact_item(1, [], NATIVE)

    with pytest.raises(ConstraintViolation, match=re.escape("expected (one) element")):
        checker.contains_exact_item(1, {2}, NATIVE)


# --- same_order --------------------------------------------------------------


def test_same_order_passes_for_equal_sequences(checker):
    checker.same_order([1, 2, 3], [1, 2, 3])
    checker.same_order((None, "a"), [None, "a"])


def test_same_order_reports_first_difference(checker):
    with pytest.raises(ConstraintViolation) as excinfo:
        checker.same_order([1, 2, 3], [1, 3, 2])

    message = str(excinfo.value)
    assert "first difference at index 1" in message
    assert "expected element=2, found element=3" in message
    assert excinfo.value.expected == [1, 2, 3]
    assert excinfo.value.found == [1, 3, 2]


def test_same_order_requires_sequences(checker):
    with pytest.raises(ArgumentViolation, match="type Sequence expected for argument found"):
        checker.same_order([1, 2], {1, 2})


def test_same_order_with_relation(checker, integers):
    checker.same_order([1, 2, 3], [1, 2, 3], integers)

    with pytest.raises(ConstraintViolation, match="index 2"):
        checker.same_order([1, 2, 3], [1, 2, 4], integers)


def test_same_order_with_relation_checks_size_first(checker, integers):
    with pytest.raises(ConstraintViolation, match="expected <2> but was <3>"):
        checker.same_order([1, 2], [1, 2, 3], integers, message="lists")


def test_same_order_wraps_relation_errors(checker):
    def explode(first, second):
        if first == 2:
            raise KeyError("boom")
        return first == second

    with pytest.raises(RelationError, match="index 1") as excinfo:
        checker.same_order([1, 2], [1, 2], relation(explode))

    error = excinfo.value
    assert isinstance(error, ArgumentViolation)
    assert isinstance(error.__cause__, KeyError)
    assert error.index == 1
    assert error.expected_element == 2
    assert error.found_element == 2
    assert "expected list [1, 2] found list [1, 2]" in str(error)


# --- contains_at_least -------------------------------------------------------


def test_contains_at_least(checker):
    checker.contains_at_least(5, {1, 5, 9}, NATIVE)
    checker.contains_at_least(5, [1, 5, 9])


def test_contains_at_least_fails_when_absent(checker):
    with pytest.raises(ConstraintViolation, match="expected object not found") as excinfo:
        checker.contains_at_least(7, {1, 5, 9}, NATIVE)

    assert excinfo.value.expected == 7


def test_contains_at_least_short_circuits(checker):
    calls = []

    def record(first, second):
        calls.append(second)
        return first == second

    checker.contains_at_least(1, [1, 2, 3], relation(record))
    assert calls == [1]


def test_contains_at_least_all_reports_first_unmatched(checker, integers):
    checker.contains_at_least_all([1, 1, 3], [3, 2, 1], integers)

    with pytest.raises(ConstraintViolation, match="expected <4>"):
        checker.contains_at_least_all([1, 4, 5], [1, 2, 3], integers)


def test_contains_at_least_rejects_missing_relation(checker):
    with pytest.raises(NullArgument, match="equivalence"):
        checker.contains_at_least(1, [1], None)


# --- unique_elements ---------------------------------------------------------


def test_unique_elements(checker, integers):
    checker.unique_elements([1, 2, 3, 4])
    checker.unique_elements([1, 2, 3, 4], integers)
    checker.unique_elements([])


def test_unique_elements_reports_offending_pair(checker, integers):
    with pytest.raises(ConstraintViolation) as excinfo:
        checker.unique_elements([1, 2, 3, 1], integers)

    message = str(excinfo.value)
    assert "equal element[0]: 1" in message
    assert "equal element[3]: 1" in message


def test_unique_elements_uses_relation(checker):
    case_insensitive = relation(lambda a, b: a.lower() == b.lower())
    checker.unique_elements(["a", "A"])

    with pytest.raises(ConstraintViolation, match=re.escape("equal element[1]: A")):
        checker.unique_elements(["a", "A"], case_insensitive)


def test_unique_elements_argument_raises_argument_violation(checker, integers):
    checker.unique_elements_argument([1, 2, 3, 4], "ids", integers)
    checker.unique_elements_argument([1, 2, 3, 4], "ids")

    with pytest.raises(ArgumentViolation, match="argument ids has not unique elements"):
        checker.unique_elements_argument([1, 2, 3, 1], "ids", integers)

    with pytest.raises(ArgumentViolation):
        checker.unique_elements_argument([1, 2, 3, 1], "ids")


def test_unique_elements_argument_named_equivalence(checker):
    checker.unique_elements_argument([1, 2], "equivalence")

    with pytest.raises(ArgumentViolation, match="argument equivalence has not unique elements"):
        checker.unique_elements_argument([1, 1], "equivalence")

    with pytest.raises(NullArgument, match="argument equivalence must not be None"):
        checker.unique_elements_argument(None, "equivalence")


def test_argument_variant_and_assertion_variant_raise_different_kinds(checker):
    with pytest.raises(ArgumentViolation) as argument_error:
        checker.unique_elements_argument([1, 1], "values")
    with pytest.raises(ConstraintViolation) as constraint_error:
        checker.unique_elements([1, 1])

    assert not isinstance(argument_error.value, AssertionError)
    assert not isinstance(constraint_error.value, ValueError)


# --- contains / contains_not -------------------------------------------------


def test_contains(checker):
    checker.contains(2, [1, 2])
    checker.contains_all([2, 1], [1, 2, 3])

    with pytest.raises(ConstraintViolation, match="expected <4>"):
        checker.contains_all([1, 4], [1, 2, 3])


def test_contains_not(checker):
    checker.contains_not(4, {1, 2, 3})
    checker.contains_not("x", {"a": 1}.keys())

    with pytest.raises(ConstraintViolation, match="does contain the not expected item 2"):
        checker.contains_not(2, frozenset({1, 2}))


def test_contains_not_requires_a_set(checker):
    with pytest.raises(ArgumentViolation, match="type Set expected"):
        checker.contains_not(4, [1, 2, 3])


def test_unhashable_items_are_not_contained_in_hashed_containers(checker):
    checker.contains_not([1], {1, 2})
    checker.contains_not({"a": 1}, frozenset({"a"}))

    with pytest.raises(ConstraintViolation, match=r"does not contain \[1\]"):
        checker.contains_exact([[1]], {1})

    with pytest.raises(ConstraintViolation, match="collection does not contain expected item"):
        checker.contains([1], {1, 2})

    with pytest.raises(ConstraintViolation, match="collection does not contain expected element"):
        checker.contains_exact_item([1], {1: "one"})


# --- arity counters ----------------------------------------------------------


def test_contains_exact_one_true(checker):
    checker.contains_exact_one_true(False, True, False, False)
    checker.contains_exact_one_true(True, False)


@pytest.mark.parametrize(
    "values, count",
    [
        ((True, True), 2),
        ((False, False), 0),
        ((False, False, True, True, True), 3),
    ],
)
def test_contains_exact_one_true_reports_count(checker, values, count):
    with pytest.raises(ConstraintViolation, match=f"{count} true values found"):
        checker.contains_exact_one_true(*values)


def test_contains_exact_one_not_null(checker):
    checker.contains_exact_one_not_null(None, "a", None)

    with pytest.raises(ConstraintViolation, match="0 non-None values found"):
        checker.contains_exact_one_not_null(None, None)

    with pytest.raises(ConstraintViolation, match="2 non-None values found"):
        checker.contains_exact_one_not_null(0, None, "")


def test_contains_zero_or_one_not_null(checker):
    checker.contains_zero_or_one_not_null(None, None)
    checker.contains_zero_or_one_not_null(None, None, 0)

    with pytest.raises(ConstraintViolation, match="2 non-None values found"):
        checker.contains_zero_or_one_not_null(1, None, False)


# --- repeatability -----------------------------------------------------------


def test_checks_do_not_mutate_inputs_and_repeat_identically(checker, integers):
    expected = [1, 2, 3]
    found = [3, 2, 1]
    for _ in range(2):
        checker.contains_exact(expected, found, integers)
    assert expected == [1, 2, 3]
    assert found == [3, 2, 1]

    messages = []
    for _ in range(2):
        with pytest.raises(ConstraintViolation) as excinfo:
            checker.same_order(expected, found)
        messages.append(str(excinfo.value))
    assert messages[0] == messages[1]
