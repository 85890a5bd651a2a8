"""Collection comparison checks.

Containers are compared either with native membership (``in``) or with a
caller-supplied :class:`~verity.equivalence.Equivalence`. The relation may
compare elements of different types, so no hashing is involved and matching
is a linear or quadratic scan. Containers are expected to be small.

Every check fails fast: the first violation found raises, later ones are
not looked for.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence, Set
from typing import Any, TypeVar

from verity.equivalence import NATIVE, Equivalence
from verity.errors import ArgumentViolation, RelationError
from verity.failures import format_message
from verity.values import ValueChecks

T = TypeVar("T")
K = TypeVar("K")


def _first_duplicate(
    collection: Collection[T], equivalence: Equivalence[T, T]
) -> tuple[int, T, int, T] | None:
    """Return the first pair ``i < k`` whose elements are related."""
    elements = list(collection)
    size = len(elements)
    for i in range(size):
        element_i = elements[i]
        for k in range(i + 1, size):
            element_k = elements[k]
            if equivalence.equals(element_i, element_k):
                return i, element_i, k, element_k
    return None


def _count_present(values: Sequence[Any]) -> int:
    return sum(1 for value in values if value is not None)


def _contains(item: Any, found: Collection[Any]) -> bool:
    """Native membership; an unhashable item is not contained in a hashed container."""
    try:
        return item in found
    except TypeError:
        return False


class CollectionChecks(ValueChecks):
    """Compare containers under native equality or a pluggable relation."""

    def same_size(
        self, expected: Collection[T] | None, found: Collection[K] | None, *, message: str | None = None
    ) -> None:
        """Assert that both containers have the same number of elements."""
        if not self._present(("expected", expected), ("found", found)):
            return
        if len(found) != len(expected):
            self.fail_compare(
                format_message(
                    message,
                    "[Assertion failed] - collections do not have the same size"
                    f" - expected collection={expected} found collection={found}",
                ),
                len(expected),
                len(found),
            )

    def contains_exact(
        self,
        expected: Collection[T] | None,
        found: Collection[K] | None,
        equivalence: Equivalence[T, K] | None = None,
        *,
        message: str | None = None,
    ) -> None:
        """Assert that both containers hold the same elements, in any order.

        The sizes must match and every expected element must be found. Found
        elements are not consumed, so duplicates are not counted:
        ``[1, 1, 2]`` and ``[1, 2, 2]`` pass.

        Parameters
        ----------
        expected : Collection
            Elements that must be present.
        found : Collection
            Container under test.
        equivalence : Equivalence | None
            Relation used to match an expected element against found
            elements. Without one, native ``in`` is used; an unhashable
            element counts as missing from a set or dict.
        message : str | None
            Prefix for the failure message.

        Raises
        ------
        ConstraintViolation
            If the sizes differ or an expected element has no match.
        """
        if not self._present(("expected", expected), ("found", found)):
            return
        self.same_size(expected, found, message=message)

        if equivalence is None:
            for expected_item in expected:
                if not _contains(expected_item, found):
                    self.fail_compare(
                        format_message(
                            message, f"[Assertion failed] - collection {found} does not contain {expected_item}"
                        ),
                        expected,
                        found,
                    )
            return

        for expected_item in expected:
            if not any(equivalence.equals(expected_item, found_item) for found_item in found):
                self.fail_compare(
                    format_message(
                        message,
                        f"collections do not contain equal elements - first not found element={expected_item}",
                    ),
                    expected,
                    found,
                )

    def contains_exact_item(
        self,
        expected_item: T | None,
        found: Collection[K] | None,
        equivalence: Equivalence[T, K] | None = None,
        *,
        message: str | None = None,
    ) -> None:
        """Assert that ``found`` holds exactly one element, equal to ``expected_item``.

        ``expected_item`` may be ``None``.
        """
        if not self._present(("found", found)):
            return

        if equivalence is None:
            if len(found) != 1:
                self.fail_compare(
                    format_message(message, "[Assertion failed] - collection does not have exactly one item"),
                    expected_item,
                    found,
                )
            if not _contains(expected_item, found):
                self.fail_compare(
                    format_message(message, "[Assertion failed] - collection does not contain expected element"),
                    expected_item,
                    found,
                )
            return

        self.has_size(1, found, message=message)
        (only,) = found
        if not equivalence.equals(expected_item, only):
            self.fail_compare(
                format_message(message, "collection does not contain expected (one) element"),
                expected_item,
                found,
            )

    def same_order(
        self,
        expected: Sequence[T] | None,
        found: Sequence[K] | None,
        equivalence: Equivalence[T, K] | None = None,
        *,
        message: str | None = None,
    ) -> None:
        """Assert equal sequences, element by element.

        Stops at the first mismatching index. If ``equivalence`` raises, the
        error is re-raised as :class:`~verity.errors.RelationError` with the
        index and both elements, chained to the original exception.
        """
        if not self._present(("expected", expected), ("found", found)):
            return
        if not (self._instance_of(expected, Sequence, "expected") and self._instance_of(found, Sequence, "found")):
            return
        self.same_size(expected, found, message=message)

        for index in range(len(expected)):
            expected_element = expected[index]
            found_element = found[index]
            if equivalence is None:
                equal = NATIVE.equals(expected_element, found_element)
            else:
                try:
                    equal = equivalence.equals(expected_element, found_element)
                except Exception as exc:
                    raise RelationError(index, expected_element, found_element, expected, found) from exc
            if not equal:
                self.fail_compare(
                    format_message(
                        message,
                        "[Assertion failed] - the elements have not the same order - first difference at index"
                        f" {index} - expected element={expected_element}, found element={found_element}",
                    ),
                    expected,
                    found,
                )

    def contains_at_least(
        self,
        expected_item: T | None,
        found: Collection[K] | None,
        equivalence: Equivalence[T, K] = NATIVE,
        *,
        message: str | None = None,
    ) -> None:
        """Assert that at least one found element relates to ``expected_item``."""
        if not self._present(("found", found), ("equivalence", equivalence)):
            return
        for found_item in found:
            if equivalence.equals(expected_item, found_item):
                return
        self.fail_compare(
            format_message(message, "[Assertion failed] - expected object not found in collection"),
            expected_item,
            found,
        )

    def contains_at_least_all(
        self,
        expected: Collection[T] | None,
        found: Collection[K] | None,
        equivalence: Equivalence[T, K] = NATIVE,
        *,
        message: str | None = None,
    ) -> None:
        """Run :meth:`contains_at_least` for each expected element; the first miss fails."""
        if not self._present(("expected", expected), ("found", found), ("equivalence", equivalence)):
            return
        for expected_item in expected:
            self.contains_at_least(expected_item, found, equivalence, message=message)

    def contains(self, expected_item: T | None, found: Collection[T] | None, *, message: str | None = None) -> None:
        if not self._present(("found", found)):
            return
        if not _contains(expected_item, found):
            self.fail_compare(
                format_message(message, "[Assertion failed] - collection does not contain expected item"),
                expected_item,
                found,
            )

    def contains_all(
        self, expected_items: Collection[T] | None, found: Collection[T] | None, *, message: str | None = None
    ) -> None:
        if not self._present(("expected_items", expected_items), ("found", found)):
            return
        for expected_item in expected_items:
            self.contains(expected_item, found, message=message)

    def contains_not(self, not_expected_item: T | None, found: Set[T] | None, *, message: str | None = None) -> None:
        """Assert that a set does not hold ``not_expected_item``.

        ``found`` must be a set: absence has no multiplicity to care about.
        An unhashable item is never in the set, so it passes.
        """
        if not self._present(("found", found)):
            return
        if not self._instance_of(found, Set, "found"):
            return
        if _contains(not_expected_item, found):
            self.fail(
                format_message(
                    message,
                    f"[Assertion failed] - collection {found} does contain the not expected item {not_expected_item}",
                )
            )

    def contains_exact_one_true(
        self, value1: bool, value2: bool, *values: bool, message: str | None = None
    ) -> None:
        all_values = (value1, value2, *values)
        true_count = sum(1 for value in all_values if value)
        if true_count != 1:
            self.fail(
                format_message(
                    message,
                    f"[Assertion failed] - the booleans {list(all_values)} do not contain exactly one True value"
                    f" - {true_count} true values found",
                )
            )

    def contains_zero_or_one_not_null(
        self, value1: Any, value2: Any, *values: Any, message: str | None = None
    ) -> None:
        all_values = (value1, value2, *values)
        present = _count_present(all_values)
        if present > 1:
            self.fail(
                format_message(
                    message,
                    f"[Assertion failed] - the objects {list(all_values)} do not contain zero or one non-None value"
                    f" - {present} non-None values found",
                )
            )

    def contains_exact_one_not_null(
        self, value1: Any, value2: Any, *values: Any, message: str | None = None
    ) -> None:
        all_values = (value1, value2, *values)
        present = _count_present(all_values)
        if present != 1:
            self.fail(
                format_message(
                    message,
                    f"[Assertion failed] - the objects {list(all_values)} do not contain exactly one non-None value"
                    f" - {present} non-None values found",
                )
            )

    def unique_elements(
        self,
        collection: Collection[T] | None,
        equivalence: Equivalence[T, T] = NATIVE,
        *,
        message: str | None = None,
    ) -> None:
        """Assert that no two positions of ``collection`` hold related elements."""
        if not self._present(("collection", collection), ("equivalence", equivalence)):
            return
        duplicate = _first_duplicate(collection, equivalence)
        if duplicate is not None:
            i, element_i, k, element_k = duplicate
            self.fail(
                format_message(
                    message,
                    "[Assertion failed] - collection has not unique elements - two (or more) elements are equal"
                    f" with respect to {equivalence!r} - equal element[{i}]: {element_i},"
                    f" equal element[{k}]: {element_k}, collection={collection}",
                )
            )

    def unique_elements_argument(
        self,
        collection: Collection[T] | None,
        argument_name: str,
        equivalence: Equivalence[T, T] = NATIVE,
    ) -> None:
        """Argument variant of :meth:`unique_elements`; raises ``ArgumentViolation``."""
        if not self._present((argument_name, collection), ("equivalence", equivalence)):
            return
        duplicate = _first_duplicate(collection, equivalence)
        if duplicate is not None:
            i, element_i, k, element_k = duplicate
            self._argument_failure(
                ArgumentViolation(
                    f"[Assertion failed] - collection on argument {argument_name} has not unique elements"
                    f" - two (or more) elements are equal with respect to {equivalence!r}"
                    f" - equal element[{i}]: {element_i}, equal element[{k}]: {element_k},"
                    f" collection={collection}"
                )
            )


__all__ = ["CollectionChecks"]
