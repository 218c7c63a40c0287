from functools import lru_cache
import random

import pytest

from comparepack.diff import comparison_key, diff_lines

PROPERTY_SEED = 20261019
ALPHABET = ("a", "A", " a", "b", "B ", "c", "")


def _random_lines(rng: random.Random) -> list[str]:
    return [rng.choice(ALPHABET) for _ in range(rng.randint(0, 8))]


def _cases(count: int = 150) -> list[tuple[list[str], list[str], bool, bool]]:
    rng = random.Random(PROPERTY_SEED)
    return [
        (
            _random_lines(rng),
            _random_lines(rng),
            bool(rng.getrandbits(1)),
            bool(rng.getrandbits(1)),
        )
        for _ in range(count)
    ]


def _lcs_length(left: list[str], right: list[str]) -> int:
    @lru_cache(maxsize=None)
    def walk(i: int, j: int) -> int:
        if i == len(left) or j == len(right):
            return 0
        if left[i] == right[j]:
            return 1 + walk(i + 1, j + 1)
        return max(walk(i + 1, j), walk(i, j + 1))

    return walk(0, 0)


@pytest.mark.parametrize("ordered", [True, False])
def test_every_line_is_accounted_for_exactly_once(ordered: bool) -> None:
    for expected, current, ignore_case, trim in _cases():
        result = diff_lines(expected, current, ordered=ordered, ignore_case=ignore_case, trim=trim)
        summary = result.summary()

        assert len(result.entries) == summary["same"] + summary["added"] + summary["removed"]
        assert summary["same"] + summary["removed"] == len(expected)
        assert summary["same"] + summary["added"] == len(current)
        assert len(result.missing_lines) + summary["same"] == len(expected)
        assert len(result.extra_lines) + summary["same"] == len(current)
        assert sorted(e.original_index for e in result.entries if e.original_index is not None) == list(
            range(len(expected))
        )
        assert sorted(e.current_index for e in result.entries if e.current_index is not None) == list(
            range(len(current))
        )


@pytest.mark.parametrize("ordered", [True, False])
def test_row_indices_match_row_type_and_keys(ordered: bool) -> None:
    for expected, current, ignore_case, trim in _cases():
        result = diff_lines(expected, current, ordered=ordered, ignore_case=ignore_case, trim=trim)

        for entry in result.entries:
            assert entry.original_index is not None or entry.current_index is not None
            if entry.type == "same":
                assert entry.original_index is not None and entry.current_index is not None
                assert comparison_key(
                    expected[entry.original_index], ignore_case=ignore_case, trim=trim
                ) == comparison_key(current[entry.current_index], ignore_case=ignore_case, trim=trim)
                assert entry.expected_text == expected[entry.original_index]
                assert entry.current_text == current[entry.current_index]
            elif entry.type == "removed":
                assert entry.current_index is None
                assert entry.text == expected[entry.original_index]
            else:
                assert entry.original_index is None
                assert entry.text == current[entry.current_index]


@pytest.mark.parametrize("ordered", [True, False])
def test_missing_and_extra_lines_follow_source_order(ordered: bool) -> None:
    for expected, current, ignore_case, trim in _cases():
        result = diff_lines(expected, current, ordered=ordered, ignore_case=ignore_case, trim=trim)

        removed = sorted(e.original_index for e in result.entries if e.type == "removed")
        added = sorted(e.current_index for e in result.entries if e.type == "added")
        assert result.missing_lines == [expected[index] for index in removed]
        assert result.extra_lines == [current[index] for index in added]


def test_ordered_diff_keeps_both_sides_monotonic_and_maximal() -> None:
    for expected, current, ignore_case, trim in _cases():
        result = diff_lines(expected, current, ordered=True, ignore_case=ignore_case, trim=trim)

        original = [e.original_index for e in result.entries if e.original_index is not None]
        current_side = [e.current_index for e in result.entries if e.current_index is not None]
        assert original == sorted(original)
        assert current_side == sorted(current_side)

        expected_keys = [comparison_key(line, ignore_case=ignore_case, trim=trim) for line in expected]
        current_keys = [comparison_key(line, ignore_case=ignore_case, trim=trim) for line in current]
        assert result.summary()["same"] == _lcs_length(expected_keys, current_keys)


def test_unordered_diff_same_count_is_multiset_intersection() -> None:
    for expected, current, ignore_case, trim in _cases():
        result = diff_lines(expected, current, ignore_case=ignore_case, trim=trim)

        expected_keys = [comparison_key(line, ignore_case=ignore_case, trim=trim) for line in expected]
        current_keys = [comparison_key(line, ignore_case=ignore_case, trim=trim) for line in current]
        intersection = sum(
            min(expected_keys.count(key), current_keys.count(key)) for key in set(expected_keys)
        )
        assert result.summary()["same"] == intersection


@pytest.mark.parametrize("ordered", [True, False])
def test_identity_and_determinism(ordered: bool) -> None:
    for expected, current, ignore_case, trim in _cases(60):
        against_self = diff_lines(expected, list(expected), ordered=ordered, ignore_case=ignore_case, trim=trim)
        assert all(entry.type == "same" for entry in against_self.entries)
        assert against_self.missing_lines == []
        assert against_self.extra_lines == []

        first = diff_lines(expected, current, ordered=ordered, ignore_case=ignore_case, trim=trim)
        second = diff_lines(expected, current, ordered=ordered, ignore_case=ignore_case, trim=trim)
        assert first.to_dict() == second.to_dict()
