import pytest
from verlax.version import parse, sort_versions, latest, earliest


def texts(versions):
    return [v.original_text for v in versions]


class TestSortVersions:
    """Tests for sorting mixed lists of version strings."""

    def test_sort(self):
        result = sort_versions(["1.10", "1.9", "1.9-beta2", "1.9-rc1", "1.0"])
        assert texts(result) == ["1.0", "1.9-beta2", "1.9-rc1", "1.9", "1.10"]

    def test_reverse(self):
        result = sort_versions(["1.10", "1.9", "1.9-beta2", "1.9-rc1", "1.0"], reverse=True)
        assert texts(result) == ["1.10", "1.9", "1.9-rc1", "1.9-beta2", "1.0"]

    @pytest.mark.parametrize("reverse", [False, True])
    def test_stable_for_equal_versions(self, reverse):
        assert texts(sort_versions(["1.0", "1.0.0", "1"], reverse=reverse)) == ["1.0", "1.0.0", "1"]

    def test_accepts_versions_and_strings(self):
        v = parse("2.0")
        result = sort_versions([v, "1.0"])
        assert texts(result) == ["1.0", "2.0"]
        assert result[1] is v

    def test_empty_sentinel_sorts_like_a_bare_record(self):
        assert texts(sort_versions(["1.0", "", "0.1"])) == ["", "0.1", "1.0"]

    def test_empty_input(self):
        assert sort_versions([]) == []


class TestLatestEarliest:
    """Tests for picking the newest and oldest version."""

    def test_latest(self):
        assert latest(["1.0", "", "2.0-rc1", "1.9.9"]).original_text == "2.0-rc1"

    def test_earliest(self):
        assert earliest(["1.0", "0.9-alpha", ""]).original_text == "0.9-alpha"

    @pytest.mark.parametrize("items", [[], [""], ["", ""]])
    def test_nothing_comparable(self, items):
        assert latest(items) is None
        assert earliest(items) is None

    def test_generator_input(self):
        assert latest(s for s in ["1.0", "1.1"]).original_text == "1.1"
