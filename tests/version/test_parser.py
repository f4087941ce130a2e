import pytest
from verlax.version.parser import VersionParser, parse, trim_release, is_date
from verlax.version.qualifier import Qualifier


class TestParse:
    """Tests for classifying tokens into release, date and qualifiers."""

    @pytest.mark.parametrize("version_str, expected_release, expected_date, expected_pre", [
        ("1.2.3", (1, 2, 3), None, ()),
        ("1.0.10", (1, 0, 10), None, ()),
        ("1.0-alpha1", (1,), None, (Qualifier("alpha", 1),)),
        ("1.0_rc2", (1,), None, (Qualifier("rc", 2),)),
        ("1.0-a1", (1,), None, (Qualifier("alpha", 1),)),
        ("1.0-RC1", (1,), None, (Qualifier("rc", 1),)),
        ("2.0m3", (2,), None, (Qualifier("milestone", 3),)),
        ("1.0.0-SNAPSHOT", (1,), None, (Qualifier("snapshot", 0),)),
        ("1.0-rc-2", (1,), None, (Qualifier("rc", 2),)),
        ("1.0-foo", (1,), None, (Qualifier("foo", 0),)),
        ("1.0-beta.2.3", (1,), None, (Qualifier("beta", 2), Qualifier("3", 0))),
        ("2023.01.15", (2023, 1, 15), None, ()),
        ("20230115", (), "20230115000000", ()),
        ("1.2.3.20230115120000", (1, 2, 3), "20230115120000", ()),
        ("1.0-alpha-20230115", (1,), "20230115000000", (Qualifier("alpha", 0),)),
        ("20230115.5.6", (), "20230115000000", (Qualifier("5", 0), Qualifier("6", 0))),
        ("v1.0", (), None, (Qualifier("v", 1), Qualifier("0", 0))),
    ])
    def test_version_parsing(self, version_str, expected_release, expected_date, expected_pre):
        """Verify that the parser separates release, date and qualifiers."""
        v = parse(version_str)
        assert v.release == expected_release
        assert v.date == expected_date
        assert v.pre_list == expected_pre
        assert v.original_text == version_str

    @pytest.mark.parametrize("version_str, expected_release", [
        ("1", (1,)),
        ("1.0", (1,)),
        ("1.0.0", (1,)),
        ("1.5.0.0", (1, 5)),
        ("0.0.0", ()),
        ("0", ()),
        ("0.1", (0, 1)),
    ])
    def test_trailing_zeros_are_trimmed(self, version_str, expected_release):
        assert parse(version_str).release == expected_release

    def test_date_is_not_a_release_component(self):
        v = parse("1.0.20230115")
        assert v.release == (1,)
        assert v.date == "20230115000000"

    @pytest.mark.parametrize("text", [
        "", "...", "-", "é", "\t\n",
    ])
    def test_anything_parses(self, text):
        """Parsing has no failure path; junk just yields an empty record."""
        v = parse(text)
        assert v.release == ()
        assert v.date is None
        assert v.pre_list == ()
        assert v.original_text == text

    @pytest.mark.parametrize("text, expected_release, expected_pre", [
        ("1" * 5000, (), (Qualifier("1" * 5000, 0),)),
        ("1.0-rc" + "7" * 5000, (1,), (Qualifier("rc", 0), Qualifier("7" * 5000, 0))),
        ("rc" + "9" * 4301, (), (Qualifier("rc", 0), Qualifier("9" * 4301, 0))),
    ])
    def test_oversized_digit_runs_become_qualifiers(self, text, expected_release, expected_pre):
        """Digit runs too long to convert to int still parse, as qualifiers."""
        v = parse(text)
        assert v.release == expected_release
        assert v.pre_list == expected_pre
        assert v.original_text == text

    def test_original_text_is_verbatim(self):
        v = parse("  1.0-Beta ")
        assert v.original_text == "  1.0-Beta "
        assert str(v) == "  1.0-Beta "
        assert v.pre_list == (Qualifier("beta", 0),)


class TestMarkers:
    """Tests for the two ways of treating '_' and '-'."""

    @pytest.mark.parametrize("version_str", ["1-2-3", "1_2_3", "1.2-3"])
    def test_markers_are_noise_by_default(self, version_str):
        assert parse(version_str).release == (1, 2, 3)

    def test_markers_can_end_release_section(self):
        parser = VersionParser(markers_end_release=True)
        v = parser.parse("1-2-3")
        assert v.release == (1,)
        assert v.pre_list == (Qualifier("2", 0), Qualifier("3", 0))

    def test_marker_blocks_qualifier_suffix_when_significant(self):
        parser = VersionParser(markers_end_release=True)
        v = parser.parse("1.0-rc-2")
        assert v.pre_list == (Qualifier("rc", 0), Qualifier("2", 0))

    def test_plain_separators_stay_noise(self):
        parser = VersionParser(markers_end_release=True)
        assert parser.parse("1.2.3").release == (1, 2, 3)
        assert parser.parse("1.0_rc2").pre_list == (Qualifier("rc", 2),)


class TestDates:
    """Tests for the date grammar."""

    @pytest.mark.parametrize("text", [
        "20100101", "20291231", "2023011512", "202301151230", "20230115123059",
    ])
    def test_dates(self, text):
        assert is_date(text)
        assert parse(text).date == text.ljust(14, "0")

    @pytest.mark.parametrize("text", [
        "20091231",         # year before 2010
        "20300101",         # year after 2029
        "20231301",         # month 13
        "20230132",         # day 32
        "20230100",         # day 0
        "202301150",        # odd length
        "2023011512305901", # too long
        "2023",
    ])
    def test_not_dates(self, text):
        assert not is_date(text)
        assert parse(text).date is None


def test_trim_release():
    assert trim_release([1, 0, 2, 0, 0]) == [1, 0, 2]
    assert trim_release([0, 0]) == []
    assert trim_release([]) == []
