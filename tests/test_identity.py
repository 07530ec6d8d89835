from profile_parsing.identity import find_pre_summary_trio

TEXT = """Languages
English
Jane Doe

Staff Engineer at Initech

Austin, Texas
Summary
Hello"""


def test_trio():
    trio = find_pre_summary_trio(TEXT)
    assert (trio.name, trio.headline, trio.location) == ("Jane Doe", "Staff Engineer at Initech", "Austin, Texas")
    assert trio.start_offset == TEXT.index("Jane Doe")


def test_trio_is_all_or_nothing():
    assert find_pre_summary_trio("Jane Doe\n\nEngineer\nSummary\nHello") is None
    assert find_pre_summary_trio("Summary\nHello") is None


def test_trio_needs_summary_header():
    assert find_pre_summary_trio("a\nb\nc\nd") is None
    assert find_pre_summary_trio("") is None
