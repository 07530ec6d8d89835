import re
import pytest

from profile_parsing.normalizers import (
    drop_noise_lines,
    join_broken_urls,
    normalize_date_range,
    normalize_spaces_dashes,
    normalize_text,
    unify_newlines,
)

RAW = "  \r\nJane Doe\r\nPage 1 of 3\rwww.linkedin.com/in/\n\njane-doe (LinkedIn)\r\nSummary\nSee www.example.\ncom for more\n\n  "


def test_unify_newlines():
    assert unify_newlines("a\r\nb\rc\nd") == "a\nb\nc\nd"


def test_drop_noise_lines():
    assert drop_noise_lines("Name\n  Page 2 of 10 \nSummary") == "Name\nSummary"
    assert drop_noise_lines("Name\nPage one", [re.compile(r"^Page one$")]) == "Name"


def test_join_broken_urls():
    assert join_broken_urls("www.linkedin.com/in/\njane (LinkedIn)") == "www.linkedin.com/in/jane (LinkedIn)"
    assert join_broken_urls("see www.example.\ncom/page") == "see www.example.com/page"
    assert join_broken_urls("www.linkedin.com/in/ja\nne (LinkedIn)") == "www.linkedin.com/in/jane (LinkedIn)"


def test_join_broken_urls_leaves_headers_alone():
    text = "www.example.com\nSummary\nwww.example.org\nTop Skills"
    assert join_broken_urls(text) == text
    sentence = "More at www.jane.dev.\nExperience\nEnds at www.jane.dev/\nEducation"
    assert join_broken_urls(sentence) == sentence
    assert join_broken_urls("Visit www.jane.dev.\nThanks for reading") == "Visit www.jane.dev.\nThanks for reading"


def test_normalize_text():
    out = normalize_text(RAW)
    assert out == (
        "Jane Doe\nwww.linkedin.com/in/jane-doe (LinkedIn)\nSummary\nSee www.example.com for more"
    )


def test_normalize_is_idempotent():
    once = normalize_text(RAW)
    assert normalize_text(once) == once


def test_normalize_empty():
    assert normalize_text("") == ""
    assert normalize_text(None) == ""


def test_spaces_and_dashes():
    assert normalize_spaces_dashes("Jan 2020 – Mar 2021 — x") == "Jan 2020 - Mar 2021 - x"


def test_normalize_date_range():
    assert normalize_date_range("Jan 2020 - Present") == ("2020-01", None)
    assert normalize_date_range("March 2019 – December 2021 (2 years 10 months)") == ("2019-03", "2021-12")
    assert normalize_date_range("Led a team of five") == (None, None)


AWKWARD = [
    "www.a.\nb.\nc\nd",
    "www.x.io/\n\nin/\nalice\nbob (LinkedIn)\nSummary",
    "www.x.io.\nSummary\nwww.y.io-\nExperience",
    "www.x.io\nab\ncd\nEF gh",
    "Page 1 of 2\nwww.x.io/\nPage 2 of 2\npath (Web)",
    "  \r\n www.x.io/\r\n\r\n 42 \r\nTop Skills \r\n",
    "www.\nwww.\nwww.x",
    "",
]


@pytest.mark.parametrize("raw", AWKWARD)
def test_normalize_is_idempotent_on_awkward_input(raw):
    once = normalize_text(raw)
    assert normalize_text(once) == once
