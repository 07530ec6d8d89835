from profile_parsing.links import clean_url, extract_emails, extract_links, pick_linkedin


def test_priority_and_dedupe():
    contact = "alice@example.com\nhttps://github.com/alice"
    text = "Contact\n" + contact + "\nSummary\nCode at https://github.com/alice and www.linkedin.com/in/alice"
    assert extract_links(text, contact) == [
        "mailto:alice@example.com",
        "https://github.com/alice",
        "https://www.linkedin.com/in/alice",
    ]


def test_bare_domains_only_from_contact():
    contact = "bob@mail.example.org\nbob.dev (Personal)"
    text = contact + "\nI moved to node.js last year."
    links = extract_links(text, contact)
    assert links == ["mailto:bob@mail.example.org", "https://bob.dev"]


def test_trailing_punctuation():
    assert extract_links("See (https://example.com/a).") == ["https://example.com/a"]
    assert clean_url("www.example.com,") == "https://www.example.com"
    assert clean_url("mailto:x@y.io") == "mailto:x@y.io"


def test_emails():
    assert extract_emails("a@b.io", "x a@b.io c@d.com") == ["a@b.io", "c@d.com"]
    assert extract_emails(None, "") == []


def test_no_links():
    assert extract_links("") == []


def test_pick_linkedin():
    assert pick_linkedin(["mailto:a@b.io", "https://www.linkedin.com/in/a"]) == "https://www.linkedin.com/in/a"
    assert pick_linkedin([]) is None
