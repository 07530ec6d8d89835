from profile_parsing.summary import parse_summary


def test_plain_summary():
    d = parse_summary("First paragraph\nstill first.\n\nSecond.")
    assert d.intro == ["First paragraph\nstill first.", "Second."]
    assert d.bullets == [] and d.toolbox == []


def test_markers():
    text = "Intro.\nWhat I bring:\n- One\n– Two\nnot a bullet\nToolbox:\nPython, Go\nDocker"
    d = parse_summary(text)
    assert d.intro == ["Intro."]
    assert d.bullets == ["One", "Two"]
    assert d.toolbox == ["Python", "Go", "Docker"]


def test_blank_summary():
    assert parse_summary(None) is None
    assert parse_summary("  \n ") is None
