from resume_signal_ai.services.text_cleaner import clean_resume_text


def test_normalizes_line_endings_and_spacing():
    raw = "Jane\u00a0Doe\r\n\r\n\r\n\r\nSKILLS  \r\n\tPython,   SQL\u200b"
    assert clean_resume_text(raw) == "Jane Doe\n\nSKILLS\nPython, SQL"


def test_blank_input_returns_empty_string():
    assert clean_resume_text("") == ""
    assert clean_resume_text("   \n\t ") == ""


def test_truncates_to_max_chars():
    assert clean_resume_text("a" * 100, max_chars=10) == "a" * 10
