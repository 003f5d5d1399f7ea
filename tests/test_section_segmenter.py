import pytest

from resume_signal_ai.cv_pipeline.section_segmenter import detect_header, segment_sections


def _is_subsequence(part: str, whole: str) -> bool:
    it = iter(whole)
    return all(ch in it for ch in part)


def test_sample_sections_in_detection_order(sample_resume):
    sections = segment_sections(sample_resume)
    assert sections.order == ("summary", "experience", "education", "skills", "projects", "achievements")
    assert sections.skills == "Python, Django, React, PostgreSQL, Docker, Leadership"
    assert sections.certifications is None
    assert "Jane Doe" not in "".join(content for _, content in sections.ordered_contents())


def test_section_contents_are_a_subsequence_of_the_text(sample_resume):
    sections = segment_sections(sample_resume)
    joined = "".join(content for _, content in sections.ordered_contents())
    assert _is_subsequence(joined, sample_resume)


def test_repeated_header_keeps_last_block_and_order_stays_a_subsequence():
    text = "Experience\nJob one\nEducation\nBSc\nExperience\nJob two"
    sections = segment_sections(text)
    assert sections.order == ("education", "experience")
    assert sections.experience == "Job two"
    joined = "".join(content for _, content in sections.ordered_contents())
    assert _is_subsequence(joined, text)


def test_no_headers_gives_empty_set():
    sections = segment_sections("Just a paragraph about me and the things I have built over the years.")
    assert sections.is_empty()
    assert len(sections) == 0
    assert segment_sections("").is_empty()


def test_header_forms():
    assert detect_header("WORK EXPERIENCE") == ("experience", "")
    assert detect_header("Skills & Tools:") == ("skills", "")
    assert detect_header("Skills: Python, SQL") == ("skills", "Python, SQL")
    assert detect_header("Licenses") == ("certifications", "")
    assert detect_header("I gained experience with many teams") is None


def test_long_lines_are_never_headers():
    line = "Experience " + "x" * 60
    assert detect_header(line) is None
    assert detect_header("Education", max_length=5) is None


def test_inline_header_content_starts_the_section():
    sections = segment_sections("Skills: Python, SQL\nDocker")
    assert sections.skills == "Python, SQL\nDocker"


@pytest.mark.parametrize(
    "line,kind",
    [
        ("Relevant Experience", "experience"),
        ("Core Competencies", "skills"),
        ("Key Skills", "skills"),
        ("Executive Summary", "summary"),
        ("PROFESSIONAL PROFILE", "summary"),
        ("Personal Projects", "projects"),
        ("Professional Certifications", "certifications"),
        ("Career Objective:", "summary"),
        ("Areas of Expertise", "skills"),
    ],
)
def test_qualified_section_names_are_headers(line, kind):
    assert detect_header(line) == (kind, "")


def test_qualifiers_alone_or_in_prose_are_not_headers():
    assert detect_header("Professional") is None
    assert detect_header("Led three data projects") is None
    assert detect_header("Relevant work at a large bank") is None


def test_resume_with_qualified_headers_is_segmented():
    text = (
        "Jane Doe\njane@x.com\n"
        "Professional Profile\nBackend developer building payment APIs.\n"
        "Relevant Experience\nEngineer at Acme Corp 2019-2022\n"
        "Core Competencies\nPython, SQL"
    )
    sections = segment_sections(text)
    assert sections.order == ("summary", "experience", "skills")
    assert sections.experience == "Engineer at Acme Corp 2019-2022"
    assert sections.skills == "Python, SQL"
