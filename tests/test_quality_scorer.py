from resume_signal_ai.cv_pipeline.quality_scorer import score_quality, word_count
from resume_signal_ai.schemas.contact import ContactFields
from resume_signal_ai.schemas.sections import SectionSet


def _words(n: int, sep: str = " ") -> str:
    return sep.join(["lorem"] * n)


def _assert_sum(q):
    assert q.score == min(100, q.completeness + q.clarity + q.relevance + q.formatting)
    for part in (q.completeness, q.clarity, q.relevance, q.formatting):
        assert 0 <= part <= 25


def test_fifty_word_resume_without_contact_or_sections():
    q = score_quality(_words(50), SectionSet(), ContactFields())
    assert q.completeness == 0
    assert q.clarity == 0
    assert q.score == 0
    _assert_sum(q)


def test_short_penalty_applies_after_structure_bonus():
    q = score_quality(_words(25) + "\n" + _words(25), SectionSet(), ContactFields())
    assert q.clarity == 0


def test_clarity_tiers():
    assert score_quality(_words(150, "\n"), SectionSet(), ContactFields()).clarity == 15
    assert score_quality(_words(400, "\n"), SectionSet(), ContactFields()).clarity == 25
    assert score_quality(_words(1300, "\n"), SectionSet(), ContactFields()).clarity == 15
    assert score_quality(_words(90), SectionSet(), ContactFields()).clarity == 0
    assert score_quality(_words(120), SectionSet(), ContactFields()).clarity == 10


def test_completeness_counts_contact_and_sections():
    contact = ContactFields(name="Jane Doe", email="jane@x.com", phone="+14155550100", confidence={})
    sections = SectionSet.from_blocks([("experience", "Engineer"), ("skills", "Python")])
    assert score_quality("text", sections, contact).completeness == 25
    only_education = SectionSet.from_blocks([("education", "BSc")])
    assert score_quality("text", only_education, ContactFields()).completeness == 5


def test_relevance_is_capped():
    assert score_quality("Software developer", SectionSet(), ContactFields()).relevance == 16
    q = score_quality("developer engineer programming software", SectionSet(), ContactFields())
    assert q.relevance == 25


def test_formatting_points():
    sections = SectionSet.from_blocks([("summary", "x"), ("experience", "y"), ("skills", "z")])
    q = score_quality("mail me at a@b.io since 2020", sections, ContactFields())
    assert q.formatting == 25
    assert score_quality("plain words", SectionSet.from_blocks([("summary", "x")]), ContactFields()).formatting == 5


def test_full_resume_score_is_sum(sample_resume):
    from resume_signal_ai.cv_pipeline.field_extractor import extract_contact_fields
    from resume_signal_ai.cv_pipeline.section_segmenter import segment_sections

    q = score_quality(sample_resume, segment_sections(sample_resume), extract_contact_fields(sample_resume))
    assert q.completeness == 25
    assert q.formatting == 25
    _assert_sum(q)


def test_word_count_matches_whitespace_split():
    assert word_count("a  b\nc") == 3
    assert word_count("") == 1


def test_qualified_headers_count_towards_completeness_and_formatting():
    from resume_signal_ai.cv_pipeline.section_segmenter import segment_sections

    text = (
        "Jane Doe\njane@x.com\n+1 415 555 0100\n"
        "Professional Profile\nBackend developer building payment APIs.\n"
        "Relevant Experience\nEngineer at Acme Corp 2019-2022\n"
        "Core Competencies\nPython, SQL"
    )
    contact = ContactFields(name="Jane Doe", email="jane@x.com", phone="+14155550100")
    q = score_quality(text, segment_sections(text), contact)
    assert q.completeness == 25
    assert q.formatting == 25
    _assert_sum(q)
