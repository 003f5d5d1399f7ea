import asyncio

from resume_signal_ai.cv_pipeline.education_extractor import (
    EducationExtractor,
    degree_level,
    extract_education,
    parse_degree_line,
)
from resume_signal_ai.cv_pipeline.section_segmenter import segment_sections
from resume_signal_ai.services.classifier import StaticClassifier

EDUCATION = (
    "EDUCATION\n"
    "B.S. in Computer Science, Stanford University, 2014 - 2018, GPA: 3.8/4.0\n"
    "Master of Science in Data Science\n"
    "Massachusetts Institute of Technology, 2019"
)


def test_degree_levels():
    assert degree_level("Bachelor of Arts") == "bachelor"
    assert degree_level("MBA, Wharton") == "master"
    assert degree_level("Ph.D. in Physics") == "doctorate"
    assert degree_level("Associate degree in Nursing") == "associate"
    assert degree_level("Basketball team captain") is None


def test_full_degree_line():
    entry = parse_degree_line("B.S. in Computer Science, Stanford University, 2014 - 2018, GPA: 3.8/4.0")
    assert entry.degree == "B.S. in Computer Science"
    assert entry.institution == "Stanford University"
    assert entry.field == "Computer Science"
    assert (entry.start_date, entry.end_date) == ("2014", "2018")
    assert entry.gpa == "3.8/4.0"


def test_institution_from_adjacent_line():
    entries = extract_education(EDUCATION, segment_sections(EDUCATION))
    assert len(entries) == 2
    master = entries[1]
    assert master.degree == "Master of Science in Data Science"
    assert master.institution == "Massachusetts Institute of Technology"
    assert master.field == "Data Science"


def test_unknown_institution_is_kept():
    entry = parse_degree_line("Bachelor's degree, 2012")
    assert entry.institution == "Unknown"
    assert entry.end_date == "2012"
    assert entry.start_date is None


def test_honours_without_duplicates():
    entry = parse_degree_line("BSc Mathematics, University of Leeds, magna cum laude")
    assert entry.achievements == ["Magna Cum Laude"]


def test_full_text_fallback_without_section():
    text = "Jane Doe\nPhD in Chemistry from Oxford University"
    entries = extract_education(text, segment_sections(text))
    assert [e.institution for e in entries] == ["Oxford University"]
    assert entries[0].degree == "PhD in Chemistry"


def test_enhanced_mode_uses_ai_entries():
    classifier = StaticClassifier(
        {"extract_education": {"education": [{"institution": "MIT", "degree": "MSc", "field": "CS", "endDate": "2020"}]}}
    )
    entries, used_ai = asyncio.run(EducationExtractor(classifier, enhanced=True).extract(EDUCATION, segment_sections(EDUCATION)))
    assert used_ai
    assert [(e.institution, e.degree, e.end_date) for e in entries] == [("MIT", "MSc", "2020")]


def test_enhanced_mode_falls_back_on_garbage():
    classifier = StaticClassifier({"extract_education": "no idea"})
    entries, used_ai = asyncio.run(EducationExtractor(classifier, enhanced=True).extract(EDUCATION, segment_sections(EDUCATION)))
    assert not used_ai
    assert len(entries) == 2


def test_abbreviations_need_dots_or_a_subject():
    assert degree_level("MS in Physics, MIT") == "master"
    assert degree_level("BA of Economics") == "bachelor"
    assert degree_level("M.A., Columbia University") == "master"
    assert degree_level("Cut p99 latency from 300 ms to 40 ms") is None
    assert degree_level("Moved to MA in 2020") is None
    assert degree_level("Advanced MS Excel user") is None


def test_units_and_places_are_not_education_in_full_text():
    text = "Jane Doe\nCut p99 latency from 300 ms to 40 ms\nMoved to MA in 2020"
    assert extract_education(text, segment_sections(text)) == []
