import asyncio

from resume_signal_ai.cv_pipeline.experience_analyzer import (
    ExperienceAnalyzer,
    analyze_experience,
    extract_company,
    extract_industries,
    parse_role_line,
)
from resume_signal_ai.cv_pipeline.section_segmenter import segment_sections
from resume_signal_ai.services.classifier import StaticClassifier

TWO_ROLES = (
    "EXPERIENCE\n"
    "Senior Developer at Globex Corp, 2018 - Present\n"
    "- Built APIs in Python\n"
    "Junior Developer - Initech LLC\n"
    "2015-2018\n"
    "- Fixed bugs"
)


def test_short_resume_tenure_and_company(short_resume):
    profile = analyze_experience(short_resume, segment_sections(short_resume))
    assert profile.total_years == 3
    assert "Acme Corp" in profile.companies
    assert profile.roles[0].title == "Engineer"
    assert profile.roles[0].company == "Acme Corp"
    assert profile.roles[0].duration == "2019-2022"


def test_present_resolves_to_given_year_and_roles_are_enriched():
    profile = analyze_experience(TWO_ROLES, segment_sections(TWO_ROLES), today_year=2024)
    assert profile.total_years == 9
    assert profile.companies == ["Globex Corp", "Initech LLC"]
    senior, junior = profile.roles
    assert (senior.title, senior.company, senior.duration) == ("Senior Developer", "Globex Corp", "2018 - Present")
    assert senior.responsibilities == ["Built APIs in Python"]
    assert (junior.title, junior.company, junior.duration) == ("Junior Developer", "Initech LLC", "2015-2018")
    assert junior.responsibilities == ["Fixed bugs"]


def test_overlapping_ranges_double_count():
    text = "Engineer, Alpha Inc 2018-2020\nConsultant, Beta Ltd 2019-2021"
    assert analyze_experience(text, segment_sections(text)).total_years == 4


def test_role_stub_defaults_to_unknown():
    role = parse_role_line("Data Analyst")
    assert role.company == "Unknown"
    assert role.duration == "Unknown"


def test_company_extraction_forms():
    assert extract_company("Engineer at Acme Corp 2019-2022") == "Acme Corp"
    assert extract_company("Initech LLC - Developer") == "Initech LLC"
    assert extract_company("Hooli Inc., Palo Alto") == "Hooli Inc."


def test_industries_skip_header_lines():
    text = "EDUCATION\nBuilt trading software for a banking client"
    assert extract_industries(text) == ["software", "banking"]


def test_no_dates_means_zero_years():
    text = "Worked as a developer for a while."
    profile = analyze_experience(text, segment_sections(text))
    assert profile.total_years == 0


def test_enhanced_mode_replaces_roles_and_merges_companies():
    classifier = StaticClassifier(
        {
            "extract_experience": '[{"company": "Umbrella Systems", "title": "Staff Engineer", '
            '"startDate": "2020", "endDate": "2023", "description": ["Scaled search"], "technologies": ["Go"]}]'
        }
    )
    analyzer = ExperienceAnalyzer(classifier, enhanced=True, today_year=2024)
    profile, used_ai = asyncio.run(analyzer.analyze(TWO_ROLES, segment_sections(TWO_ROLES)))
    assert used_ai
    assert profile.total_years == 9
    assert [r.title for r in profile.roles] == ["Staff Engineer"]
    assert profile.roles[0].duration == "2020 - 2023"
    assert profile.roles[0].technologies == ["Go"]
    assert profile.companies == ["Globex Corp", "Initech LLC", "Umbrella Systems"]


def test_enhanced_mode_failure_keeps_heuristic_roles():
    analyzer = ExperienceAnalyzer(StaticClassifier({"extract_experience": "[]"}), enhanced=True, today_year=2024)
    profile, used_ai = asyncio.run(analyzer.analyze(TWO_ROLES, segment_sections(TWO_ROLES)))
    assert not used_ai
    assert len(profile.roles) == 2


def test_classifier_is_not_called_outside_enhanced_mode():
    classifier = StaticClassifier({"extract_experience": "[]"})
    _, used_ai = asyncio.run(ExperienceAnalyzer(classifier).analyze(TWO_ROLES, segment_sections(TWO_ROLES)))
    assert not used_ai
    assert classifier.calls == []
