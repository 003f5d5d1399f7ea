import asyncio

from resume_signal_ai.cv_pipeline.portfolio_extractor import ProjectExtractor, extract_achievements, extract_projects
from resume_signal_ai.cv_pipeline.section_segmenter import segment_sections
from resume_signal_ai.schemas.sections import SectionSet
from resume_signal_ai.services.classifier import StaticClassifier

PORTFOLIO = (
    "PROJECTS\n"
    "ResumeBot - Resume parser built with Python and FastAPI\n"
    "- Reduced screening time by 40%\n"
    "- https://github.com/jane/resumebot\n"
    "Weather App: Forecast dashboard using React https://weather.example.com\n"
    "ACHIEVEMENTS\n"
    "- Won hackathon 2021\n"
    "* Speaker at PyCon"
)


def test_projects_from_section():
    bot, weather = extract_projects(segment_sections(PORTFOLIO))
    assert bot.name == "ResumeBot"
    assert bot.description == "Resume parser built with Python and FastAPI"
    assert bot.achievements == ["Reduced screening time by 40%"]
    assert bot.github == "https://github.com/jane/resumebot"
    assert bot.url is None
    assert "Python" in bot.technologies and "FastAPI" in bot.technologies

    assert weather.name == "Weather App"
    assert weather.description == "Forecast dashboard using React"
    assert weather.url == "https://weather.example.com"
    assert weather.technologies == ["React"]


def test_first_bullet_becomes_description_when_name_stands_alone():
    sections = SectionSet.from_blocks([("projects", "Inventory Tracker\n- Barcode scanning app in Flutter\n- 2k users")])
    (project,) = extract_projects(sections)
    assert project.description == "Barcode scanning app in Flutter"
    assert project.achievements == ["2k users"]
    assert project.technologies == ["Flutter"]


def test_no_projects_section_means_no_projects():
    assert extract_projects(SectionSet()) == []


def test_achievements_lines():
    assert extract_achievements(segment_sections(PORTFOLIO)) == ["Won hackathon 2021", "Speaker at PyCon"]
    assert extract_achievements(SectionSet()) == []


def test_enhanced_mode_prefers_ai_projects():
    classifier = StaticClassifier(
        {"extract_projects": '```json\n[{"name": "ResumeBot", "technologies": ["Python"], "github": "github.com/jane/rb"}]\n```'}
    )
    projects, used_ai = asyncio.run(ProjectExtractor(classifier, enhanced=True).extract(PORTFOLIO, segment_sections(PORTFOLIO)))
    assert used_ai
    assert [(p.name, p.github) for p in projects] == [("ResumeBot", "github.com/jane/rb")]


def test_enhanced_mode_skips_nameless_entries_and_falls_back():
    classifier = StaticClassifier({"extract_projects": [{"description": "no name"}]})
    projects, used_ai = asyncio.run(ProjectExtractor(classifier, enhanced=True).extract(PORTFOLIO, segment_sections(PORTFOLIO)))
    assert not used_ai
    assert [p.name for p in projects] == ["ResumeBot", "Weather App"]
