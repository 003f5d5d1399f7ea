import pytest

SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | +1 (415) 555-0100
linkedin.com/in/janedoe

SUMMARY
Software engineer with eight years of experience building web platforms.

EXPERIENCE
Senior Software Engineer at Globex Corp, 2019 - 2023
- Led migration of billing services to Kubernetes
Developer - Initech LLC
2015-2019

EDUCATION
B.S. in Computer Science, Stanford University, 2011 - 2015

SKILLS
Python, Django, React, PostgreSQL, Docker, Leadership

PROJECTS
ResumeBot - Resume parser built with Python and FastAPI

ACHIEVEMENTS
- Won company hackathon 2021
"""

SHORT_RESUME = "Jane Doe\njane@x.com\n+1 415 555 0100\nEXPERIENCE\nEngineer at Acme Corp 2019-2022"

AI_SKILLS_RESPONSE = {
    "technical": [{"name": "Python", "category": "programming", "proficiency": "expert"}],
    "soft": ["Leadership"],
    "frameworks": ["Django"],
    "languages": ["Python"],
    "tools": ["Docker"],
    "certifications": [],
}


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def short_resume() -> str:
    return SHORT_RESUME


@pytest.fixture
def ai_skills_response() -> dict:
    return dict(AI_SKILLS_RESPONSE)
