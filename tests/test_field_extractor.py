import asyncio
import re

from resume_signal_ai.cv_pipeline.field_extractor import enhance_contact_fields, extract_contact_fields
from resume_signal_ai.services.classifier import StaticClassifier


def test_short_resume_contact(short_resume):
    contact = extract_contact_fields(short_resume)
    assert contact.email == "jane@x.com"
    digits = re.sub(r"\D", "", contact.phone)
    assert digits == "14155550100"
    assert 7 <= len(digits) <= 15
    assert contact.name == "Jane Doe"
    assert contact.confidence["email"] >= 0.9
    assert contact.confidence["phone"] >= 0.9


def test_sample_resume_links_and_name(sample_resume):
    contact = extract_contact_fields(sample_resume)
    assert contact.name == "Jane Doe"
    assert contact.email == "jane.doe@example.com"
    assert contact.phone == "+14155550100"
    assert contact.linkedin == "linkedin.com/in/janedoe"
    assert contact.github is None


def test_absent_fields_are_omitted_not_zero_confidence():
    contact = extract_contact_fields("reach me: JANE@EXAMPLE.ORG")
    assert contact.email == "jane@example.org"
    assert contact.phone is None
    assert contact.name is None
    assert set(contact.confidence) == {"email"}


def test_github_and_website_urls():
    text = "Jane Doe\nhttps://github.com/janedoe\nhttps://janedoe.dev"
    contact = extract_contact_fields(text)
    assert contact.github == "https://github.com/janedoe"
    assert contact.website == "https://janedoe.dev"


def test_email_outside_contact_window_has_lower_confidence():
    text = "Jane Doe\n" + ("filler words here\n" * 40) + "late@example.com"
    contact = extract_contact_fields(text, window_chars=100)
    assert contact.email == "late@example.com"
    assert contact.confidence["email"] == 0.9


def test_ai_fills_only_missing_fields(short_resume):
    contact = extract_contact_fields(short_resume)
    classifier = StaticClassifier(
        {
            "extract_personal_info": {
                "name": "Someone Else",
                "email": "other@example.com",
                "location": "San Francisco, CA",
                "confidence": 0.8,
            }
        }
    )
    enriched, used_ai = asyncio.run(enhance_contact_fields(contact, short_resume, classifier, 1.0))
    assert used_ai
    assert enriched.name == "Jane Doe"
    assert enriched.email == "jane@x.com"
    assert enriched.location == "San Francisco, CA"
    assert enriched.confidence["location"] == 0.8


def test_ai_failure_keeps_regex_fields(short_resume):
    contact = extract_contact_fields(short_resume)
    classifier = StaticClassifier({"extract_personal_info": "I could not find anything."})
    result, used_ai = asyncio.run(enhance_contact_fields(contact, short_resume, classifier, 1.0))
    assert not used_ai
    assert result == contact
