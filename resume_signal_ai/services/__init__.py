"""Service exports."""

from .classifier import Classifier, OpenAIClassifier, StaticClassifier, build_default_classifier
from .text_cleaner import clean_resume_text

__all__ = [
    "Classifier",
    "OpenAIClassifier",
    "StaticClassifier",
    "build_default_classifier",
    "clean_resume_text",
]
