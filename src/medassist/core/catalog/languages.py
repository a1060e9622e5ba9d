from __future__ import annotations

from .schemas import Language

LANGUAGES: list[Language] = [
    Language(code="en", name="English"),
    Language(code="hi", name="हिंदी"),
    Language(code="bn", name="বাংলা"),
    Language(code="ta", name="தமிழ்"),
    Language(code="te", name="తెలుగు"),
]


def is_supported_language(code: str) -> bool:
    return any(language.code == code for language in LANGUAGES)
