from __future__ import annotations

STRINGS: dict[str, dict[str, str]] = {
    "title_meaning": {"en": "Meaning", "ja": "意味"},
    "title_reading": {"en": "Reading", "ja": "読み"},
    "title_reading_on": {"en": "Reading (on'yomi)", "ja": "読み（音読み）"},
    "title_reading_kun": {"en": "Reading (kun'yomi)", "ja": "読み（訓読み）"},
    "title_onyomi": {"en": "On'yomi reading", "ja": "音読み"},
    "title_kunyomi": {"en": "Kun'yomi reading", "ja": "訓読み"},
    "hint_answer": {"en": "Answer", "ja": "答え"},
    "hint_reading": {"en": "答え", "ja": "答え"},
    "hint_meaning_landscape": {"en": "Meaning", "ja": "意味"},
    "hint_reading_landscape": {"en": "Reading", "ja": "読み"},
    "hint_onyomi_landscape": {"en": "On'yomi", "ja": "音読み"},
    "hint_kunyomi_landscape": {"en": "Kun'yomi", "ja": "訓読み"},
}

def t(key: str, lang: str) -> str:
    return STRINGS.get(key, {}).get(lang, STRINGS.get(key, {}).get("en", key))
