from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING
from . import grader
from .enums import AnswerVerdict, CloseEnoughAction, KanjiAcceptedReadingType
from .i18n import t

if TYPE_CHECKING:
    from .models import Subject

# slot addresses the item's per-question counters
class QuestionType(Enum):
    MEANING = (1, None)
    READING = (2, None)
    READING_ONYOMI = (3, "onyomi")
    READING_KUNYOMI = (4, "kunyomi")

    def __init__(self, slot: int, reading_type: str | None):
        self.slot = slot
        self.reading_type = reading_type

    @property
    def is_meaning(self) -> bool:
        return self is QuestionType.MEANING

    @property
    def is_reading(self) -> bool:
        return not self.is_meaning

    def get_title(
        self,
        indicate_kanji_reading_type: bool,
        accepted_reading_type: KanjiAcceptedReadingType | str | None,
        lang: str = "en",
    ) -> str:
        if self is QuestionType.MEANING:
            return t("title_meaning", lang)
        if self is QuestionType.READING_ONYOMI:
            return t("title_onyomi", lang)
        if self is QuestionType.READING_KUNYOMI:
            return t("title_kunyomi", lang)
        if indicate_kanji_reading_type and accepted_reading_type is not None:
            accepted = KanjiAcceptedReadingType(accepted_reading_type)
            if accepted == KanjiAcceptedReadingType.ON:
                return t("title_reading_on", lang)
            if accepted == KanjiAcceptedReadingType.KUN:
                return t("title_reading_kun", lang)
        return t("title_reading", lang)

    def get_hint(self, landscape: bool, lang: str = "en") -> str:
        if not landscape:
            return t("hint_answer" if self.is_meaning else "hint_reading", lang)
        key = {
            QuestionType.MEANING: "hint_meaning_landscape",
            QuestionType.READING: "hint_reading_landscape",
            QuestionType.READING_ONYOMI: "hint_onyomi_landscape",
            QuestionType.READING_KUNYOMI: "hint_kunyomi_landscape",
        }[self]
        return t(key, lang)

    def check_answer(
        self,
        subject: Subject,
        matching_kanji: Subject | None,
        answer: str,
        close_enough_action: CloseEnoughAction,
    ) -> AnswerVerdict:
        if self.is_meaning:
            return grader.grade_meaning(subject, answer, close_enough_action)
        return grader.grade_reading(subject, matching_kanji, answer, reading_type=self.reading_type)

    def get_anki_answer_rich_text(self, subject: Subject) -> str:
        if self.is_meaning:
            meanings = subject.meanings
            parts = [f"<b>{m}</b>" if i == 0 else m for i, m in enumerate(meanings)]
            return ", ".join(parts)
        accepted = set(subject.accepted_readings(self.reading_type))
        parts = []
        for r in subject.readings:
            reading = str(r["reading"])
            if reading in accepted:
                parts.append(f"<b>{reading}</b>" if r.get("primary") else reading)
        return ", ".join(parts)
