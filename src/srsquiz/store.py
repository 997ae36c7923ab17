from __future__ import annotations
import logging
import random
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .enums import KanjiAcceptedReadingType, SessionItemState
from .models import ReviewReport, SessionItem, Subject
from .question import Question
from .question_type import QuestionType

logger = logging.getLogger(__name__)

_TYPES_BY_SLOT = {qt.slot: qt for qt in QuestionType}

def default_slots(subject: Subject, *, split_kanji_readings: bool = False) -> list[int]:
    if subject.is_radical:
        return [QuestionType.MEANING.slot]
    if subject.is_kanji and split_kanji_readings:
        return [
            QuestionType.MEANING.slot,
            QuestionType.READING_ONYOMI.slot,
            QuestionType.READING_KUNYOMI.slot,
        ]
    return [QuestionType.MEANING.slot, QuestionType.READING.slot]

class SessionItemStore:
    """Persists session items; every Question state change goes through here."""

    def __init__(self, s: AsyncSession):
        self.s = s

    async def get(self, item_id: int) -> SessionItem | None:
        return (await self.s.execute(
            select(SessionItem).where(SessionItem.id == item_id)
        )).scalars().first()

    async def create_item(
        self,
        subject: Subject,
        *,
        slots: list[int] | None = None,
        split_kanji_readings: bool = False,
        kanji_accepted_reading_type: KanjiAcceptedReadingType = KanjiAcceptedReadingType.NEITHER,
    ) -> SessionItem:
        item = SessionItem(
            subject=subject,
            state=SessionItemState.ACTIVE.value,
            num_answers=0,
            kanji_accepted_reading_type=KanjiAcceptedReadingType(kanji_accepted_reading_type).value,
        )
        for slot in _TYPES_BY_SLOT:
            item.set_question_done(slot, False)
            item.set_question_incorrect(slot, 0)
        item.question_slots = slots or default_slots(subject, split_kanji_readings=split_kanji_readings)
        self.s.add(item)
        await self.s.commit()
        logger.debug("session_item_created item_id=%s subject_id=%s slots=%s", item.id, subject.id, item.question_slots)
        return item

    def questions_for(self, item: SessionItem, *, rng: random.Random | None = None) -> list[Question]:
        return [Question(item, _TYPES_BY_SLOT[slot], rng=rng) for slot in item.question_slots]

    async def update(self, item: SessionItem) -> None:
        self.s.add(item)
        await self.s.commit()
        logger.debug(
            "session_item_updated item_id=%s state=%s num_answers=%s",
            item.id,
            item.state,
            item.num_answers,
        )

    async def report(self, item: SessionItem) -> ReviewReport:
        item.set_state(SessionItemState.REPORTED)
        self.s.add(item)
        await self.s.flush()
        reading_incorrect = sum(
            item.get_question_incorrect(qt.slot) for qt in QuestionType if qt.is_reading
        )
        report = ReviewReport(
            session_item_id=item.id,
            subject_id=item.subject_id,
            meaning_incorrect=item.get_question_incorrect(QuestionType.MEANING.slot),
            reading_incorrect=reading_incorrect,
            num_answers=item.get_num_answers(),
        )
        self.s.add(report)
        await self.s.commit()
        logger.info(
            "session_item_reported item_id=%s subject_id=%s meaning_incorrect=%s reading_incorrect=%s",
            item.id,
            item.subject_id,
            report.meaning_incorrect,
            report.reading_incorrect,
        )
        return report

    async def pending_items(self) -> list[SessionItem]:
        return list((await self.s.execute(
            select(SessionItem)
            .where(SessionItem.state == SessionItemState.PENDING.value)
            .order_by(SessionItem.id)
        )).scalars().all())
