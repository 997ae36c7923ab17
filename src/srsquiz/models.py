from __future__ import annotations
import datetime as dt
import json
from sqlalchemy import (
    String, Integer, DateTime, Boolean, Text, ForeignKey, Index
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .db import Base
from .enums import KanjiAcceptedReadingType, SessionItemState

UTC = dt.timezone.utc
def utcnow() -> dt.datetime:
    return dt.datetime.now(tz=UTC)

QUESTION_SLOTS = (1, 2, 3, 4)

def _json_list(raw: str | None) -> list:
    if not raw:
        return []
    val = json.loads(raw)
    return val if isinstance(val, list) else []

class Subject(Base):
    __tablename__ = "subjects"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    object_type: Mapped[str] = mapped_column(String(16))  # radical | kanji | vocabulary
    characters: Mapped[str | None] = mapped_column(String(64), nullable=True)  # image-only radicals have none
    meanings_json: Mapped[str] = mapped_column(Text, default="[]")            # JSON list, primary first
    auxiliary_meanings_json: Mapped[str] = mapped_column(Text, default="[]")  # JSON list of extra accepted meanings
    readings_json: Mapped[str] = mapped_column(Text, default="[]")  # JSON list of {reading, type, primary, accepted}
    parts_of_speech_json: Mapped[str] = mapped_column(Text, default="[]")     # JSON list, e.g. ["ichidan verb"]

    @property
    def is_radical(self) -> bool:
        return self.object_type == "radical"

    @property
    def is_kanji(self) -> bool:
        return self.object_type == "kanji"

    @property
    def is_vocabulary(self) -> bool:
        return self.object_type == "vocabulary"

    @property
    def meanings(self) -> list[str]:
        return [str(x) for x in _json_list(self.meanings_json) if x]

    @property
    def auxiliary_meanings(self) -> list[str]:
        return [str(x) for x in _json_list(self.auxiliary_meanings_json) if x]

    @property
    def readings(self) -> list[dict]:
        return [r for r in _json_list(self.readings_json) if isinstance(r, dict) and r.get("reading")]

    @property
    def parts_of_speech(self) -> list[str]:
        return [str(x) for x in _json_list(self.parts_of_speech_json) if x]

    def accepted_readings(self, reading_type: str | None = None) -> list[str]:
        # asking for one reading type explicitly accepts all readings of that type
        if reading_type is not None:
            return [str(r["reading"]) for r in self.readings if r.get("type") == reading_type]
        return [str(r["reading"]) for r in self.readings if r.get("accepted", True)]

    def other_readings(self, reading_type: str) -> list[str]:
        return [str(r["reading"]) for r in self.readings if r.get("type") not in (None, reading_type)]

class SessionItem(Base):
    __tablename__ = "session_items"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    subject_id: Mapped[int] = mapped_column(Integer, ForeignKey("subjects.id"), index=True)

    # not_active | active | pending | reported | abandoned
    state: Mapped[str] = mapped_column(String(16), default=SessionItemState.NOT_ACTIVE.value)

    # per-question progress, addressed by QuestionType.slot
    question1_done: Mapped[bool] = mapped_column(Boolean, default=False)
    question2_done: Mapped[bool] = mapped_column(Boolean, default=False)
    question3_done: Mapped[bool] = mapped_column(Boolean, default=False)
    question4_done: Mapped[bool] = mapped_column(Boolean, default=False)
    question1_incorrect: Mapped[int] = mapped_column(Integer, default=0)
    question2_incorrect: Mapped[int] = mapped_column(Integer, default=0)
    question3_incorrect: Mapped[int] = mapped_column(Integer, default=0)
    question4_incorrect: Mapped[int] = mapped_column(Integer, default=0)
    question_slots_json: Mapped[str] = mapped_column(Text, default="[1, 2]")  # slots asked for this item

    num_answers: Mapped[int] = mapped_column(Integer, default=0)
    last_answer: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    kanji_accepted_reading_type: Mapped[str] = mapped_column(
        String(16), default=KanjiAcceptedReadingType.NEITHER.value
    )
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    subject: Mapped[Subject] = relationship("Subject", lazy="selectin")

    __table_args__ = (Index("ix_session_items_state", "state", "id"),)

    @staticmethod
    def _check_slot(slot: int) -> int:
        if slot not in QUESTION_SLOTS:
            raise ValueError(f"invalid question slot: {slot}")
        return slot

    def is_question_done(self, slot: int) -> bool:
        return bool(getattr(self, f"question{self._check_slot(slot)}_done"))

    def set_question_done(self, slot: int, done: bool) -> None:
        setattr(self, f"question{self._check_slot(slot)}_done", done)

    def get_question_incorrect(self, slot: int) -> int:
        return getattr(self, f"question{self._check_slot(slot)}_incorrect") or 0

    def set_question_incorrect(self, slot: int, count: int) -> None:
        setattr(self, f"question{self._check_slot(slot)}_incorrect", count)

    @property
    def question_slots(self) -> list[int]:
        return [int(x) for x in _json_list(self.question_slots_json)]

    @question_slots.setter
    def question_slots(self, slots: list[int]) -> None:
        self.question_slots_json = json.dumps([self._check_slot(int(s)) for s in slots])

    def get_num_answers(self) -> int:
        return self.num_answers or 0

    def set_num_answers(self, count: int) -> None:
        self.num_answers = count

    def set_last_answer(self, when: dt.datetime) -> None:
        self.last_answer = when

    def set_state(self, state: SessionItemState) -> None:
        self.state = SessionItemState(state).value

    def is_active(self) -> bool:
        return self.state == SessionItemState.ACTIVE.value

    def is_pending(self) -> bool:
        return self.state == SessionItemState.PENDING.value

    def is_reported(self) -> bool:
        return self.state == SessionItemState.REPORTED.value

    def is_abandoned(self) -> bool:
        return self.state == SessionItemState.ABANDONED.value

    def is_finished(self) -> bool:
        slots = self.question_slots
        return bool(slots) and all(self.is_question_done(slot) for slot in slots)

class ReviewReport(Base):
    __tablename__ = "review_reports"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_item_id: Mapped[int] = mapped_column(Integer, ForeignKey("session_items.id"), index=True)
    subject_id: Mapped[int] = mapped_column(Integer, index=True)
    meaning_incorrect: Mapped[int] = mapped_column(Integer, default=0)
    reading_incorrect: Mapped[int] = mapped_column(Integer, default=0)
    num_answers: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
