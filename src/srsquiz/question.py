from __future__ import annotations
import logging
import random
from typing import TYPE_CHECKING
from .config import Settings
from .enums import AnswerVerdict, CloseEnoughAction, SessionItemState, SessionType
from .inflection import InflectionForm
from .models import SessionItem, Subject, utcnow
from .question_type import QuestionType

if TYPE_CHECKING:
    from .store import SessionItemStore

logger = logging.getLogger(__name__)

# one question about a session item; progress lives on the item, only the chosen inflection is kept here
class Question:
    def __init__(self, item: SessionItem, type: QuestionType, *, rng: random.Random | None = None):
        self._item = item
        self._type = type
        self._rng = rng
        # name of the conjugation/declension shown for this question, chosen once
        self.inflection: str | None = None

    @property
    def item(self) -> SessionItem:
        return self._item

    @property
    def type(self) -> QuestionType:
        return self._type

    def __str__(self) -> str:
        return f"{self._type.name}:{self._item.id}"

    def is_finished(self) -> bool:
        return not self._item.is_active() or self._item.is_question_done(self._type.slot)

    def can_undo(self) -> bool:
        return not self._item.is_reported() and not self._item.is_abandoned()

    def get_title(self, settings: Settings) -> str:
        return self._type.get_title(
            settings.indicate_kanji_reading_type,
            self._item.kanji_accepted_reading_type,
            settings.ui_lang,
        )

    def get_hint(self, landscape: bool, lang: str = "en") -> str:
        return self._type.get_hint(landscape, lang)

    def check_answer(
        self,
        matching_kanji: Subject | None,
        answer: str,
        close_enough_action: CloseEnoughAction,
    ) -> AnswerVerdict:
        # matching_kanji is the single kanji a vocabulary word is made of, if any
        if not answer or not answer.strip():
            return AnswerVerdict.NOK_WITH_RETRY
        subject = self._item.subject
        if subject is None:
            raise ValueError(f"session item {self._item.id} has no subject")
        return self._type.check_answer(subject, matching_kanji, answer, close_enough_action)

    async def mark_correct(self, store: SessionItemStore, *, delayed: bool) -> None:
        item = self._item
        item.set_question_done(self._type.slot, True)
        item.set_num_answers(item.get_num_answers() + 1)
        item.set_last_answer(utcnow())

        if item.is_finished():
            if delayed:
                item.set_state(SessionItemState.PENDING)
                logger.debug("question_correct_item_pending question=%s", self)
                await store.update(item)
            else:
                logger.debug("question_correct_item_finished question=%s", self)
                await store.report(item)
        else:
            logger.debug("question_correct question=%s", self)
            await store.update(item)

    async def mark_incorrect(self, store: SessionItemStore) -> None:
        item = self._item
        slot = self._type.slot
        item.set_question_incorrect(slot, item.get_question_incorrect(slot) + 1)
        item.set_num_answers(item.get_num_answers() + 1)
        logger.debug("question_incorrect question=%s incorrect=%s", self, item.get_question_incorrect(slot))
        await store.update(item)

    async def undo(self, store: SessionItemStore) -> None:
        # must directly follow the mark call it reverses: the branch comes from the done flag
        if not self.can_undo():
            return

        item = self._item
        slot = self._type.slot
        if item.is_question_done(slot):
            item.set_question_done(slot, False)
        else:
            item.set_question_incorrect(slot, item.get_question_incorrect(slot) - 1)
        item.set_num_answers(item.get_num_answers() - 1)
        if item.is_pending():
            item.set_state(SessionItemState.ACTIVE)

        logger.debug("question_undo question=%s", self)
        await store.update(item)

    def get_inflection_form(
        self, subject: Subject, session_type: SessionType, settings: Settings
    ) -> InflectionForm | None:
        if not settings.get_randomize_inflections(session_type):
            return None
        return InflectionForm.classify(subject.parts_of_speech)

    def get_inflection(self, subject: Subject, session_type: SessionType, settings: Settings) -> str | None:
        if self.inflection is not None:
            return self.inflection
        form = self.get_inflection_form(subject, session_type, settings)
        if form is None:
            return None
        self.inflection = form.random_label(self._rng)
        return self.inflection

    def get_characters(self, subject: Subject, session_type: SessionType, settings: Settings) -> str | None:
        characters = subject.characters
        if characters is None:
            return None
        form = self.get_inflection_form(subject, session_type, settings)
        if form is None:
            return characters
        return form.render(characters, self.get_inflection(subject, session_type, settings))

    def get_anki_answer_rich_text(self, subject: Subject, session_type: SessionType, settings: Settings) -> str:
        inflection = self.get_inflection(subject, session_type, settings)
        text = self._type.get_anki_answer_rich_text(subject)
        return text + (f" ({inflection})" if inflection is not None else "")
