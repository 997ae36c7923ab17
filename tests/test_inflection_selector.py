import random
import pytest

from srsquiz import inflection
from srsquiz.config import Settings
from srsquiz.enums import SessionType
from srsquiz.inflection import (
    ADJECTIVE_DECLENSIONS,
    VERB_CONJUGATIONS,
    AdjectiveType,
    InflectionForm,
    VerbType,
    get_conjugated_verb,
    get_declined_adjective,
)
from srsquiz.question import Question
from srsquiz.question_type import QuestionType
from tests.factories import make_item, make_subject


def _settings(*, review=False, lesson=False, self_study=False) -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        randomize_inflections_review=review,
        randomize_inflections_lesson=lesson,
        randomize_inflections_self_study=self_study,
    )


def test_disabled_randomization_shows_literal_characters():
    subject = make_subject(characters="食べる", parts_of_speech=("ichidan verb",))
    item = make_item(subject, slots=(1, 2))
    settings = _settings()
    for qt in (QuestionType.MEANING, QuestionType.READING):
        q = Question(item, qt)
        assert q.get_characters(subject, SessionType.REVIEW, settings) == "食べる"
        assert q.get_inflection(subject, SessionType.REVIEW, settings) is None
        assert q.inflection is None


@pytest.mark.parametrize("enabled", [True, False])
def test_unrecognized_part_of_speech_is_pass_through(enabled):
    subject = make_subject(characters="学校", parts_of_speech=("noun",))
    q = Question(make_item(subject), QuestionType.MEANING)
    settings = _settings(review=enabled)
    assert q.get_inflection_form(subject, SessionType.REVIEW, settings) is None
    assert q.get_characters(subject, SessionType.REVIEW, settings) == "学校"
    assert q.get_inflection(subject, SessionType.REVIEW, settings) is None


def test_inflection_is_drawn_once_and_memoized(monkeypatch):
    draws = []

    def fake_draw(rng=None):
        draws.append(1)
        return VERB_CONJUGATIONS[len(draws) % len(VERB_CONJUGATIONS)]

    monkeypatch.setattr(inflection, "get_random_verb_conjugation", fake_draw)
    subject = make_subject(characters="食べる", parts_of_speech=("ichidan verb",))
    q = Question(make_item(subject), QuestionType.MEANING)
    settings = _settings(review=True)

    first = q.get_inflection(subject, SessionType.REVIEW, settings)
    assert first is not None
    for _ in range(5):
        assert q.get_inflection(subject, SessionType.REVIEW, settings) == first
    q.get_characters(subject, SessionType.REVIEW, settings)
    q.get_anki_answer_rich_text(subject, SessionType.REVIEW, settings)
    assert len(draws) == 1


def test_rendered_form_matches_cached_label():
    subject = make_subject(characters="食べる", parts_of_speech=("ichidan verb", "transitive verb"))
    q = Question(make_item(subject), QuestionType.READING, rng=random.Random(3))
    settings = _settings(review=True)
    shown = q.get_characters(subject, SessionType.REVIEW, settings)
    assert q.inflection in VERB_CONJUGATIONS
    assert shown == get_conjugated_verb("食べる", VerbType.ICHIDAN, q.inflection)
    assert q.get_characters(subject, SessionType.REVIEW, settings) == shown


def test_separate_questions_draw_independently_but_stay_stable():
    subject = make_subject(characters="高い", parts_of_speech=("い adjective",))
    item = make_item(subject, slots=(1, 2))
    settings = _settings(lesson=True)
    meaning = Question(item, QuestionType.MEANING, rng=random.Random(1))
    reading = Question(item, QuestionType.READING, rng=random.Random(2))
    m = meaning.get_inflection(subject, SessionType.LESSON, settings)
    r = reading.get_inflection(subject, SessionType.LESSON, settings)
    assert m in ADJECTIVE_DECLENSIONS
    assert r in ADJECTIVE_DECLENSIONS
    assert meaning.get_characters(subject, SessionType.LESSON, settings) == get_declined_adjective("高い", AdjectiveType.I, m)
    assert reading.get_characters(subject, SessionType.LESSON, settings) == get_declined_adjective("高い", AdjectiveType.I, r)


def test_randomization_is_scoped_per_session_type():
    subject = make_subject(characters="食べる", parts_of_speech=("ichidan verb",))
    q = Question(make_item(subject), QuestionType.MEANING)
    settings = _settings(review=True)
    assert q.get_inflection_form(subject, SessionType.LESSON, settings) is None
    assert q.get_inflection_form(subject, SessionType.SELF_STUDY, settings) is None
    assert q.get_inflection_form(subject, SessionType.NONE, settings) is None
    assert q.get_inflection_form(subject, SessionType.REVIEW, settings) == InflectionForm.ICHIDAN_VERB


@pytest.mark.parametrize(
    "parts, expected",
    [
        (["godan verb", "intransitive verb"], InflectionForm.GODAN_VERB),
        (["noun", "する verb"], InflectionForm.SURU_VERB),
        (["な adjective", "する verb"], InflectionForm.SURU_VERB),
        (["い adjective"], InflectionForm.I_ADJECTIVE),
        (["noun", "な adjective"], InflectionForm.NA_ADJECTIVE),
        (["noun", "adverb"], None),
        ([], None),
    ],
)
def test_classification_priority(parts, expected):
    assert InflectionForm.classify(parts) is expected


def test_subject_without_characters():
    subject = make_subject(object_type="radical", characters=None, parts_of_speech=())
    q = Question(make_item(subject), QuestionType.MEANING)
    assert q.get_characters(subject, SessionType.REVIEW, _settings(review=True)) is None


def test_anki_answer_appends_inflection():
    subject = make_subject(characters="静か", meanings=("quiet", "calm"), parts_of_speech=("な adjective",))
    q = Question(make_item(subject), QuestionType.MEANING, rng=random.Random(0))
    text = q.get_anki_answer_rich_text(subject, SessionType.REVIEW, _settings(review=True))
    assert text == f"<b>quiet</b>, calm ({q.inflection})"

    plain = Question(make_item(subject), QuestionType.MEANING)
    assert plain.get_anki_answer_rich_text(subject, SessionType.REVIEW, _settings()) == "<b>quiet</b>, calm"


def test_anki_reading_answer_lists_accepted_readings():
    subject = make_subject(
        object_type="kanji",
        characters="日",
        readings=(
            {"reading": "にち", "type": "onyomi", "primary": True, "accepted": True},
            {"reading": "じつ", "type": "onyomi", "primary": False, "accepted": True},
            {"reading": "ひ", "type": "kunyomi", "primary": False, "accepted": False},
        ),
        parts_of_speech=(),
    )
    item = make_item(subject, slots=(1, 2))
    q = Question(item, QuestionType.READING)
    assert q.get_anki_answer_rich_text(subject, SessionType.REVIEW, _settings()) == "<b>にち</b>, じつ"


def test_displayed_adjective_ending_in_ii_keeps_its_stem(monkeypatch):
    monkeypatch.setattr(inflection, "get_random_adjective_declension", lambda rng=None: "adverbial")
    subject = make_subject(characters="かわいい", meanings=("cute",), parts_of_speech=("い adjective",))
    q = Question(make_item(subject), QuestionType.MEANING)
    settings = _settings(review=True)
    assert q.get_characters(subject, SessionType.REVIEW, settings) == "かわいく"
    assert q.get_anki_answer_rich_text(subject, SessionType.REVIEW, settings) == "<b>cute</b> (adverbial)"
