from __future__ import annotations
from typing import TYPE_CHECKING
from .enums import AnswerVerdict, CloseEnoughAction
from .normalize import has_kana, has_latin, is_kana, norm_cmp_text, norm_reading_text, to_hiragana

if TYPE_CHECKING:
    from .models import Subject

_CLOSE_ENOUGH_VERDICTS = {
    CloseEnoughAction.ACCEPT_SILENTLY: AnswerVerdict.OK,
    CloseEnoughAction.ACCEPT_WITH_WARNING: AnswerVerdict.OK_NEAR_MATCH,
    CloseEnoughAction.RETRY: AnswerVerdict.NOK_WITH_RETRY,
    CloseEnoughAction.REJECT: AnswerVerdict.NOK,
}

def apply_close_enough(action: CloseEnoughAction) -> AnswerVerdict:
    return _CLOSE_ENOUGH_VERDICTS[CloseEnoughAction(action)]

def _levenshtein(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            insert = cur[j - 1] + 1
            delete = prev[j] + 1
            replace = prev[j - 1] + (ca != cb)
            cur.append(min(insert, delete, replace))
        prev = cur
    return prev[-1]

def _typo_limit(target: str) -> int:
    n = len(target)
    if n <= 3:
        return 0
    if n <= 5:
        return 1
    if n <= 20:
        return 2
    return 3

def _is_close(user: str, target: str) -> bool:
    if not user or not target:
        return False
    return _levenshtein(user, target) <= _typo_limit(target)

def grade_meaning(subject: Subject, answer: str, close_enough_action: CloseEnoughAction) -> AnswerVerdict:
    # a kana answer to a meaning question is a mix-up, not a wrong answer
    if has_kana(answer) and not has_latin(answer):
        return AnswerVerdict.NOK_WITH_RETRY
    user_cmp = norm_cmp_text(answer)
    if not user_cmp:
        return AnswerVerdict.NOK_WITH_RETRY
    targets = [norm_cmp_text(m) for m in subject.meanings + subject.auxiliary_meanings]
    targets = [t for t in targets if t]
    if user_cmp in targets:
        return AnswerVerdict.OK
    if any(_is_close(user_cmp, t) for t in targets):
        return apply_close_enough(close_enough_action)
    return AnswerVerdict.NOK

def _hiragana_set(readings: list[str]) -> set[str]:
    return {to_hiragana(r) for r in readings}

def grade_reading(
    subject: Subject,
    matching_kanji: Subject | None,
    answer: str,
    reading_type: str | None = None,
) -> AnswerVerdict:
    # exact match after kana normalization; reading_type limits accepted readings to onyomi or kunyomi
    user = norm_reading_text(answer)
    if not is_kana(user):
        return AnswerVerdict.NOK_WITH_RETRY
    if user in _hiragana_set(subject.accepted_readings(reading_type)):
        return AnswerVerdict.OK

    if subject.is_kanji:
        if reading_type is not None:
            if user in _hiragana_set(subject.other_readings(reading_type)):
                return AnswerVerdict.NOK_WITH_RETRY
        else:
            unaccepted = [str(r["reading"]) for r in subject.readings if not r.get("accepted", True)]
            if user in _hiragana_set(unaccepted):
                return AnswerVerdict.NOK_WITH_RETRY

    if subject.is_vocabulary and matching_kanji is not None:
        kanji_readings = [str(r["reading"]) for r in matching_kanji.readings]
        if user in _hiragana_set(kanji_readings):
            return AnswerVerdict.NOK_WITH_RETRY
    return AnswerVerdict.NOK
