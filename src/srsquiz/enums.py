from __future__ import annotations
from enum import Enum

class SessionItemState(str, Enum):
    NOT_ACTIVE = "not_active"
    ACTIVE = "active"
    PENDING = "pending"      # finished, report deferred until the session flushes
    REPORTED = "reported"
    ABANDONED = "abandoned"

class SessionType(str, Enum):
    NONE = "none"
    LESSON = "lesson"
    REVIEW = "review"
    SELF_STUDY = "self_study"

class CloseEnoughAction(str, Enum):
    ACCEPT_SILENTLY = "accept_silently"
    ACCEPT_WITH_WARNING = "accept_with_warning"
    RETRY = "retry"
    REJECT = "reject"

class KanjiAcceptedReadingType(str, Enum):
    ON = "on"
    KUN = "kun"
    BOTH = "both"
    NEITHER = "neither"

class AnswerVerdict(str, Enum):
    OK = "ok"
    OK_NEAR_MATCH = "ok_near_match"
    NOK_WITH_RETRY = "nok_with_retry"
    NOK = "nok"
