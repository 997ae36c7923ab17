from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .enums import CloseEnoughAction, SessionType

load_dotenv()

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}

def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise RuntimeError(f"{name} must be a boolean (true/false)")

@dataclass(frozen=True)
class Settings:
    database_url: str
    randomize_inflections_lesson: bool = False
    randomize_inflections_review: bool = False
    randomize_inflections_self_study: bool = False
    delayed_reporting: bool = False
    indicate_kanji_reading_type: bool = True
    split_kanji_readings: bool = False
    close_enough_action: CloseEnoughAction = CloseEnoughAction.ACCEPT_WITH_WARNING
    ui_lang: str = "en"  # en/ja

    def get_randomize_inflections(self, session_type: SessionType) -> bool:
        if session_type == SessionType.LESSON:
            return self.randomize_inflections_lesson
        if session_type == SessionType.REVIEW:
            return self.randomize_inflections_review
        if session_type == SessionType.SELF_STUDY:
            return self.randomize_inflections_self_study
        return False

def load_settings() -> Settings:
    load_dotenv()
    database_url = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./data/srsquiz.db")

    close_enough_raw = os.getenv("CLOSE_ENOUGH_ACTION", "accept_with_warning").strip().lower()
    try:
        close_enough_action = CloseEnoughAction(close_enough_raw)
    except ValueError:
        allowed = ", ".join(a.value for a in CloseEnoughAction)
        raise RuntimeError(f"CLOSE_ENOUGH_ACTION must be one of: {allowed}") from None

    ui_lang = os.getenv("UI_LANG", "en").strip().lower()
    if ui_lang not in {"en", "ja"}:
        raise RuntimeError("UI_LANG must be en or ja")

    return Settings(
        database_url=database_url,
        randomize_inflections_lesson=_env_bool("RANDOMIZE_INFLECTIONS_LESSON", False),
        randomize_inflections_review=_env_bool("RANDOMIZE_INFLECTIONS_REVIEW", False),
        randomize_inflections_self_study=_env_bool("RANDOMIZE_INFLECTIONS_SELF_STUDY", False),
        delayed_reporting=_env_bool("DELAYED_REPORTING", False),
        indicate_kanji_reading_type=_env_bool("INDICATE_KANJI_READING_TYPE", True),
        split_kanji_readings=_env_bool("SPLIT_KANJI_READINGS", False),
        close_enough_action=close_enough_action,
        ui_lang=ui_lang,
    )
