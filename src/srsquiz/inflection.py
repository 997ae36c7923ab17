from __future__ import annotations
import random
from enum import Enum

class VerbType(str, Enum):
    GODAN = "godan"
    ICHIDAN = "ichidan"
    SURU = "suru"

class AdjectiveType(str, Enum):
    I = "i"
    NA_PLAIN = "na_plain"

VERB_CONJUGATIONS: tuple[str, ...] = (
    "polite",
    "negative",
    "polite negative",
    "past",
    "polite past",
    "past negative",
    "polite past negative",
    "te form",
    "volitional",
    "potential",
    "passive",
    "causative",
    "imperative",
    "conditional",
)

ADJECTIVE_DECLENSIONS: tuple[str, ...] = (
    "negative",
    "past",
    "past negative",
    "polite",
    "polite negative",
    "polite past",
    "te form",
    "adverbial",
    "conditional",
)

# dictionary-form ending -> (a, i, e, o) row
_GODAN_ROWS: dict[str, tuple[str, str, str, str]] = {
    "う": ("わ", "い", "え", "お"),
    "く": ("か", "き", "け", "こ"),
    "ぐ": ("が", "ぎ", "げ", "ご"),
    "す": ("さ", "し", "せ", "そ"),
    "つ": ("た", "ち", "て", "と"),
    "ぬ": ("な", "に", "ね", "の"),
    "ぶ": ("ば", "び", "べ", "ぼ"),
    "む": ("ま", "み", "め", "も"),
    "る": ("ら", "り", "れ", "ろ"),
}

# dictionary-form ending -> (te, ta)
_GODAN_TE_TA: dict[str, tuple[str, str]] = {
    "う": ("って", "った"),
    "つ": ("って", "った"),
    "る": ("って", "った"),
    "む": ("んで", "んだ"),
    "ぶ": ("んで", "んだ"),
    "ぬ": ("んで", "んだ"),
    "く": ("いて", "いた"),
    "ぐ": ("いで", "いだ"),
    "す": ("して", "した"),
}

# row index into _GODAN_ROWS ("te"/"ta" use _GODAN_TE_TA), then suffix
_GODAN_FORMS: dict[str, tuple[str, str]] = {
    "polite": ("i", "ます"),
    "negative": ("a", "ない"),
    "polite negative": ("i", "ません"),
    "past": ("ta", ""),
    "polite past": ("i", "ました"),
    "past negative": ("a", "なかった"),
    "polite past negative": ("i", "ませんでした"),
    "te form": ("te", ""),
    "volitional": ("o", "う"),
    "potential": ("e", "る"),
    "passive": ("a", "れる"),
    "causative": ("a", "せる"),
    "imperative": ("e", ""),
    "conditional": ("e", "ば"),
}

_ROW_INDEX = {"a": 0, "i": 1, "e": 2, "o": 3}

_ICHIDAN_SUFFIXES: dict[str, str] = {
    "polite": "ます",
    "negative": "ない",
    "polite negative": "ません",
    "past": "た",
    "polite past": "ました",
    "past negative": "なかった",
    "polite past negative": "ませんでした",
    "te form": "て",
    "volitional": "よう",
    "potential": "られる",
    "passive": "られる",
    "causative": "させる",
    "imperative": "ろ",
    "conditional": "れば",
}

_SURU_SUFFIXES: dict[str, str] = {
    "polite": "します",
    "negative": "しない",
    "polite negative": "しません",
    "past": "した",
    "polite past": "しました",
    "past negative": "しなかった",
    "polite past negative": "しませんでした",
    "te form": "して",
    "volitional": "しよう",
    "potential": "できる",
    "passive": "される",
    "causative": "させる",
    "imperative": "しろ",
    "conditional": "すれば",
}

_I_ADJECTIVE_SUFFIXES: dict[str, str] = {
    "negative": "くない",
    "past": "かった",
    "past negative": "くなかった",
    "polite negative": "くないです",
    "polite past": "かったです",
    "te form": "くて",
    "adverbial": "く",
    "conditional": "ければ",
}

_NA_ADJECTIVE_SUFFIXES: dict[str, str] = {
    "negative": "じゃない",
    "past": "だった",
    "past negative": "じゃなかった",
    "polite": "です",
    "polite negative": "じゃありません",
    "polite past": "でした",
    "te form": "で",
    "adverbial": "に",
    "conditional": "なら",
}

_ARU_FORMS = ("ある", "有る", "在る")
_ARU_NEGATIVES = {"negative": "ない", "past negative": "なかった"}

# honorific godan verbs take い instead of り before ます and in the imperative
_HONORIFIC_FORMS = ("いらっしゃる", "下さる", "くださる", "なさる", "おっしゃる", "仰る")
_HONORIFIC_I_ROW_LABELS = ("polite", "polite negative", "polite past", "polite past negative", "imperative")

# adjectives built on いい; other words ending in いい (かわいい) decline regularly
_II_COMPOUNDS = ("いい", "かっこいい", "格好いい", "頭がいい", "仲がいい", "気持ちいい", "調子がいい", "都合がいい")

def get_random_verb_conjugation(rng: random.Random | None = None) -> str:
    return (rng or random).choice(VERB_CONJUGATIONS)

def get_random_adjective_declension(rng: random.Random | None = None) -> str:
    return (rng or random).choice(ADJECTIVE_DECLENSIONS)

def _lookup(table: dict[str, str], label: str, what: str) -> str:
    try:
        return table[label]
    except KeyError:
        raise ValueError(f"unknown {what} label: {label!r}") from None

def _conjugate_godan(characters: str, label: str) -> str:
    if label not in _GODAN_FORMS:
        raise ValueError(f"unknown conjugation label: {label!r}")
    if characters in _ARU_FORMS and label in _ARU_NEGATIVES:
        return _ARU_NEGATIVES[label]
    ending = characters[-1:]
    if ending not in _GODAN_ROWS:
        raise ValueError(f"not a godan verb: {characters!r}")
    stem = characters[:-1]
    row, suffix = _GODAN_FORMS[label]
    if characters in _HONORIFIC_FORMS and label in _HONORIFIC_I_ROW_LABELS:
        return stem + "い" + suffix
    if row in ("te", "ta"):
        if characters.endswith("行く") or characters == "いく":
            te, ta = "って", "った"
        else:
            te, ta = _GODAN_TE_TA[ending]
        return stem + (te if row == "te" else ta)
    return stem + _GODAN_ROWS[ending][_ROW_INDEX[row]] + suffix

def get_conjugated_verb(characters: str, verb_type: VerbType, label: str) -> str:
    if verb_type == VerbType.GODAN:
        return _conjugate_godan(characters, label)
    if verb_type == VerbType.ICHIDAN:
        if not characters.endswith("る"):
            raise ValueError(f"not an ichidan verb: {characters!r}")
        return characters[:-1] + _lookup(_ICHIDAN_SUFFIXES, label, "conjugation")
    if verb_type == VerbType.SURU:
        # listed both with and without the trailing する
        base = characters[:-2] if characters.endswith("する") else characters
        return base + _lookup(_SURU_SUFFIXES, label, "conjugation")
    raise ValueError(f"unknown verb type: {verb_type!r}")

def get_declined_adjective(characters: str, adjective_type: AdjectiveType, label: str) -> str:
    if adjective_type == AdjectiveType.I:
        if not characters.endswith("い"):
            raise ValueError(f"not an i-adjective: {characters!r}")
        if label == "polite":
            return characters + "です"
        suffix = _lookup(_I_ADJECTIVE_SUFFIXES, label, "declension")
        if characters in _II_COMPOUNDS:
            # いい declines on the よい stem
            return characters[:-2] + "よ" + suffix
        return characters[:-1] + suffix
    if adjective_type == AdjectiveType.NA_PLAIN:
        base = characters[:-1] if characters.endswith("な") else characters
        return base + _lookup(_NA_ADJECTIVE_SUFFIXES, label, "declension")
    raise ValueError(f"unknown adjective type: {adjective_type!r}")

# declared in match priority order
class InflectionForm(Enum):
    GODAN_VERB = ("godan verb", VerbType.GODAN)
    ICHIDAN_VERB = ("ichidan verb", VerbType.ICHIDAN)
    SURU_VERB = ("する verb", VerbType.SURU)
    I_ADJECTIVE = ("い adjective", AdjectiveType.I)
    NA_ADJECTIVE = ("な adjective", AdjectiveType.NA_PLAIN)

    def __init__(self, label: str, renderer_type: VerbType | AdjectiveType):
        self.label = label
        self.renderer_type = renderer_type

    @property
    def is_verb(self) -> bool:
        return isinstance(self.renderer_type, VerbType)

    @classmethod
    def classify(cls, parts_of_speech: list[str]) -> InflectionForm | None:
        listed = set(parts_of_speech or [])
        for form in cls:
            if form.label in listed:
                return form
        return None

    def random_label(self, rng: random.Random | None = None) -> str:
        if self.is_verb:
            return get_random_verb_conjugation(rng)
        return get_random_adjective_declension(rng)

    def render(self, characters: str, label: str) -> str:
        if self.is_verb:
            return get_conjugated_verb(characters, self.renderer_type, label)
        return get_declined_adjective(characters, self.renderer_type, label)
