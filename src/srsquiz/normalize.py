from __future__ import annotations
import re
import unicodedata

_QUOTE_MAP = {
    "’": "'",
    "‘": "'",
    "“": "\"",
    "”": "\"",
}

# katakana ァ..ヶ map onto hiragana ぁ..ゖ at a fixed offset
_KATAKANA_FIRST = 0x30A1
_KATAKANA_LAST = 0x30F6
_KANA_OFFSET = 0x60

def _nfkc_normalize(s: str) -> str:
    if not s:
        return ""
    s = unicodedata.normalize("NFKC", s)
    for src, dst in _QUOTE_MAP.items():
        s = s.replace(src, dst)
    return s

def norm_text(s: str) -> str:
    s = _nfkc_normalize(s or "")
    s = s.strip()
    s = re.sub(r"\s+", " ", s)
    return s

def norm_answer_text(s: str) -> str:
    s = norm_text(s)
    while s and s[-1] in ".!?,":
        s = s[:-1]
    s = s.strip()
    return s

def _letters_only(s: str) -> str:
    return "".join(ch for ch in s or "" if unicodedata.category(ch).startswith(("L", "N")))

def norm_cmp_text(s: str) -> str:
    normalized = norm_answer_text(s)
    normalized = _letters_only(normalized)
    return normalized.casefold()

def to_hiragana(s: str) -> str:
    out = []
    for ch in s or "":
        code = ord(ch)
        if _KATAKANA_FIRST <= code <= _KATAKANA_LAST:
            out.append(chr(code - _KANA_OFFSET))
        else:
            out.append(ch)
    return "".join(out)

def norm_reading_text(s: str) -> str:
    s = norm_answer_text(s)
    s = re.sub(r"\s+", "", s)
    return to_hiragana(s)

def _is_kana_char(ch: str) -> bool:
    code = ord(ch)
    return 0x3041 <= code <= 0x309F or 0x30A0 <= code <= 0x30FF

def is_kana(s: str) -> bool:
    s = re.sub(r"\s+", "", s or "")
    return bool(s) and all(_is_kana_char(ch) for ch in s)

def has_kana(s: str) -> bool:
    return any(_is_kana_char(ch) for ch in s or "")

def has_latin(s: str) -> bool:
    return any("a" <= ch.lower() <= "z" for ch in s or "")
