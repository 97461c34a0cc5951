"""Text utilities: tokenizing target sentences and comparing letters."""

import re
import unicodedata

from .models import CharMatch, Token, TokenType

# A word is a run of letters/digits, optionally joined by apostrophes (d'ól, b’fhéidir).
# Any other non-space character becomes a punctuation token on its own.
_TOKEN_PATTERN = re.compile(r"[^\W_]+(?:['’][^\W_]+)*|\S")


def normalize_text(text: str) -> str:
    """Compose accents so that every accented letter is a single character."""
    return unicodedata.normalize('NFC', text or '')


def is_letter(char: str) -> bool:
    """True for a typeable character: any letter, accented or not, or a digit."""
    return len(char) == 1 and char.isalnum()


def is_punctuation(text: str) -> bool:
    return not any(is_letter(c) for c in text)


def tokenize_text(text: str) -> list[Token]:
    """Split a target-language sentence into word and punctuation tokens."""
    tokens = []
    for match in _TOKEN_PATTERN.finditer(normalize_text(text)):
        surface = match.group()
        kind = TokenType.PUNCTUATION if is_punctuation(surface) else TokenType.WORD
        tokens.append(Token(kind, surface))
    return tokens


def strip_diacritics(char: str) -> str:
    decomposed = unicodedata.normalize('NFD', char)
    return ''.join(c for c in decomposed if not unicodedata.combining(c))


def compare_chars(typed: str, target: str) -> CharMatch:
    """Compare a typed letter with the letter expected at a slot.

    Case is ignored. Typing the bare letter where the target carries a fada
    (a for á) is a near miss rather than a plain mistake.
    """
    typed = normalize_text(typed)
    target = normalize_text(target)
    if typed == target or typed.casefold() == target.casefold():
        return CharMatch.CORRECT

    target_base = strip_diacritics(target)
    if target_base != target and strip_diacritics(typed).casefold() == target_base.casefold():
        return CharMatch.FADA_MISSING
    return CharMatch.INCORRECT
