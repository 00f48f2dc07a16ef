"""
Input-safety filter for user-submitted text.

Every free-text field (study set names, flashcard questions and answers, note
titles) passes through `InputValidator.validate` before it is stored. The
filter is a heuristic: it catches casual profanity and pasted markup or code,
it is not a security boundary.
"""
import logging
import re
from typing import Iterable, List, Optional, Pattern, Tuple

from studious.models.validation import Reason, ValidationResult

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")

BANNED_TERMS = frozenset({
    "ass",
    "asshole",
    "bastard",
    "bitch",
    "bullshit",
    "cunt",
    "dick",
    "fuck",
    "fucker",
    "fucking",
    "motherfucker",
    "piss",
    "shit",
    "slut",
    "whore",
})

# Checked against the raw text, in this order.
INJECTION_PATTERNS: List[Tuple[str, Pattern]] = [
    ("script_block", re.compile(r"<\s*script\b[^>]*>.*?<\s*/\s*script\s*>", re.IGNORECASE | re.DOTALL)),
    ("event_handler", re.compile(r"\bon[a-z]+\s*=", re.IGNORECASE)),
    ("function_literal", re.compile(r"\bfunction\s*[\w$]*\s*\([^)]*\)\s*\{", re.IGNORECASE)),
    ("arrow_function", re.compile(r"\([^()]*\)\s*=>")),
    ("js_import", re.compile(r"\bimport\s+[\w*{},\s]+?\s+from\s+['\"]", re.IGNORECASE)),
    ("bare_import", re.compile(r"\bimport\s*\(?\s*['\"]", re.IGNORECASE)),
    ("java_import", re.compile(r"\bimport\s+(?:static\s+)?[\w.]+\.(?:\*|\w+)\s*;", re.IGNORECASE)),
    ("python_from_import", re.compile(r"^\s*from\s+[\w.]+\s+import\s+[\w.*(]", re.IGNORECASE | re.MULTILINE)),
    ("python_import", re.compile(r"^\s*import\s+[\w.]+(?:\s+as\s+\w+)?\s*;?\s*$", re.IGNORECASE | re.MULTILINE)),
    ("markup_tag", re.compile(r"<\s*/?\s*[a-z][\w:-]*(?:\s[^<>]*)?/?\s*>", re.IGNORECASE)),
    ("markup_declaration", re.compile(r"<![^<>]*>")),
    ("brace_span", re.compile(r"\{[^{}]*\}")),
]


def normalize(text: str) -> str:
    """Canonical form used for profanity matching.

    Lowercases, turns every character outside ``[a-z0-9]`` and whitespace
    into a space, collapses whitespace runs and strips the ends.
    """
    lowered = (text or "").lower()
    spaced = _NON_ALNUM.sub(" ", lowered)
    return _WHITESPACE.sub(" ", spaced).strip()


def _term_pattern(term: str) -> Pattern:
    # Normalization turns punctuation between letters into single spaces, so
    # the term matches either contiguous or with a space after every letter.
    # A partial split ("s hit") is left alone; it is usually two real words.
    chars = [re.escape(ch) for ch in term.lower()]
    return re.compile(rf"\b(?:{''.join(chars)}|{' '.join(chars)})\b", re.IGNORECASE)


class ProfanityDetector:
    def __init__(self, terms: Iterable[str] = BANNED_TERMS):
        self._patterns = [(term, _term_pattern(term)) for term in sorted(set(terms))]

    def find_term(self, text: str) -> Optional[str]:
        """Return the first banned term found as a whole word, or None"""
        normalized = normalize(text)
        if not normalized:
            return None
        for term, pattern in self._patterns:
            if pattern.search(normalized):
                return term
        return None

    def contains_profanity(self, text: str) -> bool:
        term = self.find_term(text)
        if term is not None:
            logger.debug(f"Profanity match on term '{term}'")
            return True
        return False


class InjectionDetector:
    def __init__(self, patterns: Optional[List[Tuple[str, Pattern]]] = None):
        self._patterns = list(patterns) if patterns is not None else list(INJECTION_PATTERNS)

    def contains_injection(self, text: str) -> bool:
        raw = text or ""
        for name, pattern in self._patterns:
            if pattern.search(raw):
                logger.debug(f"Injection match on pattern '{name}'")
                return True
        return False


class InputValidator:
    """Single pass/fail decision for a piece of user text.

    Checks run in a fixed order and the first failure wins:
    empty, then profanity, then injection.
    """

    def __init__(
        self,
        profanity: Optional[ProfanityDetector] = None,
        injection: Optional[InjectionDetector] = None,
    ):
        self.profanity = profanity or ProfanityDetector()
        self.injection = injection or InjectionDetector()

    def validate(self, text: Optional[str], field: Optional[str] = None) -> ValidationResult:
        if text is None or not text.strip():
            return ValidationResult(reason=Reason.EMPTY, field=field)

        if self.profanity.contains_profanity(text):
            logger.info(f"Rejected {field or 'input'}: profanity")
            return ValidationResult(reason=Reason.PROFANITY, field=field)

        if self.injection.contains_injection(text):
            logger.info(f"Rejected {field or 'input'}: injection")
            return ValidationResult(reason=Reason.INJECTION, field=field)

        return ValidationResult(field=field)

    def validate_fields(self, **fields: Optional[str]) -> ValidationResult:
        """Validate named fields in order and return the first failure"""
        for name, value in fields.items():
            result = self.validate(value, field=name)
            if not result.ok:
                return result
        return ValidationResult()
