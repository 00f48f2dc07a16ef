"""
Tests for the input-safety filter.

Covers:
- Normalization for profanity matching
- Whole-word profanity detection, including punctuation obfuscation
- Injection patterns on raw text
- Validator check order
"""

import pytest

from studious.models.validation import Reason
from studious.services.text_filter import (
    InjectionDetector,
    InputValidator,
    ProfanityDetector,
    normalize,
)


class TestNormalize:

    def test_lowercases_and_strips(self):
        assert normalize("  Hello World  ") == "hello world"

    def test_punctuation_becomes_single_space(self):
        assert normalize("a.b,c!!d") == "a b c d"

    def test_collapses_whitespace_runs(self):
        assert normalize("one \t\n  two") == "one two"

    def test_empty_input(self):
        assert normalize("") == ""
        assert normalize("!!!") == ""

    @pytest.mark.parametrize("text", [
        "Hello, World!",
        "  F.U.C.K  ",
        "<script>alert(1)</script>",
        "Déjà vu -- twice",
        "tabs\tand\nnewlines",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestProfanityDetector:

    def setup_method(self):
        self.detector = ProfanityDetector()

    @pytest.mark.parametrize("text", [
        "fuck you",
        "FUCK you",
        "What the Shit",
        "f.u.c.k this",
        "s-h-i-t happens",
        "you b!i!t!c!h",
    ])
    def test_detects_banned_words(self, text):
        assert self.detector.contains_profanity(text) is True

    @pytest.mark.parametrize("text", [
        "classic literature",
        "Pass the glass",
        "Scunthorpe is a town",
        "The Cocktail hour",
        "Photosynthesis",
        "It's hit or miss",
        "Is hit the past tense of hit?",
    ])
    def test_ignores_words_that_only_contain_a_term(self, text):
        assert self.detector.contains_profanity(text) is False

    def test_find_term_reports_match(self):
        assert self.detector.find_term("oh SHIT") == "shit"
        assert self.detector.find_term("all good") is None

    def test_custom_terms(self):
        detector = ProfanityDetector(terms=["heck"])
        assert detector.contains_profanity("what the heck")
        assert not detector.contains_profanity("fuck")


class TestInjectionDetector:

    def setup_method(self):
        self.detector = InjectionDetector()

    @pytest.mark.parametrize("text", [
        "<script>alert(1)</script>",
        "<SCRIPT src='x.js'></SCRIPT>",
        'img onerror="steal()"',
        "onclick = go",
        "function () { return 1 }",
        "function add(a, b) { return a + b }",
        "(x) => x * 2",
        "import React from 'react'",
        "import './styles.css'",
        "import java.util.*;",
        "from os import path",
        "import os",
        "<b>bold</b>",
        "<br/>",
        "<!DOCTYPE html>",
        "<!-- hidden -->",
        "{name}",
        "set {}",
    ])
    def test_detects_injection(self, text):
        assert self.detector.contains_injection(text) is True

    @pytest.mark.parametrize("text", [
        "What is the capital of France?",
        "2 < 3 and 5 > 4",
        "Photosynthesis converts light to energy",
        "The function of the heart is to pump blood",
        "Online learning",
        "The function f(x) = x^2 is a parabola",
        "function g(t) returns the position",
    ])
    def test_clean_text_passes(self, text):
        assert self.detector.contains_injection(text) is False


class TestInputValidator:

    def setup_method(self):
        self.validator = InputValidator()

    def test_clean_text_is_ok(self):
        result = self.validator.validate("Mitochondria")
        assert result.ok
        assert result.reason is None

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
    def test_empty(self, text):
        assert self.validator.validate(text).reason == Reason.EMPTY

    def test_profanity(self):
        assert self.validator.validate("fuck you").reason == Reason.PROFANITY

    def test_injection(self):
        assert self.validator.validate("<script>alert(1)</script>").reason == Reason.INJECTION

    def test_profanity_wins_over_injection(self):
        """Text that is both profane and markup reports profanity."""
        assert self.validator.validate("<b>shit</b>").reason == Reason.PROFANITY

    def test_empty_wins_over_everything(self):
        assert self.validator.validate("   ").reason == Reason.EMPTY

    def test_validate_fields_reports_first_failing_field(self):
        result = self.validator.validate_fields(question="Fine", answer="{bad}")
        assert result.reason == Reason.INJECTION
        assert result.field == "answer"

        result = self.validator.validate_fields(question="", answer="fuck")
        assert result.reason == Reason.EMPTY
        assert result.field == "question"

    def test_validate_fields_all_ok(self):
        assert self.validator.validate_fields(question="Cat", answer="Animal").ok

    def test_injected_detectors_are_used(self):
        validator = InputValidator(profanity=ProfanityDetector(terms=["banana"]))
        assert validator.validate("Banana split").reason == Reason.PROFANITY
        assert validator.validate("fuck").ok

    def test_everyday_flashcard_text_is_ok(self):
        assert self.validator.validate("It's hit or miss").ok
        assert self.validator.validate("The function f(x) = x^2").ok
