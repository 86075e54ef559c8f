"""Tests for Handlebars narrative rendering: templates, languages, and errors."""

import pytest

from aquaterra.narration import (
    NARRATIVE_TEMPLATES,
    NarrationError,
    Narrator,
    join_sentences,
    render_sentence,
)


# ── render_sentence ──────────────────────────────────────────


def test_render_simple_variable():
    assert render_sentence("Hit for {{damage}}!", {"damage": 42}) == "Hit for 42!"


def test_render_missing_variable():
    assert render_sentence("Hit for {{damage}}!", {}) == "Hit for !"


def test_render_triple_stash_keeps_apostrophes():
    result = render_sentence("{{{enemy}}} attacks", {"enemy": "Neptune's Wrath"})
    assert result == "Neptune's Wrath attacks"


def test_render_invalid_template():
    with pytest.raises(NarrationError):
        render_sentence("{{> missing_partial}}", {})


# ── Narrator ─────────────────────────────────────────────────


def test_every_language_has_every_sentence():
    keys = set(NARRATIVE_TEMPLATES["pt"])
    for templates in NARRATIVE_TEMPLATES.values():
        assert set(templates) == keys


def test_portuguese_attack():
    text = Narrator("pt").sentence("attack", enemy="Onda de Calor", damage=30)
    assert text == "Você atacou Onda de Calor causando 30 de dano!"


def test_english_victory():
    text = Narrator("en").sentence("victory", enemy="Smog", experience=15)
    assert text == "Smog was defeated! You gained 15 experience!"


def test_unknown_key_renders_empty():
    assert Narrator("en").sentence("dance", enemy="Smog") == ""


def test_unsupported_language():
    with pytest.raises(NarrationError):
        Narrator("xx")


def test_custom_templates():
    narrator = Narrator("custom", templates={"heal": "+{{healing}} HP"})
    assert narrator.sentence("heal", healing=20) == "+20 HP"


# ── join_sentences ───────────────────────────────────────────


def test_join_skips_empty_fragments():
    assert join_sentences(["", "B!", "", "C!"]) == "B! C!"
