"""Handlebars rendering for combat narrative sentences.

A combat turn's narrative is up to three sentences joined by a space:

    action   what the player did (attack / heal / purify)
    counter  the enemy striking back, only when it survived a non-heal turn
    victory  only when the enemy was defeated

Template variables: enemy, damage, healing, counter, experience.
"""

from collections.abc import Callable
from typing import Any

import pybars

SUPPORTED_LANGUAGES = ("pt", "en")

NARRATIVE_TEMPLATES: dict[str, dict[str, str]] = {
    "pt": {
        "attack": "Você atacou {{{enemy}}} causando {{damage}} de dano!",
        "heal": "Você se curou em {{healing}} pontos de vida!",
        "purify": "Você purificou {{{enemy}}} causando {{damage}} de dano!",
        "counter": "{{{enemy}}} contra-atacou causando {{counter}} de dano!",
        "victory": "{{{enemy}}} foi derrotado! Você ganhou {{experience}} de experiência!",
    },
    "en": {
        "attack": "You attacked {{{enemy}}} for {{damage}} damage!",
        "heal": "You healed yourself for {{healing}} health!",
        "purify": "You purified {{{enemy}}} for {{damage}} damage!",
        "counter": "{{{enemy}}} struck back for {{counter}} damage!",
        "victory": "{{{enemy}}} was defeated! You gained {{experience}} experience!",
    },
}

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class NarrationError(Exception):
    """Raised when a narrative template fails to compile or render."""


def render_sentence(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render one sentence template. Compiled templates are cached."""
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context))
    except Exception as e:
        raise NarrationError(f"Template error: {e}") from e


class Narrator:
    """Renders narrative sentences for one language.

    Unknown sentence keys (e.g. an unrecognised action type) render as "".
    """

    def __init__(self, language: str = "pt", templates: dict[str, str] | None = None) -> None:
        if templates is None:
            if language not in NARRATIVE_TEMPLATES:
                raise NarrationError(f"Unsupported narrative language: {language}")
            templates = NARRATIVE_TEMPLATES[language]
        self.language = language
        self._templates = templates

    def sentence(self, key: str, **context: Any) -> str:
        template = self._templates.get(key)
        if template is None:
            return ""
        return render_sentence(template, context)


def join_sentences(sentences: list[str]) -> str:
    """Join non-empty sentences with single spaces."""
    return " ".join(s for s in sentences if s)
