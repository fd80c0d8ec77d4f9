"""String helpers for property and document titles."""

from __future__ import annotations

import functools
import re

# Runs of letters and digits; underscores and punctuation separate words
_WORD_RUN_RE: re.Pattern[str] = re.compile(r"[^\W_]+")

_IRREGULAR_SINGULARS: dict[str, str] = {
    "people": "person",
    "children": "child",
    "men": "man",
    "women": "woman",
    "mice": "mouse",
    "geese": "goose",
    "teeth": "tooth",
    "feet": "foot",
    "data": "datum",
    "criteria": "criterion",
    "phenomena": "phenomenon",
    "indices": "index",
    "matrices": "matrix",
    "vertices": "vertex",
    "crises": "crisis",
    "theses": "thesis",
    "diagnoses": "diagnosis",
    "quizzes": "quiz",
    "whizzes": "whiz",
}

_UNCOUNTABLE: frozenset[str] = frozenset(
    {"equipment", "information", "news", "series", "species", "status"}
)

# Singular words ending in "s" whose plural only adds "es"
_S_ENDING_SINGULARS: frozenset[str] = frozenset(
    {
        "alias",
        "atlas",
        "bonus",
        "bus",
        "campus",
        "canvas",
        "census",
        "circus",
        "focus",
        "gas",
        "lens",
        "minus",
        "plus",
        "status",
        "virus",
    }
)


def _split_run(run: str) -> list[str]:
    parts: list[str] = []
    current = ""
    for i, char in enumerate(run):
        if current:
            prev = current[-1]
            following = run[i + 1] if i + 1 < len(run) else ""
            boundary = (
                char.isdigit() != prev.isdigit()
                or (char.isupper() and not prev.isupper())
                # Last capital of an acronym starts the next word: HTMLParser
                or (char.isupper() and prev.isupper() and following.islower())
            )
            if boundary:
                parts.append(current)
                current = ""
        current += char
    if current:
        parts.append(current)
    return parts


@functools.lru_cache(maxsize=None)
def words(name: str) -> tuple[str, ...]:
    """
    Split an identifier into its words.

    Examples:
        >>> words("full_name")
        ('full', 'name')
        >>> words("fullName")
        ('full', 'Name')
        >>> words("HTMLParser2")
        ('HTML', 'Parser', '2')
        >>> words("café_name")
        ('café', 'name')
    """
    return tuple(
        part for run in _WORD_RUN_RE.findall(name) for part in _split_run(run)
    )


def lower_case(name: str) -> str:
    """
    Convert an identifier to space separated lower case words.

        >>> lower_case("fullName")
        'full name'
    """
    return " ".join(word.lower() for word in words(name))


def capitalize(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


@functools.lru_cache(maxsize=None)
def singularize(name: str) -> str:
    """
    Naive English singularisation for model names.

        >>> singularize("users")
        'user'
        >>> singularize("categories")
        'category'
        >>> singularize("addresses")
        'address'
        >>> singularize("statuses")
        'status'
        >>> singularize("analyses")
        'analysis'
    """
    lower = name.lower()
    if lower in _UNCOUNTABLE or lower in _S_ENDING_SINGULARS:
        return name
    if lower in _IRREGULAR_SINGULARS:
        singular = _IRREGULAR_SINGULARS[lower]
        return singular.capitalize() if name[:1].isupper() else singular
    if lower.endswith("es") and lower[:-2] in _S_ENDING_SINGULARS:
        return name[:-2]
    if lower.endswith("yses"):
        return name[:-2] + "is"
    if lower.endswith("ies") and len(lower) > 3:
        return name[:-3] + "y"
    if lower.endswith(("sses", "shes", "ches", "xes", "zzes")):
        return name[:-2]
    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")):
        return name[:-1]
    return name


def property_title(name: str) -> str:
    """Title for a property, e.g. ``full_name`` -> ``Full name``."""
    return capitalize(lower_case(name))


def document_title(model_name: str) -> str:
    """Title for a model document, e.g. ``users`` -> ``User``."""
    return capitalize(singularize(model_name))
