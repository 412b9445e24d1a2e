"""
Naming helpers — English inflection and case conversion.

Laravel derives table names, relation names and class names from each
other by convention (``Post`` ↔ ``posts`` ↔ ``post_id``).  These helpers
reproduce the conventions closely enough for scaffolding; they are not
a general-purpose inflector.
"""

from __future__ import annotations

import re

# ── Inflection tables ───────────────────────────────────────────

_IRREGULAR: dict[str, str] = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "tooth": "teeth",
    "foot": "feet",
    "mouse": "mice",
    "goose": "geese",
    "ox": "oxen",
    "leaf": "leaves",
    "life": "lives",
    "knife": "knives",
    "wife": "wives",
    "half": "halves",
    "criterion": "criteria",
    "datum": "data",
    "medium": "media",
    "analysis": "analyses",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
    "status": "statuses",
    "quiz": "quizzes",
}
_IRREGULAR_SINGULAR: dict[str, str] = {v: k for k, v in _IRREGULAR.items()}

_UNCOUNTABLE = frozenset({
    "audio", "equipment", "feedback", "information", "metadata", "money",
    "news", "series", "sheep", "species", "fish", "deer", "software",
    "hardware", "rice", "traffic", "knowledge", "staff", "data",
})

_VOWELS = "aeiou"

# Singulars ending in "ie": "movies" → "movie", not "movy"
_IE_SINGULARS = frozenset({
    "movie", "cookie", "tie", "pie", "lie", "zombie", "calorie", "rookie",
    "selfie", "smoothie", "brownie", "hoodie", "genie", "goalie", "newbie",
    "pixie", "prairie", "auntie", "bookie", "sortie",
})

# Singulars ending in a single "s" that take "es": "buses" → "bus"
_S_SINGULARS = frozenset({
    "bus", "alias", "gas", "canvas", "atlas", "lens", "plus", "bonus",
    "campus", "census", "virus", "circus", "chorus", "corpus", "walrus",
    "iris", "apparatus", "prospectus",
})


def _match_case(source: str, word: str) -> str:
    """Carry the capitalisation of *source* over to *word*."""
    if source.isupper() and len(source) > 1:
        return word.upper()
    if source[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def _split_last(word: str) -> tuple[str, str]:
    """Split a compound word so only its last part gets inflected.

    ``BlogPost`` → (``Blog``, ``Post``); ``blog_post`` → (``blog_``, ``post``).
    """
    if "_" in word:
        head, _, tail = word.rpartition("_")
        return head + "_", tail
    parts = re.findall(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])", word)
    if len(parts) > 1:
        tail = parts[-1]
        return word[: len(word) - len(tail)], tail
    return "", word


def pluralize(word: str) -> str:
    """Return the plural form of an English noun.

    >>> pluralize("Category")
    'Categories'
    >>> pluralize("blog_post")
    'blog_posts'
    """
    if not word:
        return word
    head, tail = _split_last(word)
    lower = tail.lower()

    if lower in _UNCOUNTABLE or lower in _IRREGULAR_SINGULAR:
        return word
    if lower in _IRREGULAR:
        return head + _match_case(tail, _IRREGULAR[lower])

    # Already plural: "users" stays "users"
    singular = singularize(tail)
    if singular != tail and _pluralize_regular(singular) == tail:
        return word

    return head + _pluralize_regular(tail)


def _pluralize_regular(tail: str) -> str:
    lower = tail.lower()
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in _VOWELS:
        return tail[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return tail + "es"
    return tail + "s"


def singularize(word: str) -> str:
    """Return the singular form of an English noun.

    >>> singularize("categories")
    'category'
    >>> singularize("Addresses")
    'Address'
    """
    if not word:
        return word
    head, tail = _split_last(word)
    lower = tail.lower()

    if lower in _UNCOUNTABLE or lower in _IRREGULAR or lower in _S_SINGULARS:
        return word
    if lower in _IRREGULAR_SINGULAR:
        return head + _match_case(tail, _IRREGULAR_SINGULAR[lower])

    if lower.endswith("ies") and lower[:-1] in _IE_SINGULARS:
        return head + tail[:-1]
    if lower.endswith("es") and lower[:-2] in _S_SINGULARS:
        return head + tail[:-2]
    if lower.endswith("ies") and len(lower) > 3:
        return head + tail[:-3] + "y"
    if lower.endswith(("sses", "xes", "zes", "ches", "shes")):
        return head + tail[:-2]
    if lower.endswith("ss") or lower.endswith("us") or lower.endswith("is"):
        return word
    if lower.endswith("s") and len(lower) > 1:
        return head + tail[:-1]
    return word


def is_plural_of(candidate: str, singular: str) -> bool:
    """Whether *candidate* is the plural form of *singular* (case-insensitive)."""
    return candidate.lower() == pluralize(singular).lower()


# ── Case conversion ─────────────────────────────────────────────


def _words(value: str) -> list[str]:
    """Split snake_case, kebab-case, spaced and StudlyCase input into words."""
    spaced = re.sub(r"[-_\s]+", " ", value)
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", spaced)
    return [w for w in spaced.split() if w]


def studly(value: str) -> str:
    """``blog_post`` → ``BlogPost``."""
    return "".join(w[:1].upper() + w[1:] for w in _words(value))


def camel(value: str) -> str:
    """``author_user`` → ``authorUser``."""
    s = studly(value)
    return s[:1].lower() + s[1:]


def snake(value: str) -> str:
    """``BlogPost`` → ``blog_post``."""
    return "_".join(w.lower() for w in _words(value))


# ── Laravel conventions ─────────────────────────────────────────


def model_name_from_class(class_name: str, suffix: str = "Repository") -> str:
    """``UserRepository`` → ``User``; a bare model name is returned as-is."""
    name = class_name.strip().replace("\\", "/").split("/")[-1]
    if name.endswith(".php"):
        name = name[: -len(".php")]
    if suffix and name.endswith(suffix) and len(name) > len(suffix):
        name = name[: -len(suffix)]
    return studly(name) if "_" in name or "-" in name else name[:1].upper() + name[1:]


def repository_class_name(name: str, suffix: str = "Repository") -> str:
    """Ensure a class name carries the repository suffix."""
    name = model_name_from_class(name, suffix)
    return f"{name}{suffix}"


def table_name_for_model(model_name: str) -> str:
    """``BlogPost`` → ``blog_posts``."""
    return pluralize(snake(model_name))


def model_name_for_table(table: str) -> str:
    """``blog_posts`` → ``BlogPost``."""
    return studly(singularize(table))
