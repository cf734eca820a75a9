"""Descriptor normalization.

Turns the raw descriptor of a chord symbol (the text between the root note
and the optional bass note) into the canonical form the symbol matcher
expects: lowercase except for the major ``M``, no stray whitespace, spaces at
ambiguous token boundaries, and an explicit verb on every token of a
parenthesized list.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Letter runs to lowercase; uppercase M carries the major/minor distinction
LETTERS_EXCEPT_MAJOR_M_RE = re.compile(r"[A-LN-Za-z]+")

# Words damaged by the M-preserving lowercase pass
RESTORED_WORDS: tuple[tuple[str, str], ...] = (
    ("oMit", "omit"),
    ("diM", "dim"),
    ("augMented", "augmented"),
)

WHITESPACE_RE = re.compile(r"\s+")

VERBS: tuple[str, ...] = ("add", "omit", "no")

# (pattern, replacement) pairs, each targeting its own context
DISAMBIGUATORS: tuple[tuple[re.Pattern[str], str], ...] = (
    # "dimadd9" -> "dim add9"
    (re.compile(r"(7?dim)add"), r"\1 add"),
    # "madd9" -> "m add9", not "ma" + "dd9"
    (re.compile(r"([mM])add"), r"\1 add"),
    # "mino3" -> "mi no3", not "min" + "o3"
    (re.compile(r"i(no[35])"), r"i \1"),
    # "b96" -> "b9 6"
    (re.compile(r"([b♭#♯]9)6"), r"\1 6"),
    # "m9/6" -> "m 9/6"
    (re.compile(r"(?<![b♭#♯])(9/?6)"), r" \1"),
    # "7b9#11" -> "7 b9 #11"
    (re.compile(r"(?<=[^\s(,])([b♭#♯+][0-9])"), r" \1"),
    # "7no5add13" -> "7 no5 add13"
    (re.compile(r"(?<=[^\s(,])((?:add|omit|no)(?=[0-9b♭#♯]))"), r" \1"),
)

PARENTHESIS_RE = re.compile(r"\((.*?)\)")


def fold_case(descriptor: str) -> str:
    """Lowercase the descriptor except for the major ``M``.

    Examples
    --------
    >>> fold_case("Maj7")
    'Maj7'
    >>> fold_case("MIN")
    'Min'
    >>> fold_case("OMIT5")
    'omit5'
    """
    folded = LETTERS_EXCEPT_MAJOR_M_RE.sub(lambda match: match.group(0).lower(), descriptor)
    for damaged, restored in RESTORED_WORDS:
        folded = folded.replace(damaged, restored)
    return folded


def remove_spaces(descriptor: str) -> str:
    """Remove every whitespace character."""
    return WHITESPACE_RE.sub("", descriptor)


def add_disambiguators(descriptor: str) -> str:
    """Insert spaces at token boundaries the matcher would misread.

    Examples
    --------
    >>> add_disambiguators("madd9")
    'm add9'
    >>> add_disambiguators("7b96")
    '7 b9 6'
    """
    for pattern, replacement in DISAMBIGUATORS:
        descriptor = pattern.sub(replacement, descriptor)
    return descriptor


def _qualify_tokens(group: str) -> list[str]:
    tokens: list[str] = []
    current_verb = ""
    for token in group.split(","):
        token = token.strip()
        verb = next((v for v in VERBS if token.startswith(v)), None)
        if verb is not None:
            current_verb = verb
            tokens.append(token)
        else:
            tokens.append(current_verb + token)
    return tokens


def add_missing_verbs(descriptor: str) -> str:
    """Give every token of a parenthesized list its own verb.

    The verb of a token (``add``, ``omit`` or ``no``) carries over to the
    following tokens that have none. The parenthesized group is replaced by
    the space-separated, fully qualified tokens.

    Examples
    --------
    >>> add_missing_verbs("(add9,11,13)")
    ' add9 add11 add13 '
    >>> add_missing_verbs("7(no5,add13)")
    '7 no5 add13 '
    >>> add_missing_verbs("7(b9,#11)")
    '7 b9 #11 '
    """
    return PARENTHESIS_RE.sub(lambda match: " " + " ".join(_qualify_tokens(match.group(1))) + " ", descriptor)


def collapse_spaces(descriptor: str) -> str:
    """Collapse runs of whitespace into one space and trim the ends."""
    return WHITESPACE_RE.sub(" ", descriptor).strip()


# Applied in this order
FILTERS: tuple[Callable[[str], str], ...] = (
    fold_case,
    remove_spaces,
    add_disambiguators,
    add_missing_verbs,
    collapse_spaces,
)


def normalize_descriptor(descriptor: str) -> str:
    """Convert a raw descriptor into its matchable canonical form.

    Every step is total: any string is accepted. Normalizing an already
    normalized descriptor returns it unchanged, with one exception: bare
    degrees split out of a parenthesized list (``"7(9)"`` -> ``"7 9"``) lose
    their separating space on a second pass. Joined degrees can form another
    symbol: ``"6(9)"`` gives ``"6 9"``, which normalizes again to ``"69"``.

    Parameters
    ----------
    descriptor : str
        The descriptor as typed (e.g., "MAJ7", "m (add 9)", "7(no5,add13)").

    Returns
    -------
    str
        The canonical descriptor (e.g., "Maj7", "m add9", "7 no5 add13").

    Examples
    --------
    >>> normalize_descriptor("m (add 9)")
    'm add9'
    >>> normalize_descriptor("7(no5,add13)")
    '7 no5 add13'
    >>> normalize_descriptor(normalize_descriptor("7(no5,add13)"))
    '7 no5 add13'
    """
    for step in FILTERS:
        descriptor = step(descriptor)
    return descriptor
