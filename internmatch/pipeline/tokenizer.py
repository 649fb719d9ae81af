"""Text normalization: tokens and the profile's matchable vocabulary."""

import re

from internmatch.core.schemas import Profile

_SEPARATOR = re.compile(r"[^a-z0-9]+")


def tokenize(text: str | None) -> list[str]:
    """Lower-case text and split it on every run of non-alphanumeric characters.

    Empty fragments are dropped, so blank input gives an empty list and
    re-tokenizing the joined output gives the same tokens.
    """
    if not text:
        return []
    return [t for t in _SEPARATOR.split(text.lower()) if t]


def build_token_set(profile: Profile) -> frozenset[str]:
    """Union of lower-cased skills and the interests / free-text tokens.

    Skills go in whole ("machine learning" stays one entry) so multi-word
    skills can match record skills exactly.
    """
    tokens = {skill.lower() for skill in profile.skills}
    tokens.update(tokenize(profile.interests))
    if profile.free_text:
        tokens.update(tokenize(profile.free_text))
    return frozenset(tokens)
