"""
Participant id normalisation and query helpers.
"""
from __future__ import annotations

import re

from dealflow.data.schemas import DealParty

_WHITESPACE_RE = re.compile(r"\s+")


def slugify_company(name: str) -> str:
    """Naive company slug: lowercase, whitespace runs become hyphens.

    Punctuation is kept as-is ("Amazon (Project Kuiper)" -> "amazon-(project-kuiper)").
    """
    return _WHITESPACE_RE.sub("-", name.strip().lower())


def canonical_participant_id(party: DealParty) -> str:
    """The explicit slug when the party carries one, else the naive slug of its name."""
    if party.company_slug:
        return party.company_slug
    return slugify_company(party.company)


def normalize_query(query: str | None) -> str:
    """Lowercase the query; None or blank becomes the empty (match-all) query."""
    if query is None or not query.strip():
        return ""
    return query.lower()
