"""Discovery queries: phrasings that widen coverage of a tracked brand."""

from __future__ import annotations

from typing import Sequence

DISCOVERY_TEMPLATES = (
    "What do you know about {brand}?",
    "Tell me about {brand} and its features",
    "Compare {brand} with other solutions",
    "What are the benefits of using {brand}?",
    "How does {brand} work?",
    "{brand} reviews and opinions",
    "Is {brand} worth it?",
    "{brand} alternatives and competitors",
)


def generate_discovery_queries(base_query: str, keywords: Sequence[str]) -> list[str]:
    """Expand ``base_query`` with brand-centric questions.

    The first non-blank keyword is treated as the brand. Remaining keywords
    describe the category and feed one "best tools" query.
    """
    terms = [k.strip() for k in keywords if k.strip()]
    if not terms:
        return [base_query]

    brand, *category = terms
    queries = [base_query]
    queries.extend(t.format(brand=brand) for t in DISCOVERY_TEMPLATES)
    if category:
        queries.append(f"Best {' '.join(category)} tools including {brand}")
    return queries
