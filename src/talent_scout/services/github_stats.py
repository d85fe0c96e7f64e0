"""Aggregations over GitHub payloads, as pure functions with no I/O.

The adapter hands these already-validated records; everything here is
deterministic and recomputed per request.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

from talent_scout.domain.entities import (
    LanguageShare,
    LanguageStatistics,
    StarredRepositoriesSummary,
    StarredRepository,
)

TOP_LANGUAGES = 5
TOP_STARRED_LANGUAGES = 5
RECENT_STARS = 10


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def language_statistics(languages: Iterable[str | None]) -> LanguageStatistics:
    """Count primary languages and rank the top five.

    Repositories without a detected language are skipped entirely, so they
    do not dilute the percentages.
    """
    counts: Counter[str] = Counter(lang for lang in languages if lang)
    total = sum(counts.values())

    # sorted() is stable, so equal counts keep first-seen order
    ranked = sorted(counts.items(), key=lambda item: -item[1])[:TOP_LANGUAGES]
    top = [
        LanguageShare(
            name=name,
            count=count,
            percentage=_round_half_up(count / total * 100),
        )
        for name, count in ranked
    ]
    return LanguageStatistics(languages=dict(counts), total_repos=total, top_languages=top)


def starred_summary(starred: Sequence[StarredRepository]) -> StarredRepositoriesSummary:
    """Summarise one page of starred repositories."""
    recent = list(starred[:RECENT_STARS])
    counts: Counter[str] = Counter(repo.language for repo in recent if repo.language)
    top = [name for name, _ in sorted(counts.items(), key=lambda item: -item[1])[:TOP_STARRED_LANGUAGES]]
    return StarredRepositoriesSummary(
        total_starred=len(starred),
        top_starred_languages=top,
        recent_stars=recent,
    )
