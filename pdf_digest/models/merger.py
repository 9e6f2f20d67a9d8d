from dataclasses import replace

from pdf_digest.models.schema import SCALAR_FIELDS, ArticleSummary


# Merge a partial chunk summary into the accumulator.
# Scalar fields: first non-empty value wins. Keywords: ordered union.
def merge_summaries(acc: ArticleSummary, partial: ArticleSummary) -> ArticleSummary:

    updates = {
        name: getattr(partial, name)
        for name in SCALAR_FIELDS
        if getattr(acc, name) == ""
    }

    keywords = list(acc.keywords)
    seen = set(keywords)
    for kw in partial.keywords:
        if kw not in seen:
            keywords.append(kw)
            seen.add(kw)

    return replace(acc, keywords=keywords, **updates)
