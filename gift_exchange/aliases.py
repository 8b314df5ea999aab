# FILE: gift_exchange/aliases.py
from __future__ import annotations
from typing import Dict, Optional

ALIASES = {
    "Name": ["Participant", "Giver", "Full Name", "Person"],
    "Partner": ["Significant Other", "SO", "Spouse", "Couple"],
}

_LOOKUP = {
    alias.lower(): canon
    for canon, aliases in ALIASES.items()
    for alias in [canon, *aliases]
}


def canonical_header(col) -> Optional[str]:
    return _LOOKUP.get(str(col).strip().lower())


def map_headers(df):
    """
    Rename participant CSV columns to Name / Partner.
    A column already named Name / Partner wins; otherwise the first alias does.
    Losing columns keep their header and report None, so the frame never gets
    duplicate columns.
    Returns (renamed_df, mapping_report).
    """
    mapping: Dict[str, Optional[str]] = {}
    claimed = {str(c).strip() for c in df.columns if str(c).strip() in ALIASES}
    for col in df.columns:
        canon = canonical_header(col)
        if canon is not None and str(col).strip() == canon:
            mapping[col] = canon
            continue
        if canon is None or canon in claimed:
            mapping[col] = None
            continue
        claimed.add(canon)
        mapping[col] = canon
    renamed = df.rename(columns={c: m for c, m in mapping.items() if m and m != c})
    return renamed, mapping
