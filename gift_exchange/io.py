# gift_exchange/io.py
from __future__ import annotations
import io
from typing import Dict, List, Tuple
import yaml
import pandas as pd

from .aliases import map_headers
from .constants import CSV_HEADERS, normalize_name
from .models import ExchangeSpec


def load_participants_csv(file_like) -> Tuple[List[str], List[Tuple[str, str]]]:
    """
    Read a participant CSV (bytes or file-like).
    Returns (participants, significant_others); each couple is listed once.
    """
    if isinstance(file_like, (bytes, bytearray)):
        file_like = io.BytesIO(file_like)
    df = pd.read_csv(file_like, dtype=str, keep_default_na=False)
    df, _ = map_headers(df)
    if "Name" not in df.columns:
        raise ValueError("Missing required columns: ['Name']")
    if "Partner" not in df.columns:
        df["Partner"] = ""
    df = df[CSV_HEADERS].fillna("")

    participants: List[str] = []
    couples: List[Tuple[str, str]] = []
    seen_pairs = set()
    for _, r in df.iterrows():
        name = normalize_name(r["Name"])
        if not name:
            continue
        participants.append(name)
        partner = normalize_name(r["Partner"])
        if partner:
            key = frozenset((name, partner))
            if key not in seen_pairs:
                seen_pairs.add(key)
                couples.append((name, partner))
    return participants, couples


def generate_template_csv_bytes() -> bytes:
    empty = pd.DataFrame(columns=CSV_HEADERS)
    buf = io.StringIO()
    empty.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def assignment_to_df(assignment: Dict[str, str]) -> pd.DataFrame:
    rows = [{"Giver": g, "Receiver": r} for g, r in assignment.items()]
    return pd.DataFrame(rows, columns=["Giver", "Receiver"])


def save_assignment_csv_bytes(assignment: Dict[str, str]) -> bytes:
    buf = io.StringIO()
    assignment_to_df(assignment).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def parse_exchange_yaml(text: str) -> ExchangeSpec:
    try:
        obj = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Exchange file is not valid YAML: {e}") from e
    if not isinstance(obj, dict):
        raise ValueError("Exchange file must be a mapping with a 'participants' list.")
    return ExchangeSpec(**obj)


def load_exchange_yaml(path: str) -> ExchangeSpec:
    with open(path, "r", encoding="utf-8") as f:
        return parse_exchange_yaml(f.read())


def save_exchange_yaml(path: str, spec: ExchangeSpec):
    data = spec.model_dump(exclude_none=True)
    data["significant_others"] = [list(c) for c in spec.significant_others]
    data["rules"] = [
        {k: v for k, v in r.items() if v not in (None, [])} for r in data["rules"]
    ]
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)
