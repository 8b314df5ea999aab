# FILE: gift_exchange/constants.py
from __future__ import annotations

# --- Draw limits ---
MAX_ASSIGNMENT_ATTEMPTS = 10   # rejected picks tolerated before a full restart
MAX_TOTAL_RESTARTS = 10000     # full restarts before giving up

# --- Declarative rule types (exchange.yaml "rules:" entries) ---
RULE_GIVES_TO_ONE_OF = "gives_to_one_of"
RULE_ONE_OF_GIVES_TO = "one_of_gives_to"
RULE_NEVER_GIVES_TO = "never_gives_to"

RULE_TYPES = [
    RULE_GIVES_TO_ONE_OF,
    RULE_ONE_OF_GIVES_TO,
    RULE_NEVER_GIVES_TO,
]

# --- Participant CSV ---
CSV_HEADERS = ["Name", "Partner"]


def normalize_name(name: str) -> str:
    """Collapse whitespace; identifiers are otherwise kept as typed."""
    return " ".join(str(name).split())
