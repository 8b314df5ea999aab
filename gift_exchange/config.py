# gift_exchange/config.py
from __future__ import annotations
import os
import textwrap

from .constants import MAX_ASSIGNMENT_ATTEMPTS, MAX_TOTAL_RESTARTS

# ===== Draw defaults =====
DEFAULT_CONFIG = {
    "max_assignment_attempts": MAX_ASSIGNMENT_ATTEMPTS,
    "max_total_restarts": MAX_TOTAL_RESTARTS,
    "random_seed": None,             # None -> OS randomness (secrets)
}

EXCHANGE_FILE = "exchange.yaml"
SAMPLE_PARTICIPANTS_FILE = "sample_participants.csv"


def ensure_assets_exist(assets_dir: str = "assets"):
    os.makedirs(assets_dir, exist_ok=True)
    exchange_path = os.path.join(assets_dir, EXCHANGE_FILE)
    if not os.path.exists(exchange_path):
        with open(exchange_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_EXCHANGE_YAML)
    sample_path = os.path.join(assets_dir, SAMPLE_PARTICIPANTS_FILE)
    if not os.path.exists(sample_path):
        with open(sample_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SAMPLE_PARTICIPANTS_CSV)
    return exchange_path, sample_path


# ===== Sample family exchange =====
DEFAULT_EXCHANGE_YAML = textwrap.dedent("""\
participants:
  - kayla
  - mitch
  - tyler
  - zach
  - alyssum
  - emma
  - sophie

significant_others:
  - [zach, alyssum]
  - [kayla, mitch]

rules:
  # one of the couple buys for tyler
  - type: one_of_gives_to
    givers: [kayla, mitch]
    receiver: tyler
  - type: gives_to_one_of
    giver: tyler
    receivers: [sophie, emma]
""")

# ===== Sample participant CSV (Partner column pairs couples) =====
DEFAULT_SAMPLE_PARTICIPANTS_CSV = textwrap.dedent("""\
Name,Partner
kayla,mitch
mitch,kayla
tyler,
zach,alyssum
alyssum,zach
emma,
sophie,
""")
