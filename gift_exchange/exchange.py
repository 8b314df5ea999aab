# gift_exchange/exchange.py
from __future__ import annotations
import logging
from typing import Optional
import numpy as np

from .engine import GiftAssignmentError, assign_gifts
from .models import DrawResult, ExchangeConfig, ExchangeSpec
from .rules import build_rules
from .validation import validate_participants

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int]) -> Optional[np.random.Generator]:
    """Seeded generator for reproducible draws; None keeps the OS source."""
    if seed is None:
        return None
    return np.random.default_rng(seed)


def run_exchange(
    spec: ExchangeSpec,
    config: Optional[ExchangeConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> DrawResult:
    config = config or ExchangeConfig()
    problems = validate_participants(spec.participants, spec.significant_others, spec.rules)
    if problems:
        return DrawResult(error="Exchange is not valid; nothing drawn.", problems=problems)

    if rng is None:
        rng = make_rng(config.random_seed)
    try:
        assignment = assign_gifts(
            spec.participants,
            spec.significant_others,
            build_rules(spec.rules),
            config=config,
            rng=rng,
        )
    except GiftAssignmentError as e:
        logger.warning("Draw failed for %d participants: %s", len(spec.participants), e)
        return DrawResult(error=str(e))
    return DrawResult(assignment=assignment)
