# gift_exchange/engine.py
from __future__ import annotations
import logging
import secrets
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Sequence

from .models import ExchangeConfig
from .rules import GiftAssignmentRule, SignificantOthers, rules_factory

logger = logging.getLogger(__name__)


class GiftAssignmentError(RuntimeError):
    """Raised when the draw gives up after the configured number of restarts."""


def _pick(items: List[str], rng) -> str:
    # rng follows numpy.random.Generator: integers(high) -> int in [0, high)
    if rng is None:
        return items[secrets.randbelow(len(items))]
    return items[int(rng.integers(len(items)))]


def assign_gifts(
    givers: Sequence[str],
    significant_others: Iterable[SignificantOthers] = (),
    additional_rules: Iterable[GiftAssignmentRule] = (),
    config: Optional[ExchangeConfig] = None,
    rng=None,
) -> Dict[str, str]:
    """
    Draw a giver -> receiver mapping that satisfies every rule.

    Picks a random unassigned giver and a random unclaimed receiver, keeps the pair
    when all rules accept it and drops it otherwise. After more than
    ``max_assignment_attempts`` rejections (counted across the whole attempt, not per
    giver) the draw is thrown away and started over. Raises GiftAssignmentError once
    ``max_total_restarts`` restarts have happened.
    """
    config = config or ExchangeConfig()
    all_rules = rules_factory(significant_others, additional_rules)
    participants = list(givers)

    assignments: Dict[str, str] = {}
    snapshot = MappingProxyType(assignments)
    previous_giver_attempt = 0
    total_restarts = 0

    while len(assignments) != len(participants):
        unassigned_givers = [g for g in participants if g not in assignments]
        next_giver = _pick(unassigned_givers, rng)
        claimed = set(assignments.values())
        unassigned_receivers = [r for r in participants if r not in claimed]
        next_receiver = _pick(unassigned_receivers, rng)

        assignments[next_giver] = next_receiver
        if not all(rule(next_giver, next_receiver, snapshot) for rule in all_rules):
            del assignments[next_giver]
            previous_giver_attempt += 1

        if previous_giver_attempt > config.max_assignment_attempts:
            assignments.clear()
            total_restarts += 1
            previous_giver_attempt = 0
            logger.info("Attempt %d failed", total_restarts)

        if total_restarts >= config.max_total_restarts:
            raise GiftAssignmentError("Max total restarts reached. Unable to create assignments.")

    return dict(assignments)
