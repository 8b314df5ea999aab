# gift_exchange/rules.py
"""
Rule set builder.

A rule is any callable ``rule(giver, receiver, assignments) -> bool`` where
``assignments`` is a read-only view of the draw so far, including the pair being
tried. Every rule in the set must return True for the pair to be kept.
"""
from __future__ import annotations
from typing import Callable, Iterable, List, Mapping, Sequence, Tuple

from .constants import RULE_GIVES_TO_ONE_OF, RULE_NEVER_GIVES_TO, RULE_ONE_OF_GIVES_TO
from .models import RuleSpec

GiftAssignment = Mapping[str, str]
GiftAssignmentRule = Callable[[str, str, GiftAssignment], bool]
SignificantOthers = Tuple[str, str]


def no_self_assignment(giver: str, receiver: str, assignments: GiftAssignment) -> bool:
    return assignments.get(giver) != giver


DEFAULT_RULES: List[GiftAssignmentRule] = [no_self_assignment]


def significant_other_rule(couple: SignificantOthers) -> GiftAssignmentRule:
    first, second = couple

    def rule(giver: str, receiver: str, assignments: GiftAssignment) -> bool:
        if giver == first:
            return receiver != second
        if giver == second:
            return receiver != first
        return True

    return rule


def rules_factory(
    significant_others: Iterable[SignificantOthers],
    additional_rules: Iterable[GiftAssignmentRule],
) -> List[GiftAssignmentRule]:
    """Default rule, then caller rules in order, then one rule per couple."""
    all_rules: List[GiftAssignmentRule] = [*DEFAULT_RULES, *additional_rules]
    for couple in significant_others:
        all_rules.append(significant_other_rule(couple))
    return all_rules


# -----------------------
# Declarative rules
# -----------------------
def gives_to_one_of(giver: str, receivers: Sequence[str]) -> GiftAssignmentRule:
    allowed = tuple(receivers)

    def rule(candidate: str, receiver: str, assignments: GiftAssignment) -> bool:
        if candidate == giver:
            return assignments.get(giver) in allowed
        return True

    return rule


def one_of_gives_to(givers: Sequence[str], receiver: str) -> GiftAssignmentRule:
    """Once every one of ``givers`` has drawn, at least one must have drawn ``receiver``."""
    group = tuple(givers)

    def rule(candidate: str, _receiver: str, assignments: GiftAssignment) -> bool:
        if candidate in group and all(assignments.get(g) for g in group):
            return any(assignments.get(g) == receiver for g in group)
        return True

    return rule


def never_gives_to(giver: str, receiver: str) -> GiftAssignmentRule:
    def rule(candidate: str, drawn: str, assignments: GiftAssignment) -> bool:
        return not (candidate == giver and drawn == receiver)

    return rule


def build_rule(spec: RuleSpec) -> GiftAssignmentRule:
    if spec.type == RULE_GIVES_TO_ONE_OF:
        if not spec.giver or not spec.receivers:
            raise ValueError(f"{spec.type} needs 'giver' and 'receivers'")
        return gives_to_one_of(spec.giver, spec.receivers)
    if spec.type == RULE_ONE_OF_GIVES_TO:
        if not spec.givers or not spec.receiver:
            raise ValueError(f"{spec.type} needs 'givers' and 'receiver'")
        return one_of_gives_to(spec.givers, spec.receiver)
    if spec.type == RULE_NEVER_GIVES_TO:
        if not spec.giver or not spec.receiver:
            raise ValueError(f"{spec.type} needs 'giver' and 'receiver'")
        return never_gives_to(spec.giver, spec.receiver)
    raise ValueError(f"Unknown rule type: {spec.type}")


def build_rules(specs: Iterable[RuleSpec]) -> List[GiftAssignmentRule]:
    return [build_rule(s) for s in specs]
