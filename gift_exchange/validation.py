# FILE: gift_exchange/validation.py
from typing import Dict, Iterable, List, Sequence, Tuple

from gift_exchange.models import RuleSpec
from gift_exchange.rules import GiftAssignmentRule


def validate_participants(
    participants: Sequence[str],
    significant_others: Iterable[Tuple[str, str]] = (),
    rules: Iterable[RuleSpec] = (),
) -> List[str]:
    """
    Problems that make a draw pointless or impossible. Empty list means OK.
    """
    errs = []
    if not participants:
        errs.append("No participants.")
        return errs
    if any(not str(p).strip() for p in participants):
        errs.append("Blank participant name detected.")

    seen = set()
    dupes = []
    for p in participants:
        if p in seen and p not in dupes:
            dupes.append(p)
        seen.add(p)
    if dupes:
        errs.append(f"Duplicate participants detected: {', '.join(dupes)}")

    if len(participants) < 2:
        errs.append("At least 2 participants are required.")

    for a, b in significant_others:
        if a == b:
            errs.append(f"Couple ({a}, {b}) lists the same person twice.")
        unknown = [x for x in (a, b) if x not in seen]
        if unknown:
            errs.append(f"Couple ({a}, {b}) names unknown participant(s): {', '.join(unknown)}")

    for i, spec in enumerate(rules, start=1):
        named = [spec.giver, spec.receiver, *spec.givers, *spec.receivers]
        unknown = [x for x in named if x and x not in seen]
        if unknown:
            errs.append(f"Rule #{i} ({spec.type}) names unknown participant(s): {', '.join(unknown)}")
    return errs


def check_assignment(assignment: Dict[str, str], participants: Sequence[str], rules: Iterable[GiftAssignmentRule] = ()) -> List[str]:
    """
    Re-check a finished draw: every participant gives once, receives once, and
    every rule accepts the final mapping.
    """
    errs = []
    if sorted(assignment.keys()) != sorted(participants):
        errs.append("Givers do not match participants.")
    if sorted(assignment.values()) != sorted(participants):
        errs.append("Receivers are not a permutation of participants.")
    for i, rule in enumerate(rules):
        failed = [g for g, r in assignment.items() if not rule(g, r, assignment)]
        if failed:
            errs.append(f"Rule #{i + 1} rejects: {', '.join(failed)}")
    return errs


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from gift_exchange.engine import assign_gifts
    from gift_exchange.rules import rules_factory
    people = ["a", "b", "c", "d"]
    couples = [("a", "b")]
    draw = assign_gifts(people, couples)
    results["tests"].append(("Draw covers everyone", not check_assignment(draw, people)))
    results["tests"].append(("No self-draws", all(g != r for g, r in draw.items())))
    results["tests"].append(("Couples respected", not check_assignment(draw, people, rules_factory(couples, []))))
    return results
