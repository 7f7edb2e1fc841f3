# office_terms\core\domain\terms\position_labeler.py
"""
terms/position_labeler.py
=========================

Derive a readable position label for a block that has no explicit title.

Office templates encode the same real-world role under many field-name
conventions (`constituency_mp`, `state_house`, `jr/sr`, ...). The rules
below are evaluated top to bottom and the first one that applies wins;
labels are never combined.

    ambassador_from                 → "ambassador to <country>"
    constituency_mp + parliament    → "<parliament> MP"
    constituency_mp                 → "Member of Parliament"
    assembly                        → "Member of the <assembly> Assembly"
    state_delegate                  → "Member of the <state> House of Delegates"
    jr/sr                           → "Senator"
    parliament                      → "<parliament> MP"
    state_house                     → "<state> State Representative"
    state_legislature               → "<state> State Legislator"
    state_senate                    → "<state> State Senator"
    state_assembly                  → "<state> State Assembly Member"
    state + constituency|district   → "Member of the U.S. House of Representatives"
    otherwise                       → raw text of the first label source field
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ..text import tidy
from .field_frame import LABEL_SOURCE_FIELDS, FieldFrame

__all__ = ["PositionRule", "POSITION_RULES", "PositionLabeler"]


@dataclass(frozen=True)
class PositionRule:
    """A named predicate plus the label it renders for a matching frame."""

    name: str
    applies: Callable[[FieldFrame], bool]
    render: Callable[[FieldFrame], str]


def _has(*names: str) -> Callable[[FieldFrame], bool]:
    return lambda frame: all(frame.has(name) for name in names)


def _has_any_with(required: str, *alternatives: str) -> Callable[[FieldFrame], bool]:
    return lambda frame: frame.has(required) and any(frame.has(a) for a in alternatives)


def _raw_label(frame: FieldFrame) -> str:
    for name in LABEL_SOURCE_FIELDS:
        if frame.has(name):
            return frame.text(name)
    return ""


POSITION_RULES: Tuple[PositionRule, ...] = (
    PositionRule(
        "ambassador",
        _has("ambassador_from"),
        lambda f: f"ambassador to {f.text('country') or '?'}",
    ),
    PositionRule(
        "constituency_mp_with_parliament",
        _has("constituency_mp", "parliament"),
        lambda f: f"{f.text('parliament')} MP",
    ),
    PositionRule(
        "constituency_mp",
        _has("constituency_mp"),
        lambda f: "Member of Parliament",
    ),
    PositionRule(
        "assembly",
        _has("assembly"),
        lambda f: f"Member of the {f.text('assembly')} Assembly",
    ),
    PositionRule(
        "state_delegate",
        _has("state_delegate"),
        lambda f: f"Member of the {f.text('state_delegate')} House of Delegates",
    ),
    PositionRule(
        "senator",
        _has("jr/sr"),
        lambda f: "Senator",
    ),
    PositionRule(
        "parliament",
        _has("parliament"),
        lambda f: f"{f.text('parliament')} MP",
    ),
    PositionRule(
        "state_house",
        _has("state_house"),
        lambda f: f"{f.text('state_house')} State Representative",
    ),
    PositionRule(
        "state_legislature",
        _has("state_legislature"),
        lambda f: f"{f.text('state_legislature')} State Legislator",
    ),
    PositionRule(
        "state_senate",
        _has("state_senate"),
        lambda f: f"{f.text('state_senate')} State Senator",
    ),
    PositionRule(
        "state_assembly",
        _has("state_assembly"),
        lambda f: f"{f.text('state_assembly')} State Assembly Member",
    ),
    PositionRule(
        "us_representative",
        _has_any_with("state", "constituency", "district"),
        lambda f: "Member of the U.S. House of Representatives",
    ),
    PositionRule(
        "raw_title",
        lambda f: any(f.has(name) for name in LABEL_SOURCE_FIELDS),
        _raw_label,
    ),
)


class PositionLabeler:
    """
    Single dispatcher over an ordered rule table.

    Usage:
        labeler = PositionLabeler()
        labeler.label(frame)   # "Member of Parliament"
    """

    def __init__(self, rules: Sequence[PositionRule] = POSITION_RULES):
        self.rules = tuple(rules)

    def match(self, frame: FieldFrame) -> Optional[PositionRule]:
        """The first rule that applies to `frame`, if any."""
        for rule in self.rules:
            if rule.applies(frame):
                return rule
        return None

    def label(self, frame: FieldFrame) -> str:
        """Tidied label for `frame`; "" when no rule applies."""
        rule = self.match(frame)
        if rule is None:
            return ""
        return tidy(rule.render(frame))
