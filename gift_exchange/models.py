# gift_exchange/models.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, field_validator

from .constants import MAX_ASSIGNMENT_ATTEMPTS, MAX_TOTAL_RESTARTS, RULE_TYPES


class ExchangeConfig(BaseModel):
    max_assignment_attempts: int = MAX_ASSIGNMENT_ATTEMPTS
    max_total_restarts: int = MAX_TOTAL_RESTARTS
    random_seed: Optional[int] = None

    @field_validator("max_assignment_attempts", "max_total_restarts")
    @classmethod
    def _positive(cls, v):
        if v < 1:
            raise ValueError("limits must be >= 1")
        return v


class RuleSpec(BaseModel):
    type: str
    giver: Optional[str] = None
    givers: List[str] = Field(default_factory=list)
    receiver: Optional[str] = None
    receivers: List[str] = Field(default_factory=list)

    @field_validator("type")
    @classmethod
    def _known_type(cls, v):
        if v not in RULE_TYPES:
            raise ValueError(f"unknown rule type {v!r}; expected one of {RULE_TYPES}")
        return v


class ExchangeSpec(BaseModel):
    participants: List[str]
    significant_others: List[Tuple[str, str]] = Field(default_factory=list)
    rules: List[RuleSpec] = Field(default_factory=list)

    @field_validator("participants")
    @classmethod
    def _unique(cls, v):
        if not v:
            raise ValueError("participants must be a non-empty list")
        if len(set(v)) != len(v):
            raise ValueError("participants must be unique")
        return v


class DrawResult(BaseModel):
    assignment: Optional[Dict[str, str]] = None
    error: Optional[str] = None
    problems: List[str] = Field(default_factory=list)
