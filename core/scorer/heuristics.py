#!/usr/bin/env python3
"""
Initial match score heuristics.

The score attached to a new application is computed by a pluggable
MatchScorer so the state machine never depends on a particular model:

- RandomMatchScorer: bounded random integer, the product's placeholder
- SkillOverlapScorer: share of the job's required skills found on the profile
"""
import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from core.config_loader import ScoringConfig
from core.models import Job, CandidateProfile
from core.scorer.bounds import clamp_score

logger = logging.getLogger(__name__)


class MatchScorer(ABC):
    """Computes the initial match score for a (job, candidate) pair."""

    @abstractmethod
    def score(self, job: Job, profile: Optional[CandidateProfile] = None) -> float:
        pass


class RandomMatchScorer(MatchScorer):
    """Uniform integer in [low, high). Stand-in until a real model exists."""

    def __init__(self, low: int = 70, high: int = 100, rng: Optional[random.Random] = None):
        if not 0 <= low < high <= 101:
            raise ValueError(f"Invalid random score bounds [{low}, {high})")
        self.low = low
        self.high = high
        self.rng = rng or random.Random()

    def score(self, job: Job, profile: Optional[CandidateProfile] = None) -> float:
        return float(self.rng.randrange(self.low, self.high))


class SkillOverlapScorer(MatchScorer):
    """
    Percentage of required skills the candidate lists (case-insensitive).

    Jobs without required skills, or candidates without a profile, get
    ``neutral_score``.
    """

    def __init__(self, neutral_score: float = 50.0):
        self.neutral_score = clamp_score(neutral_score)

    def score(self, job: Job, profile: Optional[CandidateProfile] = None) -> float:
        required = {s.strip().lower() for s in job.required_skills if s.strip()}
        if not required or profile is None:
            return self.neutral_score

        have = {s.strip().lower() for s in profile.skills}
        matched = required & have
        return round(100.0 * len(matched) / len(required), 2)


def build_scorer(config: ScoringConfig) -> MatchScorer:
    if config.strategy == "skill_overlap":
        return SkillOverlapScorer()
    rng = random.Random(config.seed) if config.seed is not None else None
    return RandomMatchScorer(config.random_min, config.random_max, rng=rng)
