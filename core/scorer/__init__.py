#!/usr/bin/env python3
"""
Scoring Module - initial match scores and LLM refinement.

Public API:
- MatchScorer / RandomMatchScorer / SkillOverlapScorer: initial score strategies
- MatchScoreRefiner: validated, range-safe refinement through an LLMProvider
- ScoreRefinementService: persists refined scores on applications

- bounds.py: score range validation and clamping
- heuristics.py: initial score strategies
- refiner.py: prompt, output schema validation, retry and fallback
- service.py: store write-back
"""

from core.scorer.heuristics import MatchScorer, RandomMatchScorer, SkillOverlapScorer, build_scorer
from core.scorer.refiner import MatchScoreRefiner, RefinementResult
from core.scorer.service import ScoreRefinementService

__all__ = [
    'MatchScorer',
    'RandomMatchScorer',
    'SkillOverlapScorer',
    'build_scorer',
    'MatchScoreRefiner',
    'RefinementResult',
    'ScoreRefinementService',
]
