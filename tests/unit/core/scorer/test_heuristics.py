"""
Unit tests for initial match score heuristics.
"""
import random
import unittest

from core.config_loader import ScoringConfig
from core.scorer import RandomMatchScorer, SkillOverlapScorer, build_scorer
from tests.fixtures.jobs import make_job, make_profile


class TestRandomMatchScorer(unittest.TestCase):

    def test_scores_are_integers_in_placeholder_range(self):
        scorer = RandomMatchScorer(rng=random.Random(7))
        scores = [scorer.score(make_job()) for _ in range(200)]
        self.assertTrue(all(70 <= s <= 99 for s in scores))
        self.assertTrue(all(s == int(s) for s in scores))

    def test_seeded_scores_repeat(self):
        a = RandomMatchScorer(rng=random.Random(3))
        b = RandomMatchScorer(rng=random.Random(3))
        self.assertEqual([a.score(make_job()) for _ in range(5)], [b.score(make_job()) for _ in range(5)])

    def test_invalid_bounds(self):
        with self.assertRaises(ValueError):
            RandomMatchScorer(low=90, high=90)
        with self.assertRaises(ValueError):
            RandomMatchScorer(low=-1, high=50)


class TestSkillOverlapScorer(unittest.TestCase):

    def test_full_overlap(self):
        job = make_job(required_skills=["Python", "SQL"])
        profile = make_profile(skills=["sql", " python "])
        self.assertEqual(SkillOverlapScorer().score(job, profile), 100.0)

    def test_partial_overlap_rounded(self):
        job = make_job(required_skills=["Python", "SQL", "Go"])
        profile = make_profile(skills=["python"])
        self.assertEqual(SkillOverlapScorer().score(job, profile), 33.33)

    def test_neutral_without_profile_or_requirements(self):
        scorer = SkillOverlapScorer(neutral_score=60)
        self.assertEqual(scorer.score(make_job()), 60.0)
        self.assertEqual(scorer.score(make_job(required_skills=[]), make_profile()), 60.0)


class TestBuildScorer(unittest.TestCase):

    def test_default_is_random(self):
        self.assertIsInstance(build_scorer(ScoringConfig()), RandomMatchScorer)

    def test_skill_overlap_strategy(self):
        scorer = build_scorer(ScoringConfig(strategy="skill_overlap"))
        self.assertIsInstance(scorer, SkillOverlapScorer)

    def test_seed_makes_scores_repeatable(self):
        config = ScoringConfig(seed=11, random_min=10, random_max=20)
        first = build_scorer(config).score(make_job())
        second = build_scorer(config).score(make_job())
        self.assertEqual(first, second)
        self.assertTrue(10 <= first < 20)


if __name__ == "__main__":
    unittest.main()
