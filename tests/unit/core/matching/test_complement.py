#!/usr/bin/env python3
"""
Unit tests for the Member-Member Complement Scorer.
"""

import unittest

from core.config_loader import ComplementConfig
from core.matching import ElementalProfile
from core.matching.complement import (
    generative_contributions,
    conflict_count,
    elemental_complement,
    skill_complement,
    complement_score,
    recommend_partners,
)
from tests import make_member


class TestElementalComplement(unittest.TestCase):
    """Generative compensation and destructive conflicts."""

    def setUp(self):
        self.config = ComplementConfig()

    def test_generative_contribution(self):
        """Strong wood feeding weak fire."""
        print("\n📊 UNIT Test: Wood feeds fire")

        a = ElementalProfile(wood=90)
        b = ElementalProfile(fire=10)

        contributions = generative_contributions(a, b, self.config)
        self.assertEqual(len(contributions), 1)
        source, target, points = contributions[0]
        self.assertEqual((source, target), ("wood", "fire"))
        self.assertAlmostEqual(points, 24.3)
        self.assertAlmostEqual(elemental_complement(a, b), 24.3)

        print(f"  ✓ Contribution: {points:.1f}")

    def test_relation_is_directional(self):
        """Fire does not generate wood, so strong fire does not help weak wood."""
        a = ElementalProfile(fire=90)
        b = ElementalProfile(earth=80, wood=5)
        self.assertEqual(generative_contributions(a, b, self.config), [])

    def test_thresholds_are_strict(self):
        self.assertEqual(generative_contributions(ElementalProfile(wood=60), ElementalProfile(), self.config), [])
        self.assertEqual(generative_contributions(ElementalProfile(wood=61), ElementalProfile(fire=60), self.config), [])
        self.assertEqual(len(generative_contributions(ElementalProfile(wood=61), ElementalProfile(fire=59), self.config)), 1)

    def test_conflict_penalty(self):
        """Dominant fire against dominant metal costs 10 points."""
        a = ElementalProfile(fire=80)
        b = ElementalProfile(metal=80)
        self.assertEqual(conflict_count(a, b, self.config), 1)
        # 24 (fire feeds earth) + 24 (metal feeds water) - 10
        self.assertAlmostEqual(elemental_complement(a, b), 38.0)

    def test_mutual_conflict_counted_once(self):
        """Two members both dominant in fire and metal pay a single penalty."""
        profile = ElementalProfile(fire=80, metal=80)
        self.assertEqual(conflict_count(profile, profile, self.config), 1)
        # 48 each way (fire feeds earth, metal feeds water) - 10
        self.assertAlmostEqual(elemental_complement(profile, profile), 86.0)

    def test_mirrored_conflict_is_symmetric(self):
        a = ElementalProfile(metal=90)
        b = ElementalProfile(fire=90)
        self.assertEqual(conflict_count(a, b, self.config), 1)
        self.assertEqual(conflict_count(b, a, self.config), 1)

    def test_clamped(self):
        strong = ElementalProfile(fire=100, metal=100, wood=100, water=100, earth=100)
        self.assertEqual(elemental_complement(strong, ElementalProfile()), 100.0)
        self.assertEqual(elemental_complement(ElementalProfile(fire=80), ElementalProfile(metal=80, earth=80)),
                         elemental_complement(ElementalProfile(metal=80, earth=80), ElementalProfile(fire=80)))
        self.assertEqual(elemental_complement(ElementalProfile(), ElementalProfile()), 0.0)


class TestSkillComplement(unittest.TestCase):

    def test_coverage(self):
        self.assertAlmostEqual(skill_complement(["Python", "Go"], ["python", "Rust"]), 75.0)

    def test_both_empty_is_neutral(self):
        self.assertEqual(skill_complement([], []), 50.0)

    def test_one_side_empty(self):
        self.assertEqual(skill_complement(["python"], []), 100.0)

    def test_excessive_overlap_penalty(self):
        skills = ["a", "b", "c", "d"]
        self.assertAlmostEqual(skill_complement(skills, skills), 40.0)
        self.assertAlmostEqual(skill_complement(skills[:3], skills[:3]), 50.0)


class TestComplementScore(unittest.TestCase):

    def test_total_and_reasons(self):
        a = make_member("a", elemental={"wood": 90}, name="Ada")
        b = make_member("b", elemental={"fire": 10}, name="Bo")

        result = complement_score(a, b)

        self.assertEqual(result.member_id, "b")
        self.assertAlmostEqual(result.elemental_score, 24.3)
        self.assertEqual(result.skill_score, 50.0)
        self.assertEqual(result.total_score, 32)  # 24.3 * 0.7 + 50 * 0.3
        self.assertEqual(len(result.reasons), 1)
        self.assertIn("Ada", result.reasons[0])
        self.assertIn("wood", result.reasons[0])

    def test_reasons_prefer_forward_then_backward(self):
        a = make_member("a", elemental={"wood": 90, "water": 5})
        b = make_member("b", elemental={"metal": 90, "fire": 5})

        result = complement_score(a, b)

        self.assertEqual(len(result.reasons), 2)
        self.assertTrue(result.reasons[0].startswith("a's strong wood"))
        self.assertTrue(result.reasons[1].startswith("b's strong metal"))

    def test_backward_reason_survives_cap(self):
        """A second A→B compensation does not push out the B→A one."""
        a = make_member("a", elemental={"wood": 90, "fire": 90, "water": 5})
        b = make_member("b", elemental={"metal": 90})

        result = complement_score(a, b)

        self.assertEqual(len(result.reasons), 2)
        self.assertTrue(result.reasons[0].startswith("a's strong wood"))
        self.assertTrue(result.reasons[1].startswith("b's strong metal"))

    def test_penalty_has_no_reason(self):
        a = make_member("a", elemental={"fire": 80, "earth": 90})
        b = make_member("b", elemental={"metal": 80, "earth": 90})
        result = complement_score(a, b)
        for reason in result.reasons:
            self.assertNotIn("conflict", reason.lower())

    def test_reasons_capped(self):
        a = make_member("a", elemental={"wood": 90, "fire": 90, "earth": 90})
        b = make_member("b")
        self.assertEqual(len(complement_score(a, b).reasons), 2)

    def test_symmetry(self):
        profiles = [
            make_member("p1", skills=["Python", "Go"], elemental={"wood": 90, "fire": 10}),
            make_member("p2", skills=["python", "rust", "go", "sql", "k8s"], elemental={"fire": 80, "metal": 75}),
            make_member("p3", skills=[], elemental={"metal": 85, "wood": 72, "water": 30}),
            make_member("p4", skills=["design"], elemental={"earth": 95, "water": 71}),
            make_member("p5"),
        ]
        for a in profiles:
            for b in profiles:
                forward = complement_score(a, b)
                backward = complement_score(b, a)
                self.assertEqual(forward.total_score, backward.total_score)
                self.assertEqual(forward.elemental_score, backward.elemental_score)
                self.assertEqual(forward.skill_score, backward.skill_score)
                self.assertTrue(0 <= forward.total_score <= 100)


class TestRecommendPartners(unittest.TestCase):

    def test_ranking_excludes_focal_and_limits(self):
        focal = make_member("me", elemental={"wood": 90})
        pool = [
            focal,
            make_member("strong-fire", elemental={"fire": 95}),
            make_member("weak-fire", elemental={"fire": 0}),
            make_member("neutral", elemental={"fire": 50}),
            make_member("weak-fire-2", elemental={"fire": 0}),
        ]

        results = recommend_partners(focal, pool)

        self.assertEqual(len(results), 3)
        self.assertNotIn("me", [r.member_id for r in results])
        # strong-fire feeds the focal member's missing earth (35); both weak-fire
        # members tie at 34 and keep pool order; neutral (24) is cut
        self.assertEqual([r.member_id for r in results], ["strong-fire", "weak-fire", "weak-fire-2"])
        self.assertEqual([r.total_score for r in results], [35, 34, 34])

    def test_top_n_and_empty_pool(self):
        focal = make_member("me")
        self.assertEqual(recommend_partners(focal, []), [])
        pool = [make_member(f"m{i}") for i in range(6)]
        self.assertEqual(len(recommend_partners(focal, pool, top_n=5)), 5)


if __name__ == '__main__':
    unittest.main(verbosity=2)
