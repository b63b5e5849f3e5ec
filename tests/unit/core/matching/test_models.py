#!/usr/bin/env python3
"""
Unit tests for matching snapshots and shared scoring utilities.
"""

import unittest

from core.matching import ElementalProfile, MemberProfile, TaskDescriptor, TaskStatus
from core.matching.elements import GENERATES, OVERCOMES, ELEMENTS, parse_element
from core.matching.utils import clamp, round_score, skills_match, stable_rank


class TestElementalProfile(unittest.TestCase):

    def test_from_dict_tolerates_bad_data(self):
        profile = ElementalProfile.from_dict({
            "Fire": 120,
            "metal": -5,
            "wood": "abc",
            "water": None,
            "水": 40,
            "aether": 99,
        })
        self.assertEqual(profile.fire, 100.0)
        self.assertEqual(profile.metal, 0.0)
        self.assertEqual(profile.wood, 0.0)
        self.assertEqual(profile.water, 40.0)
        self.assertEqual(profile.earth, 0.0)

    def test_from_none(self):
        self.assertEqual(ElementalProfile.from_dict(None), ElementalProfile())

    def test_dominant(self):
        self.assertEqual(ElementalProfile(water=50, earth=70).dominant(), "earth")
        self.assertEqual(ElementalProfile(fire=50, earth=50).dominant(), "fire")
        self.assertIsNone(ElementalProfile().dominant())


class TestTaskDescriptor(unittest.TestCase):

    def test_legacy_element_becomes_one_hot(self):
        task = TaskDescriptor.from_legacy("t", element="Wood")
        self.assertEqual(task.requirement, ElementalProfile(wood=100))
        self.assertEqual(task.dominant_element, "wood")

    def test_vector_wins_over_element(self):
        task = TaskDescriptor.from_legacy("t", element="wood", requirement={"fire": 30, "earth": 60})
        self.assertEqual(task.dominant_element, "earth")

    def test_unknown_element_means_no_requirement(self):
        task = TaskDescriptor.from_legacy("t", element="plasma")
        self.assertIsNone(task.dominant_element)

    def test_eligibility(self):
        self.assertTrue(TaskDescriptor("t").is_eligible)
        self.assertTrue(TaskDescriptor("t", status="blocked").is_eligible)
        self.assertFalse(TaskDescriptor("t", status=TaskStatus.COMPLETED).is_eligible)
        self.assertFalse(TaskDescriptor("t", assigned_to="m").is_eligible)


class TestMemberProfile(unittest.TestCase):

    def test_negative_or_junk_workload(self):
        self.assertEqual(MemberProfile("m", active_task_count=-2).active_task_count, 0)
        self.assertEqual(MemberProfile("m", active_task_count="x").active_task_count, 0)
        self.assertEqual(MemberProfile("m", active_task_count=float("inf")).active_task_count, 0)

    def test_non_string_skills_dropped(self):
        self.assertEqual(MemberProfile("m", skills=["go", None, 3]).skills, ["go"])


class TestElements(unittest.TestCase):

    def test_cycles(self):
        for relation in (GENERATES, OVERCOMES):
            self.assertEqual(set(relation), set(ELEMENTS))
            self.assertEqual(set(relation.values()), set(ELEMENTS))
            # Walking five steps from any element returns to it
            current = "wood"
            seen = []
            for _ in range(5):
                seen.append(current)
                current = relation[current]
            self.assertEqual(current, "wood")
            self.assertEqual(len(set(seen)), 5)
        self.assertNotEqual(GENERATES, OVERCOMES)

    def test_parse_element(self):
        self.assertEqual(parse_element(" FIRE "), "fire")
        self.assertEqual(parse_element("金"), "metal")
        self.assertIsNone(parse_element("plasma"))
        self.assertIsNone(parse_element(None))


class TestUtils(unittest.TestCase):

    def test_round_half_up(self):
        self.assertEqual(round_score(84.5), 85)
        self.assertEqual(round_score(2.5), 3)
        self.assertEqual(round_score(0.49), 0)

    def test_clamp(self):
        self.assertEqual(clamp(-3), 0)
        self.assertEqual(clamp(130), 100)
        self.assertEqual(clamp(42.5), 42.5)

    def test_skills_match(self):
        self.assertTrue(skills_match("Python", "python"))
        self.assertTrue(skills_match("ML", "html"))
        self.assertFalse(skills_match("ML", "html", mode="exact"))
        self.assertFalse(skills_match("", "python"))

    def test_stable_rank(self):
        items = [("a", 1), ("b", 3), ("c", 1), ("d", 3)]
        ranked = stable_rank(items, key=lambda item: item[1])
        self.assertEqual([name for name, _ in ranked], ["b", "d", "a", "c"])


if __name__ == '__main__':
    unittest.main(verbosity=2)
