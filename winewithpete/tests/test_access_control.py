import unittest
from winewithpete.domain.Member import Member, SubscriptionTier
from winewithpete.domain.Package import Package
from winewithpete.logic.access.control import (
    NO_ACCESS, can_access_content, can_access_package, get_access_level,
    get_available_serving_sizes, is_premium_content, required_tier_for
)


def _member(tier):
    return Member.from_dict({"user_id": f"u-{tier}", "email": f"{tier}@example.com", "subscription_tier": tier})


class TestAccessLevel(unittest.TestCase):

    def test_no_member(self):
        self.assertEqual(get_access_level(None), NO_ACCESS)
        self.assertEqual(NO_ACCESS.max_serving_size, 0)

    def test_tiers(self):
        free = get_access_level(_member("free"))
        self.assertEqual(tuple(free), (True, 4, False, False))
        self.assertEqual(tuple(get_access_level(_member("premium"))), (True, 8, True, True))
        self.assertEqual(tuple(get_access_level(_member("founder"))), (True, 12, True, True))

    def test_unknown_tier_fails_closed(self):
        legacy = _member("gold")
        self.assertIsNone(legacy.subscription_tier)
        self.assertEqual(get_access_level(legacy), NO_ACCESS)

    def test_unknown_tier_warns_once_per_check(self):
        legacy = _member("gold")
        package = Package(slug="i", difficulty_level="intermediate", serving_sizes=[4, 8], free_serving_sizes=[4])
        for check in (can_access_package, get_available_serving_sizes):
            with self.assertLogs("winewithpete.logic.access.control", level="WARNING") as logs:
                check(package, legacy)
            self.assertEqual(len(logs.output), 1)

    def test_string_tier_member(self):
        member = Member("u-str", subscription_tier="premium")
        self.assertIs(member.subscription_tier, SubscriptionTier.PREMIUM)
        self.assertEqual(tuple(get_access_level(member)), (True, 8, True, True))


class TestPackageAccess(unittest.TestCase):

    def setUp(self):
        self.beginner = Package(slug="b", difficulty_level="beginner", serving_sizes=[4, 8, 12], free_serving_sizes=[2, 4, 6])
        self.intermediate = Package(slug="i", difficulty_level="intermediate", serving_sizes=[4, 8, 12, 16], free_serving_sizes=[4])
        self.advanced = Package(slug="a", difficulty_level="advanced", serving_sizes=[8, 12], free_serving_sizes=[])

    def test_free_member_blocked_from_non_beginner(self):
        free = _member("free")
        self.assertTrue(can_access_package(self.beginner, free))
        self.assertFalse(can_access_package(self.intermediate, free))
        self.assertFalse(can_access_package(self.advanced, free))

    def test_paid_members_pass_difficulty_gate(self):
        for tier in ("premium", "founder"):
            member = _member(tier)
            self.assertTrue(can_access_package(self.intermediate, member))
            self.assertTrue(can_access_package(self.advanced, member))

    def test_anonymous_and_unknown_denied(self):
        self.assertFalse(can_access_package(self.beginner, None))
        self.assertFalse(can_access_package(self.beginner, _member("gold")))

    def test_serving_sizes_anonymous_is_empty(self):
        self.assertEqual(get_available_serving_sizes(self.beginner, None), [])

    def test_serving_sizes_free_uses_free_list(self):
        self.assertEqual(get_available_serving_sizes(self.beginner, _member("free")), [2, 4])

    def test_serving_sizes_paid(self):
        self.assertEqual(get_available_serving_sizes(self.intermediate, _member("premium")), [4, 8])
        self.assertEqual(get_available_serving_sizes(self.intermediate, _member("founder")), [4, 8, 12])

    def test_serving_sizes_keep_source_order(self):
        package = Package(serving_sizes=[12, 4, 8], free_serving_sizes=[4])
        self.assertEqual(get_available_serving_sizes(package, _member("founder")), [12, 4, 8])


class TestRequiredTier(unittest.TestCase):

    def test_required_tier_for(self):
        self.assertIs(required_tier_for("beginner"), SubscriptionTier.FREE)
        self.assertIs(required_tier_for("intermediate"), SubscriptionTier.PREMIUM)
        self.assertIs(required_tier_for("advanced"), SubscriptionTier.FOUNDER)
        self.assertIs(required_tier_for("expert"), SubscriptionTier.FOUNDER)
        self.assertIs(required_tier_for(None), SubscriptionTier.FOUNDER)

    def test_is_premium_content(self):
        self.assertFalse(is_premium_content(Package(difficulty_level="beginner")))
        self.assertTrue(is_premium_content(Package(difficulty_level="intermediate")))

    def test_can_access_content_hierarchy(self):
        advanced = Package(difficulty_level="advanced")
        intermediate = Package(difficulty_level="intermediate")
        self.assertFalse(can_access_content(intermediate, None))
        self.assertFalse(can_access_content(intermediate, _member("free")))
        self.assertTrue(can_access_content(intermediate, _member("premium")))
        self.assertFalse(can_access_content(advanced, _member("premium")))
        self.assertTrue(can_access_content(advanced, _member("founder")))
        self.assertFalse(can_access_content(Package(difficulty_level="beginner"), _member("gold")))


if __name__ == "__main__":
    unittest.main()
