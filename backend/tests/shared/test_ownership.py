"""Tests for shared/ownership.py."""

from unittest.mock import MagicMock

from shared.ownership import OwnershipChecker


RESOURCES = {
    "cert-1": {"id": "cert-1", "account_id": "account-a"},
    "cert-2": {"id": "cert-2", "account_id": "account-b"},
}
ACCOUNTS = {
    "user-1": ["account-a", "account-c"],
    "user-2": ["account-b"],
}


def make_checker(load=None) -> OwnershipChecker[dict]:
    return OwnershipChecker(
        load=load or RESOURCES.get,
        owner_of=lambda resource: resource["account_id"],
        owner_keys_for=lambda user_id: ACCOUNTS.get(user_id, []),
    )


class TestOwnershipChecker:
    def test_owner_can_modify(self):
        assert make_checker().can_modify("user-1", "cert-1") is True

    def test_other_user_cannot_modify(self):
        assert make_checker().can_modify("user-2", "cert-1") is False

    def test_missing_resource_fails_closed(self):
        assert make_checker().can_modify("user-1", "cert-missing") is False

    def test_user_without_accounts_owns_nothing(self):
        assert make_checker().can_modify("user-3", "cert-1") is False

    def test_owns_loaded_resource(self):
        checker = make_checker()
        assert checker.owns("user-2", RESOURCES["cert-2"]) is True
        assert checker.owns("user-1", RESOURCES["cert-2"]) is False

    def test_holds_owner_key_without_loading(self):
        load = MagicMock(side_effect=RESOURCES.get)
        checker = make_checker(load=load)

        assert checker.holds("user-1", "account-c") is True
        assert checker.holds("user-2", "account-a") is False
        load.assert_not_called()

    def test_reloads_on_every_call(self):
        load = MagicMock(side_effect=RESOURCES.get)
        checker = make_checker(load=load)

        checker.can_modify("user-1", "cert-1")
        checker.can_modify("user-1", "cert-1")

        assert load.call_count == 2

    def test_self_owned_resources(self):
        checker = OwnershipChecker(
            load=lambda user_id: {"id": user_id},
            owner_of=lambda profile: profile["id"],
            owner_keys_for=lambda user_id: [user_id],
        )
        assert checker.can_modify("user-1", "user-1") is True
        assert checker.can_modify("user-1", "user-2") is False
        assert checker.holds("user-1", "user-1") is True
        assert checker.holds("user-1", "user-2") is False
