"""
Tests for core.ability.roles — Role classifier.
"""

import pytest

from core.ability.models import ActorSnapshot, ResourceClass, ResourceInstance
from core.ability.roles import (
    is_account_administrator_of,
    is_billing_administrator,
    is_facility_director_of,
    is_global_administrator,
    is_manager_of,
    is_operator_of,
)


FACILITY_A = ResourceInstance.facility(1)
FACILITY_B = ResourceInstance.facility(2)
ACCOUNT_A = ResourceInstance.account(10)
ACCOUNT_B = ResourceInstance.account(20)


def _actor(**kwargs) -> ActorSnapshot:
    return ActorSnapshot(actor_id="user-1", **kwargs)


class TestGlobalFlags:
    def test_flags_default_false(self):
        actor = _actor()
        assert not is_global_administrator(actor)
        assert not is_billing_administrator(actor)

    def test_flags_set(self):
        actor = _actor(is_global_administrator=True, is_billing_administrator=True)
        assert is_global_administrator(actor)
        assert is_billing_administrator(actor)

    def test_missing_actor_is_false(self):
        assert not is_global_administrator(None)
        assert not is_billing_administrator(None)


class TestFacilityRoles:
    def test_operator_membership(self):
        actor = _actor(operator_facility_ids={1})
        assert is_operator_of(actor, FACILITY_A)
        assert not is_operator_of(actor, FACILITY_B)

    def test_director_membership(self):
        actor = _actor(director_facility_ids={2})
        assert is_facility_director_of(actor, FACILITY_B)
        assert not is_facility_director_of(actor, FACILITY_A)

    def test_manager_membership(self):
        actor = _actor(manager_facility_ids={1})
        assert is_manager_of(actor, FACILITY_A)
        assert not is_manager_of(actor, FACILITY_B)

    def test_roles_do_not_imply_each_other(self):
        actor = _actor(manager_facility_ids={1})
        assert not is_operator_of(actor, FACILITY_A)
        assert not is_facility_director_of(actor, FACILITY_A)

    def test_non_facility_resource_is_false(self):
        actor = _actor(operator_facility_ids={10})
        assert not is_operator_of(actor, ACCOUNT_A)
        assert not is_operator_of(actor, ResourceClass("Facility"))

    def test_missing_inputs_are_false(self):
        actor = _actor(operator_facility_ids={1})
        assert not is_operator_of(actor, None)
        assert not is_operator_of(None, FACILITY_A)
        assert not is_manager_of(None, None)


class TestAccountAdministrator:
    def test_membership(self):
        actor = _actor(account_administrator_account_ids={10})
        assert is_account_administrator_of(actor, ACCOUNT_A)
        assert not is_account_administrator_of(actor, ACCOUNT_B)

    def test_facility_is_not_account(self):
        actor = _actor(account_administrator_account_ids={1})
        assert not is_account_administrator_of(actor, FACILITY_A)


class TestActorSnapshot:
    def test_none_memberships_are_empty(self):
        actor = ActorSnapshot(
            actor_id="user-1",
            operator_facility_ids=None,
            director_facility_ids=None,
            manager_facility_ids=None,
            account_administrator_account_ids=None,
        )
        assert actor.operator_facility_ids == frozenset()
        assert actor.manageable_facility_ids == frozenset()
        assert not is_operator_of(actor, FACILITY_A)

    def test_memberships_are_frozen(self):
        actor = _actor(operator_facility_ids=[1, 1, 2])
        assert actor.operator_facility_ids == frozenset({1, 2})
        assert isinstance(actor.operator_facility_ids, frozenset)

    def test_manageable_is_union(self):
        actor = _actor(
            operator_facility_ids={1},
            director_facility_ids={2},
            manager_facility_ids={3},
        )
        assert actor.manageable_facility_ids == frozenset({1, 2, 3})

    def test_empty_actor_id_rejected(self):
        with pytest.raises(ValueError, match="actor_id"):
            ActorSnapshot(actor_id="")

    def test_manageable_can_be_supplied(self):
        actor = _actor(
            is_billing_administrator=True,
            operator_facility_ids={1},
            manageable_facility_ids=[4, 5],
        )
        assert actor.manageable_facility_ids == frozenset({4, 5})
        assert not is_operator_of(actor, ResourceInstance.facility(4))
