"""
Tests for core.ability.scope — Facility scope resolver.
"""

from core.ability.models import ActorSnapshot, ResourceInstance
from core.ability.scope import manageable_facility_ids, scope_to_facilities


def _order(order_id, facility_id):
    return ResourceInstance(resource_class="Order", id=order_id, facility_id=facility_id)


class TestManageableFacilityIds:
    def test_union(self):
        actor = ActorSnapshot(
            actor_id="user-1",
            operator_facility_ids={1, 2},
            manager_facility_ids={2, 4},
        )
        assert manageable_facility_ids(actor) == frozenset({1, 2, 4})

    def test_account_administration_does_not_count(self):
        actor = ActorSnapshot(actor_id="user-1", account_administrator_account_ids={1})
        assert manageable_facility_ids(actor) == frozenset()

    def test_global_flags_do_not_widen_scope(self):
        actor = ActorSnapshot(actor_id="user-1", is_global_administrator=True)
        assert manageable_facility_ids(actor) == frozenset()

    def test_missing_actor(self):
        assert manageable_facility_ids(None) == frozenset()


class TestScopeToFacilities:
    def test_filters_by_facility(self):
        records = [_order(1, 1), _order(2, 2), _order(3, 1)]
        scoped = list(scope_to_facilities(records, {1}))
        assert [record.id for record in scoped] == [1, 3]

    def test_empty_scope_yields_nothing(self):
        assert list(scope_to_facilities([_order(1, 1)], frozenset())) == []

    def test_records_without_facility_never_match(self):
        assert list(scope_to_facilities([_order(1, None)], {None, 1})) == []

    def test_supplied_facilities_are_used(self):
        actor = ActorSnapshot(
            actor_id="billing",
            is_billing_administrator=True,
            manageable_facility_ids={7},
        )
        records = [_order(1, 7), _order(2, 8)]
        assert manageable_facility_ids(actor) == frozenset({7})
        assert [r.id for r in scope_to_facilities(records, manageable_facility_ids(actor))] == [1]
