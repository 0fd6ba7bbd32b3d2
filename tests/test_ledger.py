import pytest

from collective.schemas.resource import ResourceCategory, ResourceCreate
from collective.services import ledger


def test_new_resource_starts_fully_available():
    """A fresh resource has every unit available and no booked days"""
    resource = ledger.new_resource(
        ResourceCreate(
            name="Film camera prop",
            category=ResourceCategory.PROP,
            totalQuantity=3,
            itemCode="P-001",
        )
    )

    assert resource.totalQuantity == 3
    assert resource.availableQuantity == 3
    assert resource.bookedDates == set()
    assert len(resource.id) > 0
    # Item codes are only kept for costumes
    assert resource.itemCode is None


def test_new_costume_keeps_item_code():
    resource = ledger.new_resource(
        ResourceCreate(
            name="Sailor uniform",
            category=ResourceCategory.COSTUME,
            itemCode="C-002",
        ),
        resource_id="fixed-id",
    )

    assert resource.id == "fixed-id"
    assert resource.itemCode == "C-002"
    assert resource.totalQuantity == 1


def test_toggle_booking_adds_then_removes(sample_resource):
    booked = ledger.toggle_booking(sample_resource, "2024-03-10")
    assert booked.bookedDates == {"2024-03-10"}
    assert ledger.is_booked(booked, "2024-03-10")

    released = ledger.toggle_booking(booked, "2024-03-10")
    assert released.bookedDates == set()
    assert not ledger.is_booked(released, "2024-03-10")


@pytest.mark.parametrize(
    "initial,day",
    [
        (set(), "2024-03-10"),
        ({"2024-03-10"}, "2024-03-10"),
        ({"2024-03-10", "2024-03-11"}, "2024-12-31"),
        ({"2024-02-29"}, "2024-02-28"),
    ],
)
def test_toggle_booking_twice_is_identity(sample_resource, initial, day):
    resource = sample_resource.model_copy(update={"bookedDates": set(initial)})

    assert ledger.toggle_booking(ledger.toggle_booking(resource, day), day) == resource


def test_toggle_booking_does_not_mutate_input(sample_resource):
    ledger.toggle_booking(sample_resource, "2024-03-10")

    assert sample_resource.bookedDates == set()


def test_toggle_booking_leaves_quantities_alone(sample_resource):
    """Booked days never feed back into the available count"""
    resource = sample_resource
    for day in ["2024-03-01", "2024-03-02", "2024-03-03"]:
        resource = ledger.toggle_booking(resource, day)

    assert resource.availableQuantity == 2
    assert resource.totalQuantity == 2
    assert ledger.is_available(resource)


def test_unpadded_date_does_not_match(sample_resource):
    booked = ledger.toggle_booking(sample_resource, "2024-03-05")

    assert not ledger.is_booked(booked, "2024-3-5")


def test_set_quantity_updates_total(sample_resource):
    resource = ledger.set_quantity(sample_resource, 5)

    assert resource.totalQuantity == 5
    assert resource.availableQuantity == 2


def test_set_quantity_clamps_available_to_new_total(sample_resource):
    resource = ledger.set_quantity(sample_resource, 1)

    assert resource.totalQuantity == 1
    assert resource.availableQuantity == 1


@pytest.mark.parametrize("total", [0, -1, -20])
def test_set_quantity_refuses_totals_below_one(sample_resource, total):
    resource = ledger.set_quantity(sample_resource, total)

    assert resource is sample_resource
    assert resource.totalQuantity == 2


@pytest.mark.parametrize("total", [1, 2, 3, 10])
def test_set_quantity_never_exceeds_total(sample_resource, total):
    resource = ledger.set_quantity(sample_resource, total)

    assert 0 <= resource.availableQuantity <= resource.totalQuantity


@pytest.mark.parametrize(
    "available,expected",
    [(0, 0), (1, 1), (2, 2), (7, 2), (-3, 0)],
)
def test_set_available_is_clamped(sample_resource, available, expected):
    resource = ledger.set_available(sample_resource, available)

    assert resource.availableQuantity == expected


def test_availability_badge_follows_available_count(sample_resource):
    assert ledger.is_available(sample_resource)
    assert not ledger.is_available(ledger.set_available(sample_resource, 0))


def test_update_location_replaces_text(sample_resource):
    resource = ledger.update_location(sample_resource, "")

    assert resource.location == ""
    assert ledger.update_location(resource, "Studio shelf 3").location == "Studio shelf 3"


def test_remove_resource_is_idempotent(sample_resource):
    other = sample_resource.model_copy(update={"id": "r-2"})
    resources = [sample_resource, other]

    once = ledger.remove_resource(resources, "r-1")
    twice = ledger.remove_resource(once, "r-1")

    assert [r.id for r in once] == ["r-2"]
    assert twice == once


def test_replace_resource_keeps_order(sample_resource):
    other = sample_resource.model_copy(update={"id": "r-2"})
    updated = ledger.update_location(sample_resource, "Studio")

    resources = ledger.replace_resource([sample_resource, other], updated)

    assert [r.id for r in resources] == ["r-1", "r-2"]
    assert resources[0].location == "Studio"
