"""Unit tests for the facility store."""
import threading

import pytest

from reststop.errors import FacilityNotFound, ValidationError
from reststop.models.facility import BusinessCategory, Facility, PartnerTier
from reststop.services.store import FacilityStore, load_fuel_station_dataset


def test_builtin_dataset_is_converted_deterministically():
    first = load_fuel_station_dataset()
    second = load_fuel_station_dataset()

    assert first == second
    assert [f.id for f in first] == [f"fuel-{i}" for i in range(1, 12)]

    vadavalli = first[0]
    assert vadavalli.name == "Fuel Station Vadavalli #1542"
    assert vadavalli.cleanliness.score == 88
    assert vadavalli.location.lat == 11.0272 and vadavalli.location.lng == 76.8991
    assert vadavalli.amenities == ("toilet", "sink", "hand_soap", "paper_towels")
    assert vadavalli.business_info.category is BusinessCategory.GAS_STATION
    assert vadavalli.business_info.partner_tier is PartnerTier.PREMIUM
    assert vadavalli.description == "Petrol Bunk restroom in Vadavalli"

    saibaba = first[2]
    assert saibaba.cleanliness.score == 44
    assert saibaba.amenities == ("toilet", "sink")
    assert saibaba.business_info.partner_tier is PartnerTier.STANDARD


def test_load_builtin_is_idempotent():
    store = FacilityStore()

    assert store.load_builtin() == 11
    assert store.load_builtin() == 11
    assert len(store) == 11
    assert store.builtin_loaded


def test_add_assigns_unique_ids_and_grows_by_one(make_facility, dataset_store):
    ids = set()
    for i in range(20):
        before = len(dataset_store)
        stored = dataset_store.add(make_facility(f"New {i}"))
        assert len(dataset_store) == before + 1
        assert stored.id is not None
        ids.add(stored.id)

    assert len(ids) == 20
    assert len(dataset_store.user_submitted()) == 20


def test_add_keeps_caller_id_and_rejects_duplicates(make_facility, dataset_store):
    stored = dataset_store.add(make_facility("Mine", facility_id="my-restroom"))
    assert stored.id == "my-restroom"

    size = len(dataset_store)
    with pytest.raises(ValidationError):
        dataset_store.add(make_facility("Clash", facility_id="my-restroom"))
    with pytest.raises(ValidationError):
        dataset_store.add(make_facility("Clash builtin", facility_id="fuel-1"))
    assert len(dataset_store) == size


@pytest.mark.parametrize(
    "overrides",
    [
        {"lat": 90.5},
        {"lat": -91},
        {"lng": 180.1},
        {"lng": -200},
        {"score": 101},
        {"score": -0.5},
        {"lat": float("nan")},
    ],
)
def test_add_rejects_out_of_range_data(make_facility, dataset_store, overrides):
    size = len(dataset_store)
    before = dataset_store.snapshot()

    with pytest.raises(ValidationError):
        dataset_store.add(make_facility("Broken", **overrides))

    assert len(dataset_store) == size
    assert dataset_store.snapshot() == before


def test_boundary_values_are_accepted(make_facility, dataset_store):
    dataset_store.add(make_facility("Pole", lat=90, lng=-180, score=0))
    dataset_store.add(make_facility("Antimeridian", lat=-90, lng=180, score=100))


def test_snapshot_is_not_affected_by_later_adds(make_facility, dataset_store):
    snapshot = dataset_store.snapshot()

    dataset_store.add(make_facility("Later"))

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 11
    assert len(dataset_store.snapshot()) == 12


def test_find_by_area_substring_matches_name_and_address(make_store, make_facility):
    by_name = make_facility("Vadavalli Bus Stand", address="Main Road")
    by_address = make_facility("Corner Cafe", address="12 Market St, VADAVALLI")
    by_description = make_facility("Other", address="Gandhipuram", description="near vadavalli")
    store = make_store(by_name, by_address, by_description)

    found = store.find_by_area_substring("Vadavalli")

    assert [f.name for f in found] == ["Vadavalli Bus Stand", "Corner Cafe"]


def test_search_also_matches_description_and_city(make_store, make_facility):
    described = make_facility("One", address="x", description="Mall restroom near Vadavalli")
    in_city = make_facility("Two", address="y", city="Vadavalli Town")
    store = make_store(described, in_city, make_facility("Three", address="z", city="Salem"))

    assert [f.name for f in store.search("vadavalli")] == ["One", "Two"]


def test_blank_search_text_matches_everything(dataset_store):
    assert dataset_store.find_by_area_substring("   ") == dataset_store.snapshot()
    assert dataset_store.search("") == dataset_store.snapshot()
    assert dataset_store.search(None) == dataset_store.snapshot()


def test_get_returns_facility_or_raises(dataset_store):
    assert dataset_store.get("fuel-5").name == "Fuel Station Ganapathy #1546"
    with pytest.raises(FacilityNotFound):
        dataset_store.get("missing")


def test_builtin_without_ids_gets_generated_ids(make_store, make_facility):
    store = make_store(make_facility("A"), make_facility("B"))

    assert [f.id for f in store.snapshot()] == ["builtin-1", "builtin-2"]


@pytest.mark.parametrize("blank_id", ["", "   "])
def test_blank_id_is_treated_as_missing(make_facility, dataset_store, blank_id):
    stored = dataset_store.add(make_facility("Blank id", facility_id=blank_id))

    assert stored.id.startswith("user-")
    assert dataset_store.get(stored.id) == stored


def test_snapshot_entries_cannot_alter_stored_facilities(dataset_store):
    entry = dataset_store.snapshot()[0]

    with pytest.raises(AttributeError):
        entry.amenities.append("jacuzzi")
    with pytest.raises(AttributeError):
        entry.reviews.append(entry.reviews[0])

    stored = dataset_store.get("fuel-1")
    assert stored.amenities == ("toilet", "sink", "hand_soap", "paper_towels")
    assert len(stored.reviews) == 1


def test_added_facility_does_not_share_caller_lists(make_facility, dataset_store):
    amenities = ["toilet"]
    payload = make_facility("Mine", facility_id="mine").model_dump()
    payload["amenities"] = amenities
    dataset_store.add(Facility(**payload))

    amenities.append("injected")

    assert dataset_store.get("mine").amenities == ("toilet",)


def test_concurrent_adds_are_serialized(make_facility):
    store = FacilityStore(builtin_loader=lambda: [])
    store.load_builtin()
    errors = []

    def worker(worker_id):
        try:
            for i in range(25):
                store.add(make_facility(f"w{worker_id}-{i}"))
        except Exception as exc:  # pragma: no cover - surfaced by the assertion below
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(store) == 200
    assert len({f.id for f in store.snapshot()}) == 200
