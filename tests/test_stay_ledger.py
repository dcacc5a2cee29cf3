"""Unit tests for the stay ledger (entry, exit, billing, reporting)."""

import sys
import os
import threading
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime, timedelta
from parkledger.errors import (
    DuplicateActiveVehicle,
    InvalidIdentifier,
    NoSpaceAvailable,
    UnclassifiableVehicle,
    VehicleNotFound,
)
from parkledger.models.facility import Facility
from parkledger.models.vehicle import VehicleClass
from parkledger.services.stay_ledger import StayLedger


class FakeClock:
    def __init__(self, start=datetime(2026, 3, 1, 8, 0, 0)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


def make_ledger(capacity=10, car_spaces=None, start_id=1):
    clock = FakeClock()
    facility = Facility.with_layout("Test Facility", capacity, car_spaces)
    return StayLedger(facility, clock=clock, start_id=start_id), clock


def assert_counts_consistent(ledger):
    facility = ledger.facility
    assert facility.count_occupied() + facility.count_available() == facility.capacity


class TestRegisterEntry:
    def test_car_gets_lowest_free_car_space(self):
        ledger, clock = make_ledger()
        stay = ledger.register_entry("XYZ999")
        assert stay.space_number == 1
        assert stay.vehicle_class is VehicleClass.CAR
        assert stay.entry_time == clock.now
        assert stay.exit_time is None and stay.fare == 0.0

    def test_motorcycle_gets_first_motorcycle_space(self):
        ledger, _ = make_ledger()
        stay = ledger.register_entry("ABC12D")
        assert stay.space_number == 6
        assert stay.vehicle_class is VehicleClass.MOTORCYCLE

    def test_identifier_is_normalized(self):
        ledger, _ = make_ledger()
        stay = ledger.register_entry("  abc123 ")
        assert stay.identifier == "ABC123"
        assert ledger.find_active("abc123") is stay

    def test_space_marked_occupied(self):
        ledger, _ = make_ledger()
        stay = ledger.register_entry("ABC123")
        assert stay.space.occupied
        assert stay.space.vehicle is stay.vehicle
        assert ledger.facility.find_available(VehicleClass.CAR) is not stay.space

    @pytest.mark.parametrize("identifier", ["", "    ", "AB12", " ABC12 "])
    def test_invalid_identifier(self, identifier):
        ledger, _ = make_ledger()
        with pytest.raises(InvalidIdentifier):
            ledger.register_entry(identifier)
        assert ledger.active_stays() == []

    def test_unclassifiable_identifier(self):
        ledger, _ = make_ledger()
        with pytest.raises(UnclassifiableVehicle):
            ledger.register_entry("ABC12#")
        assert ledger.facility.count_occupied() == 0

    def test_duplicate_entry_rejected(self):
        ledger, _ = make_ledger()
        ledger.register_entry("ABC123")
        with pytest.raises(DuplicateActiveVehicle):
            ledger.register_entry(" abc123")
        assert len(ledger.active_stays()) == 1
        assert ledger.facility.count_occupied() == 1

    def test_no_car_space_leaves_state_unchanged(self):
        ledger, _ = make_ledger(capacity=4)   # spaces 1-2 CAR, 3-4 MOTORCYCLE
        ledger.register_entry("CAR001")
        ledger.register_entry("CAR002")
        before = [(s.number, s.occupied) for s in ledger.facility.spaces]

        with pytest.raises(NoSpaceAvailable):
            ledger.register_entry("CAR003")

        assert [(s.number, s.occupied) for s in ledger.facility.spaces] == before
        assert len(ledger.active_stays()) == 2

    def test_full_car_section_still_admits_motorcycle(self):
        ledger, _ = make_ledger(capacity=2)
        ledger.register_entry("CAR001")
        stay = ledger.register_entry("MOTO0A")
        assert stay.space_number == 2

    def test_ids_are_sequential_and_not_reused(self):
        ledger, _ = make_ledger(start_id=100)
        first = ledger.register_entry("ABC123")
        ledger.register_exit("ABC123")
        second = ledger.register_entry("ABC123")
        third = ledger.register_entry("DEF456")
        assert [first.id, second.id, third.id] == [100, 101, 102]

    def test_failed_entry_does_not_consume_id(self):
        ledger, _ = make_ledger()
        ledger.register_entry("ABC123")
        with pytest.raises(DuplicateActiveVehicle):
            ledger.register_entry("ABC123")
        assert ledger.register_entry("DEF456").id == 2


class TestRegisterExit:
    def test_immediate_exit_bills_one_car_hour(self):
        ledger, _ = make_ledger()
        ledger.register_entry("ABC123")
        stay = ledger.register_exit("ABC123")
        assert stay.hours == 1
        assert stay.fare == 3000.0
        assert stay.is_closed

    def test_started_hours_are_billed(self):
        ledger, clock = make_ledger()
        ledger.register_entry("ABC12D")
        clock.advance(hours=2, minutes=5)
        stay = ledger.register_exit("abc12d")
        assert stay.hours == 3
        assert stay.fare == 6000.0
        assert stay.exit_time == clock.now

    def test_exit_releases_space_for_next_vehicle(self):
        ledger, _ = make_ledger()
        first = ledger.register_entry("ABC123")
        ledger.register_exit("ABC123")
        assert not first.space.occupied
        assert first.space.vehicle is None
        assert ledger.register_entry("DEF456").space_number == first.space_number

    def test_stay_moves_to_completed(self):
        ledger, _ = make_ledger()
        ledger.register_entry("ABC123")
        stay = ledger.register_exit("ABC123")
        assert ledger.active_stays() == []
        assert ledger.completed_stays() == [stay]
        assert ledger.find_active("ABC123") is None

    def test_unknown_vehicle(self):
        ledger, _ = make_ledger()
        with pytest.raises(VehicleNotFound):
            ledger.register_exit("ABC123")

    def test_second_exit_not_found(self):
        ledger, _ = make_ledger()
        ledger.register_entry("ABC123")
        ledger.register_exit("ABC123")
        with pytest.raises(VehicleNotFound):
            ledger.register_exit("ABC123")
        assert len(ledger.completed_stays()) == 1

    def test_closed_stay_cannot_be_closed_again(self):
        ledger, clock = make_ledger()
        ledger.register_entry("ABC123")
        stay = ledger.register_exit("ABC123")
        with pytest.raises(RuntimeError):
            stay.close(clock.now, 5, 15000.0)
        assert stay.fare == 3000.0


class TestReporting:
    def test_occupancy_invariant_across_traffic(self):
        ledger, clock = make_ledger(capacity=6)
        assert_counts_consistent(ledger)
        for plate in ("CAR001", "CAR002", "MOTO1A", "CAR003"):
            ledger.register_entry(plate)
            assert_counts_consistent(ledger)
        clock.advance(minutes=90)
        ledger.register_exit("CAR002")
        assert_counts_consistent(ledger)
        ledger.register_entry("CAR004")
        with pytest.raises(NoSpaceAvailable):
            ledger.register_entry("CAR005")
        assert_counts_consistent(ledger)

    def test_summary_breakdown(self):
        ledger, _ = make_ledger()
        ledger.register_entry("CAR001")
        ledger.register_entry("CAR002")
        ledger.register_entry("MOTO1A")
        summary = ledger.occupancy_summary()
        assert (summary.capacity, summary.occupied, summary.available) == (10, 3, 7)
        assert summary.by_class[VehicleClass.CAR].occupied == 2
        assert summary.by_class[VehicleClass.CAR].available == 3
        assert summary.by_class[VehicleClass.MOTORCYCLE].occupied == 1
        assert summary.by_class[VehicleClass.MOTORCYCLE].available == 4

    def test_active_stays_in_registration_order_and_snapshot(self):
        ledger, _ = make_ledger()
        ledger.register_entry("CAR002")
        ledger.register_entry("MOTO1A")
        ledger.register_entry("CAR001")
        snapshot = ledger.active_stays()
        assert [s.identifier for s in snapshot] == ["CAR002", "MOTO1A", "CAR001"]
        snapshot.clear()
        assert len(ledger.active_stays()) == 3

    def test_occupancy_report(self):
        ledger, _ = make_ledger(capacity=8)
        ledger.register_entry("CAR001")
        ledger.register_entry("CAR002")
        ledger.register_exit("CAR001")
        report = ledger.occupancy_report()
        assert report.facility_name == "Test Facility"
        assert report.capacity == 8
        assert report.occupied == 1
        assert report.available == 7
        assert report.percent_occupied == pytest.approx(12.5)
        assert report.active_count == 1
        assert report.completed_count == 1

    def test_report_on_zero_capacity_facility(self):
        ledger = StayLedger(Facility("Empty", 0))
        assert ledger.occupancy_report().percent_occupied == 0.0

    def test_rates(self):
        ledger, _ = make_ledger()
        assert ledger.rates() == {VehicleClass.CAR: 3000.0, VehicleClass.MOTORCYCLE: 2000.0}


class TestConcurrentAccess:
    def _run_threads(self, target, plates):
        errors = []

        def worker(plate):
            try:
                target(plate)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(p,)) for p in plates]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        return errors

    def test_parallel_entries_get_distinct_spaces_and_ids(self):
        ledger, _ = make_ledger(capacity=200, car_spaces=200)
        plates = [f"CAR{n:03d}" for n in range(200)]

        assert self._run_threads(ledger.register_entry, plates) == []

        active = ledger.active_stays()
        assert len({s.space_number for s in active}) == 200
        assert sorted(s.id for s in active) == list(range(1, 201))
        assert ledger.facility.count_available() == 0
        assert_counts_consistent(ledger)

    def test_parallel_exits_release_every_space(self):
        ledger, _ = make_ledger(capacity=200, car_spaces=200)
        plates = [f"CAR{n:03d}" for n in range(200)]
        for plate in plates:
            ledger.register_entry(plate)

        assert self._run_threads(ledger.register_exit, plates) == []

        assert ledger.active_stays() == []
        assert len(ledger.completed_stays()) == 200
        assert ledger.facility.count_available() == 200
        assert_counts_consistent(ledger)

    def test_parallel_duplicate_entries_admit_one(self):
        ledger, _ = make_ledger()
        errors = self._run_threads(ledger.register_entry, ["ABC123"] * 20)

        assert len(ledger.active_stays()) == 1
        assert len(errors) == 19
        assert all(isinstance(e, DuplicateActiveVehicle) for e in errors)
        assert ledger.facility.count_occupied() == 1
