"""Owned, in-memory facility collection: built-in dataset plus user submissions."""
from __future__ import annotations

import logging
import math
import threading
import uuid
from typing import Callable, Iterable, Optional, Set, Tuple

from reststop.errors import FacilityNotFound, ValidationError
from reststop.models.facility import Facility

from .dataset import load_fuel_station_dataset

logger = logging.getLogger(__name__)

FacilityLoader = Callable[[], Iterable[Facility]]


def _is_blank_id(facility_id: Optional[str]) -> bool:
    return facility_id is None or not facility_id.strip()


def validate_facility(facility: Facility) -> None:
    """Raise ValidationError if coordinates, score or report count are out of range."""
    lat = facility.location.lat
    lng = facility.location.lng
    if not (math.isfinite(lat) and -90.0 <= lat <= 90.0):
        raise ValidationError(f"Latitude {lat} is outside [-90, 90]")
    if not (math.isfinite(lng) and -180.0 <= lng <= 180.0):
        raise ValidationError(f"Longitude {lng} is outside [-180, 180]")

    score = facility.cleanliness.score
    if not (math.isfinite(score) and 0.0 <= score <= 100.0):
        raise ValidationError(f"Cleanliness score {score} is outside [0, 100]")
    if facility.cleanliness.reports < 0:
        raise ValidationError("Cleanliness report count must not be negative")


class FacilityStore:
    """
    Holds the canonical facility collection.

    Readers never take the lock: every write builds a new tuple and publishes
    it with a single attribute assignment, so a reader sees either the state
    before or after an ``add``. Writers are serialized by ``_write_lock``.
    """

    def __init__(self, builtin_loader: Optional[FacilityLoader] = None) -> None:
        self._builtin_loader = builtin_loader or load_fuel_station_dataset
        self._write_lock = threading.Lock()
        self._builtin: Tuple[Facility, ...] = ()
        self._user: Tuple[Facility, ...] = ()
        self._all: Tuple[Facility, ...] = ()
        self._ids: Set[str] = set()
        self._builtin_loaded = False

    @property
    def builtin_loaded(self) -> bool:
        return self._builtin_loaded

    def load_builtin(self) -> int:
        """Load the built-in set once; later calls are no-ops. Returns its size."""
        with self._write_lock:
            if self._builtin_loaded:
                return len(self._builtin)

            builtin = []
            ids = set(self._ids)
            for index, facility in enumerate(self._builtin_loader(), start=1):
                validate_facility(facility)
                if _is_blank_id(facility.id):
                    facility = facility.model_copy(update={"id": f"builtin-{index}"})
                if facility.id in ids:
                    raise ValidationError(f"Duplicate facility id '{facility.id}' in built-in set")
                ids.add(facility.id)
                builtin.append(facility)

            self._builtin = tuple(builtin)
            self._ids = ids
            self._publish()
            self._builtin_loaded = True

        logger.info("Loaded %d built-in facilities", len(self._builtin))
        return len(self._builtin)

    def add(self, facility: Facility) -> Facility:
        """Validate and append a user-submitted facility, assigning an id if absent."""
        validate_facility(facility)

        with self._write_lock:
            if _is_blank_id(facility.id):
                facility = facility.model_copy(update={"id": self._generate_id()})
            elif facility.id in self._ids:
                raise ValidationError(f"Facility id '{facility.id}' already exists")

            self._user = self._user + (facility,)
            self._ids.add(facility.id)
            self._publish()

        logger.info("Added facility %s (%s)", facility.id, facility.name)
        return facility

    def snapshot(self) -> Tuple[Facility, ...]:
        """Immutable view of built-in and user-submitted facilities."""
        return self._all

    def user_submitted(self) -> Tuple[Facility, ...]:
        return self._user

    def get(self, facility_id: str) -> Facility:
        for facility in self._all:
            if facility.id == facility_id:
                return facility
        raise FacilityNotFound(f"No facility with id '{facility_id}'")

    def find_by_area_substring(self, text: Optional[str]) -> Tuple[Facility, ...]:
        """Case-insensitive substring match against name and address. Blank text matches all."""
        needle = self._normalize_needle(text)
        if not needle:
            return self._all
        return tuple(
            facility
            for facility in self._all
            if needle in facility.name.lower()
            or needle in facility.location.address.lower()
        )

    def search(self, text: Optional[str]) -> Tuple[Facility, ...]:
        """Case-insensitive match against name, description, address and city. Blank text matches all."""
        needle = self._normalize_needle(text)
        if not needle:
            return self._all
        return tuple(
            facility
            for facility in self._all
            if needle in facility.name.lower()
            or needle in facility.description.lower()
            or needle in facility.location.address.lower()
            or needle in facility.location.city.lower()
        )

    def __len__(self) -> int:
        return len(self._all)

    def _publish(self) -> None:
        self._all = self._builtin + self._user

    def _generate_id(self) -> str:
        while True:
            candidate = f"user-{uuid.uuid4().hex[:12]}"
            if candidate not in self._ids:
                return candidate

    @staticmethod
    def _normalize_needle(text: Optional[str]) -> str:
        return (text or "").strip().lower()
