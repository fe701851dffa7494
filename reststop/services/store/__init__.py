# Facility store package
from .dataset import load_fuel_station_dataset
from .facility_store import FacilityStore, validate_facility

__all__ = ["FacilityStore", "load_fuel_station_dataset", "validate_facility"]
