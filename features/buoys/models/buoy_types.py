from features.common.models.station_types import StationRecord

class BuoyRecord(StationRecord):
    """NDBC buoy station reference."""
