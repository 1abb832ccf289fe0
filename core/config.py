from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    """Application settings."""

    # NDBC station table (pipe-delimited text)
    ndbc_station_table_url: str = "https://www.ndbc.noaa.gov/data/stations/station_table.txt"
    buoy_user_agent: str = "SurfReportApp (joelcook.com, fetching buoy list)"
    buoy_output_filename: str = "all_noaa_buoys.json"

    # CO-OPS metadata API, restricted to stations with tide predictions
    coops_stations_url: str = "https://api.tidesandcurrents.noaa.gov/mdapi/prod/webapi/stations.json?type=tidepredictions"
    tide_user_agent: str = "SurfReportApp (joelcook.com, fetching tide list)"
    tide_output_filename: str = "all_noaa_tide_stations.json"

    # Output directory. None means the directory of the running script.
    output_dir: Optional[str] = None

    request_timeout: int = 300  # seconds, matches aiohttp's default total timeout
    json_indent: int = 2
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="buoylist_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
