from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API configuration
    api_version: str = "1.0"

    # District the built-in dataset and chat replies refer to
    district_name: str = "Coimbatore"
    default_latitude: float = 11.0168
    default_longitude: float = 76.9558

    # Search radii in kilometers
    default_radius_km: float = 2.0
    nearby_radius_km: float = 2.0
    amenity_radius_km: float = 3.0

    # Cleanliness thresholds used by the chat assistant
    clean_score_threshold: int = 85
    fuel_clean_score_threshold: int = 80

    # Routing collaborator (OSRM)
    osrm_base_url: str = "https://router.project-osrm.org"
    routing_profile: str = "driving"
    routing_timeout_s: float = 10.0

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
