"""
Built-in fuel station restroom dataset for Coimbatore district.
Ratings are on a 5-point scale; the store converts them to 0-100 scores.
"""

from datetime import datetime, timezone
from typing import Dict, List

# Date the dataset was surveyed; used as the cleanliness timestamp.
DATASET_UPDATED_AT = datetime(2025, 4, 1, tzinfo=timezone.utc)

FUEL_STATION_DATASET: List[Dict] = [
    {
        "name": "Fuel Station Vadavalli #1542",
        "location": "Vadavalli, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 4.4,
        "accessibility": True,
        "baby_changing": True,
        "gender_neutral": False,
        "reports": 42,
        "review": "Excellent cleanliness and well-equipped with essentials.",
        "review_date": "2025-03-24",
        "tag": "clean",
        "coordinates": {"lat": 11.0272, "lng": 76.8991},
    },
    {
        "name": "Fuel Station Podanur #1543",
        "location": "Podanur, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 4.1,
        "accessibility": True,
        "baby_changing": False,
        "gender_neutral": False,
        "reports": 27,
        "review": "Hygienic environment, spotless and comfortable.",
        "review_date": "2025-03-18",
        "tag": "clean",
        "coordinates": {"lat": 10.9907, "lng": 76.9723},
    },
    {
        "name": "Fuel Station Saibaba Colony #1544",
        "location": "Saibaba Colony, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 2.2,
        "accessibility": True,
        "baby_changing": False,
        "gender_neutral": True,
        "reports": 15,
        "review": "Unhygienic and poorly maintained.",
        "review_date": "2025-03-09",
        "tag": "dirty",
        "coordinates": {"lat": 11.0268, "lng": 76.9346},
    },
    {
        "name": "Fuel Station Saravanampatti #1545",
        "location": "Saravanampatti, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 2.5,
        "accessibility": True,
        "baby_changing": True,
        "gender_neutral": False,
        "reports": 33,
        "review": "Average cleanliness, can be improved.",
        "review_date": "2025-03-12",
        "tag": "moderate",
        "coordinates": {"lat": 11.0791, "lng": 77.0061},
    },
    {
        "name": "Fuel Station Ganapathy #1546",
        "location": "Ganapathy, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 4.7,
        "accessibility": True,
        "baby_changing": True,
        "gender_neutral": True,
        "reports": 58,
        "review": "Hygienic environment, spotless and comfortable.",
        "review_date": "2025-03-28",
        "tag": "clean",
        "coordinates": {"lat": 11.0352, "lng": 76.9991},
    },
    {
        "name": "Fuel Station Thudiyalur #1547",
        "location": "Thudiyalur, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 3.1,
        "accessibility": True,
        "baby_changing": False,
        "gender_neutral": False,
        "reports": 11,
        "review": "Not very bad, but could be more hygienic.",
        "review_date": "2025-03-05",
        "tag": "moderate",
        "coordinates": {"lat": 11.0712, "lng": 76.9452},
    },
    {
        "name": "Fuel Station Sulur #1548",
        "location": "Sulur, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 3.7,
        "accessibility": True,
        "baby_changing": True,
        "gender_neutral": False,
        "reports": 24,
        "review": "Excellent cleanliness and well-equipped with essentials.",
        "review_date": "2025-03-15",
        "tag": "clean",
        "coordinates": {"lat": 11.0286, "lng": 77.1285},
    },
    # Additional locations for district-wide coverage
    {
        "name": "Fuel Station Singanallur #1549",
        "location": "Singanallur, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 4.3,
        "accessibility": True,
        "baby_changing": False,
        "gender_neutral": True,
        "reports": 39,
        "review": "Very clean facilities and well maintained.",
        "review_date": "2025-03-21",
        "tag": "clean",
        "coordinates": {"lat": 11.0073, "lng": 77.0281},
    },
    {
        "name": "Fuel Station RS Puram #1550",
        "location": "RS Puram, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 4.5,
        "accessibility": True,
        "baby_changing": True,
        "gender_neutral": False,
        "reports": 47,
        "review": "Excellent facilities, very hygienic and comfortable.",
        "review_date": "2025-03-26",
        "tag": "clean",
        "coordinates": {"lat": 11.0083, "lng": 76.9514},
    },
    {
        "name": "Fuel Station Peelamedu #1551",
        "location": "Peelamedu, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 3.8,
        "accessibility": True,
        "baby_changing": False,
        "gender_neutral": False,
        "reports": 20,
        "review": "Good maintenance and cleanliness standards.",
        "review_date": "2025-03-17",
        "tag": "clean",
        "coordinates": {"lat": 11.0183, "lng": 77.0066},
    },
    {
        "name": "Fuel Station Ukkadam #1552",
        "location": "Ukkadam, Coimbatore",
        "type": "Petrol Bunk",
        "rating": 2.9,
        "accessibility": True,
        "baby_changing": False,
        "gender_neutral": False,
        "reports": 13,
        "review": "Average facilities, needs improvement in cleanliness.",
        "review_date": "2025-03-02",
        "tag": "moderate",
        "coordinates": {"lat": 10.9925, "lng": 76.9567},
    },
]

# Known areas: (match text, display name), in chat rule precedence order
KNOWN_AREAS = [
    ("vadavalli", "Vadavalli"),
    ("saibaba colony", "Saibaba Colony"),
    ("ganapathy", "Ganapathy"),
    ("podanur", "Podanur"),
    ("saravanampatti", "Saravanampatti"),
    ("thudiyalur", "Thudiyalur"),
    ("sulur", "Sulur"),
    ("singanallur", "Singanallur"),
    ("rs puram", "RS Puram"),
    ("peelamedu", "Peelamedu"),
    ("ukkadam", "Ukkadam"),
]


def get_area_display_names() -> List[str]:
    """Display names of all known areas, in declaration order."""
    return [display for _, display in KNOWN_AREAS]
