"""
Declarative intent rule table for the chat assistant.

Each rule pairs a set of trigger substrings with a handler. Rules are
evaluated in declaration order and the first rule with a trigger contained in
the normalized utterance wins; matching rules are never combined.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from reststop.config import Settings
from reststop.config.fuel_stations import KNOWN_AREAS, get_area_display_names
from reststop.errors import LocationUnavailable
from reststop.models.facility import BusinessCategory, Facility
from reststop.models.request import GeoPoint, Preferences
from reststop.models.response import PlainText, ResponseDescriptor, WithNavigate
from reststop.services.geo import within_radius
from reststop.services.ranking import (
    CleanlinessTier,
    cleanliness_tier,
    filter_by_preferences,
    sort_by_cleanliness_desc,
)
from reststop.services.store import FacilityStore

from . import messages


@dataclass(frozen=True)
class DispatchContext:
    """Everything a handler may consult besides the utterance itself."""

    store: FacilityStore
    settings: Settings
    origin: Optional[GeoPoint] = None
    has_location_permission: bool = False

    @property
    def location_available(self) -> bool:
        return self.has_location_permission and self.origin is not None

    @property
    def district(self) -> str:
        return self.settings.district_name

    def require_origin(self) -> GeoPoint:
        if not self.location_available:
            raise LocationUnavailable("Location permission not granted or position unknown")
        return self.origin


Handler = Callable[[str, DispatchContext], ResponseDescriptor]


@dataclass(frozen=True)
class IntentRule:
    name: str
    triggers: FrozenSet[str]
    handler: Handler
    requires_location: bool = False
    # Template used when a location rule runs without location access
    permission_template: str = ""
    permission_label: str = ""

    def matches(self, utterance: str) -> bool:
        return any(trigger in utterance for trigger in self.triggers)

    def permission_text(self, district: str) -> str:
        return self.permission_template.format(district=district, label=self.permission_label)


def _tier_phrase(score: float) -> str:
    return messages.TIER_PHRASES[cleanliness_tier(score).value]


# Area rules

def _area_handler(area_key: str, display_name: str) -> Handler:
    def handle(utterance: str, context: DispatchContext) -> ResponseDescriptor:
        intent = f"area:{area_key}"
        matches = sort_by_cleanliness_desc(context.store.find_by_area_substring(area_key))
        if not matches:
            return PlainText(
                text=messages.AREA_NONE_TEMPLATE.format(area=display_name, district=context.district),
                intent=intent,
                result_count=0,
            )

        top = matches[0]
        if len(matches) == 1:
            text = messages.AREA_SINGLE_TEMPLATE.format(
                tier_phrase=_tier_phrase(top.score),
                name=top.name,
                area=display_name,
                district=context.district,
                score=top.score,
            )
        else:
            text = messages.AREA_MULTIPLE_TEMPLATE.format(
                count=len(matches),
                area=display_name,
                district=context.district,
                name=top.name,
                score=top.score,
            )
        if cleanliness_tier(top.score) is CleanlinessTier.LOW:
            text += messages.LOW_TIER_NOTE

        return WithNavigate(
            text=text,
            navigate_query=area_key,
            intent=intent,
            result_count=len(matches),
            top_facility=top,
        )

    return handle


def _area_rules() -> List[IntentRule]:
    rules = []
    for area_key, display_name in KNOWN_AREAS:
        first_word = area_key.split()[0]
        rules.append(
            IntentRule(
                name=f"area:{area_key}",
                triggers=frozenset({area_key, f"fuel station {first_word}"}),
                handler=_area_handler(area_key, display_name),
            )
        )
    return rules


# District and proximity rules

def _handle_district(utterance: str, context: DispatchContext) -> ResponseDescriptor:
    snapshot = context.store.snapshot()
    if context.location_available:
        nearby = sort_by_cleanliness_desc(
            within_radius(snapshot, context.origin, context.settings.nearby_radius_km)
        )
        if nearby:
            top = nearby[0]
            return WithNavigate(
                text=messages.DISTRICT_NEARBY_TEMPLATE.format(
                    count=len(nearby),
                    district=context.district,
                    name=top.name,
                    score=top.score,
                ),
                navigate_query=context.district.lower(),
                intent="district",
                result_count=len(nearby),
                top_facility=top,
            )

    return PlainText(
        text=messages.DISTRICT_TOTAL_TEMPLATE.format(total=len(snapshot), district=context.district),
        intent="district",
        result_count=len(snapshot),
    )


def _handle_nearby(utterance: str, context: DispatchContext) -> ResponseDescriptor:
    origin = context.require_origin()
    nearby = sort_by_cleanliness_desc(
        within_radius(context.store.snapshot(), origin, context.settings.nearby_radius_km)
    )
    if not nearby:
        return PlainText(
            text=messages.NEARBY_NONE_TEMPLATE.format(district=context.district),
            intent="nearby",
            result_count=0,
        )

    top = nearby[0]
    return WithNavigate(
        text=messages.NEARBY_FOUND_TEMPLATE.format(
            count=len(nearby),
            district=context.district,
            name=top.name,
            tier_phrase=_tier_phrase(top.score),
        ),
        navigate_query=utterance,
        intent="nearby",
        result_count=len(nearby),
        top_facility=top,
    )


def _amenity_handler(
    intent: str,
    label: str,
    navigate_query: str,
    preferences_for: Callable[[DispatchContext], Preferences],
) -> Handler:
    def handle(utterance: str, context: DispatchContext) -> ResponseDescriptor:
        origin = context.require_origin()
        nearby = within_radius(context.store.snapshot(), origin, context.settings.amenity_radius_km)
        qualified = sort_by_cleanliness_desc(filter_by_preferences(nearby, preferences_for(context)))
        if not qualified:
            return PlainText(
                text=messages.AMENITY_NONE_TEMPLATE.format(label=label, district=context.district),
                intent=intent,
                result_count=0,
            )

        top = qualified[0]
        return WithNavigate(
            text=messages.AMENITY_FOUND_TEMPLATE.format(
                count=len(qualified),
                label=label,
                district=context.district,
                name=top.name,
                score=top.score,
            ),
            navigate_query=navigate_query,
            intent=intent,
            result_count=len(qualified),
            top_facility=top,
        )

    return handle


def _amenity_rule(
    intent: str,
    triggers: Sequence[str],
    label: str,
    navigate_query: str,
    preferences_for: Callable[[DispatchContext], Preferences],
) -> IntentRule:
    return IntentRule(
        name=intent,
        triggers=frozenset(triggers),
        handler=_amenity_handler(intent, label, navigate_query, preferences_for),
        requires_location=True,
        permission_template=messages.AMENITY_PERMISSION_TEMPLATE,
        permission_label=label,
    )


# Fuel stations

def _is_fuel_station(facility: Facility) -> bool:
    return (
        facility.business_info.category == BusinessCategory.GAS_STATION
        or "fuel" in facility.name.lower()
    )


def _handle_fuel(utterance: str, context: DispatchContext) -> ResponseDescriptor:
    stations = sort_by_cleanliness_desc(
        facility for facility in context.store.snapshot() if _is_fuel_station(facility)
    )
    if not stations:
        return PlainText(
            text=messages.FUEL_NONE_TEMPLATE.format(district=context.district),
            intent="fuel_station",
            result_count=0,
        )

    clean = filter_by_preferences(
        stations, Preferences(min_cleanliness=context.settings.fuel_clean_score_threshold)
    )
    if clean:
        text = messages.FUEL_CLEAN_TEMPLATE.format(
            count=len(clean),
            district=context.district,
            first=clean[0].name,
            second=clean[1].name if len(clean) > 1 else "other locations",
        )
        count = len(clean)
    else:
        text = messages.FUEL_MIXED_TEMPLATE.format(
            count=len(stations), district=context.district, name=stations[0].name
        )
        count = len(stations)

    return WithNavigate(
        text=text,
        navigate_query="fuel station",
        intent="fuel_station",
        result_count=count,
        top_facility=stations[0],
    )


# Informational rules

def _handle_help(utterance: str, context: DispatchContext) -> ResponseDescriptor:
    return PlainText(text=messages.HELP_TEMPLATE.format(district=context.district), intent="help")


def _handle_where_am_i(utterance: str, context: DispatchContext) -> ResponseDescriptor:
    origin = context.require_origin()
    return PlainText(
        text=messages.WHERE_AM_I_TEMPLATE.format(
            lat=origin.lat, lng=origin.lng, district=context.district
        ),
        intent="where_am_i",
    )


def _handle_areas(utterance: str, context: DispatchContext) -> ResponseDescriptor:
    return PlainText(
        text=messages.AREAS_TEMPLATE.format(
            district=context.district, areas=", ".join(get_area_display_names())
        ),
        intent="areas",
    )


def build_default_rules() -> Tuple[IntentRule, ...]:
    """The assistant's rule table in precedence order."""
    rules = _area_rules()
    rules.extend(
        [
            IntentRule(
                name="district",
                triggers=frozenset({"coimbatore", "district"}),
                handler=_handle_district,
            ),
            IntentRule(
                name="nearby",
                triggers=frozenset({"restroom", "bathroom", "toilet"}),
                handler=_handle_nearby,
                requires_location=True,
                permission_template=messages.NEARBY_PERMISSION_TEMPLATE,
            ),
            _amenity_rule(
                "clean",
                ["clean", "hygienic"],
                label="highly-rated clean restrooms",
                navigate_query="clean restrooms",
                preferences_for=lambda ctx: Preferences(min_cleanliness=ctx.settings.clean_score_threshold),
            ),
            IntentRule(
                name="fuel_station",
                triggers=frozenset({"fuel", "petrol", "gas station"}),
                handler=_handle_fuel,
            ),
            _amenity_rule(
                "accessible",
                ["accessible", "disability"],
                label="accessible restrooms",
                navigate_query="accessible",
                preferences_for=lambda ctx: Preferences(accessibility=True),
            ),
            _amenity_rule(
                "baby_changing",
                ["baby", "changing"],
                label="restrooms with baby changing facilities",
                navigate_query="baby changing",
                preferences_for=lambda ctx: Preferences(baby_changing=True),
            ),
            _amenity_rule(
                "gender_neutral",
                ["gender", "neutral"],
                label="gender-neutral restrooms",
                navigate_query="gender neutral",
                preferences_for=lambda ctx: Preferences(gender_neutral=True),
            ),
            IntentRule(
                name="help",
                triggers=frozenset({"help"}),
                handler=_handle_help,
            ),
            IntentRule(
                name="where_am_i",
                triggers=frozenset({"location", "where am i"}),
                handler=_handle_where_am_i,
                requires_location=True,
                permission_template=messages.WHERE_AM_I_PERMISSION_TEMPLATE,
            ),
            IntentRule(
                name="areas",
                triggers=frozenset({"areas", "locations", "places"}),
                handler=_handle_areas,
            ),
        ]
    )
    return tuple(rules)


DEFAULT_RULES = build_default_rules()
