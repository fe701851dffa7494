"""Reply templates for the chat assistant."""

TIER_PHRASES = {
    "high": "highly rated",
    "medium": "moderately rated",
    "low": "lower rated",
}

AREA_MULTIPLE_TEMPLATE = (
    "I found {count} restrooms in {area} area of {district}. "
    "The top rated is {name} with a cleanliness score of {score:g}/100."
)
AREA_SINGLE_TEMPLATE = (
    "I found a {tier_phrase} restroom at {name} in {area}, {district}, "
    "with a cleanliness score of {score:g}/100."
)
LOW_TIER_NOTE = " Note that this location has been reported as not very clean."
AREA_NONE_TEMPLATE = (
    "I couldn't find specific restrooms in {area} in our database. "
    "Would you like me to show all restrooms across {district} district instead?"
)

DISTRICT_NEARBY_TEMPLATE = (
    "I found {count} restrooms in {district} district near your current location. "
    "The top rated is {name} with a cleanliness score of {score:g}/100."
)
DISTRICT_TOTAL_TEMPLATE = (
    "Our database has information on {total} restrooms across {district} district. "
    "Could you specify a particular area or let me access your location to find the nearest ones?"
)

NEARBY_FOUND_TEMPLATE = (
    "I found {count} restrooms near you in {district} district. "
    "The top rated is {name}, which is {tier_phrase} for cleanliness."
)
NEARBY_NONE_TEMPLATE = (
    "I couldn't find any restrooms in your immediate vicinity in {district} district. "
    "Would you like me to expand the search radius?"
)
NEARBY_PERMISSION_TEMPLATE = (
    "I'd like to find restrooms near you in {district} district, but I need permission "
    "to access your location. Please enable location services and try again."
)

AMENITY_FOUND_TEMPLATE = (
    "I found {count} {label} near you in {district} district. "
    "The top rated is {name} with a cleanliness score of {score:g}/100."
)
AMENITY_NONE_TEMPLATE = (
    "I couldn't find any {label} in your immediate vicinity in {district} district. "
    "Would you like me to expand the search radius?"
)
AMENITY_PERMISSION_TEMPLATE = (
    "I can help you find {label} in {district} district, but I need your location "
    "to provide the best results. Please enable location services."
)

FUEL_CLEAN_TEMPLATE = (
    "I found {count} clean restrooms at fuel stations across {district} district. "
    "The best ones are at {first} and {second}."
)
FUEL_MIXED_TEMPLATE = (
    "I found {count} restrooms at fuel stations in {district} district, but their "
    "cleanliness ratings vary. The highest rated is at {name}."
)
FUEL_NONE_TEMPLATE = (
    "I don't have specific information about fuel station restrooms in our database yet. "
    "Would you like to see other restroom options in {district} district?"
)

HELP_TEMPLATE = (
    "You can ask me to find restrooms anywhere in {district} district, including specific "
    "areas like Vadavalli, Saibaba Colony, or Ganapathy. I can provide information about "
    "cleanliness ratings, accessibility, baby changing facilities, or gender-neutral options. "
    "I can also help you find restrooms at fuel stations. What would you like to know?"
)

WHERE_AM_I_TEMPLATE = (
    "You're currently located at approximately latitude {lat:.4f} and longitude {lng:.4f}. "
    "This appears to be in the {district} district area. I can help find restrooms near this location."
)
WHERE_AM_I_PERMISSION_TEMPLATE = (
    "I don't currently have access to your location. Please enable location services so "
    "I can provide better assistance in finding restrooms in {district} district."
)

AREAS_TEMPLATE = (
    "I have information about restrooms in various areas of {district} district including "
    "{areas}, and many other locations. Which area are you interested in?"
)

FALLBACK_TEMPLATE = (
    "I'm here to help you find and locate restrooms across the entire {district} district. "
    "You can ask about specific areas like Vadavalli, Saibaba Colony, or Ganapathy, or ask "
    "about nearby restrooms, clean facilities, accessible options, baby changing stations, "
    "or gender-neutral bathrooms. How can I assist you today?"
)

DEGRADED_TEMPLATE = (
    "Sorry, I ran into a problem looking up restrooms for that request. "
    "Please try again or ask about a specific area in {district} district."
)
