"""Error taxonomy shared by the store, filters, dispatcher and API layer."""


class ReststopError(Exception):
    """Base class for all errors raised by the RestStop core."""


class ValidationError(ReststopError):
    """Facility data is malformed (coordinates or score out of range, duplicate id)."""


class InvalidArgument(ReststopError):
    """A call received an unusable argument, e.g. a non-positive radius."""


class LocationUnavailable(ReststopError):
    """The caller's location is not known or permission was not granted."""


class FacilityNotFound(ReststopError):
    """No facility with the requested identifier exists in the store."""


class NoRouteError(ReststopError):
    """The routing collaborator could not produce a route."""
