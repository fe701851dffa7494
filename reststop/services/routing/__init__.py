# Routing collaborator package
from .osrm_routing_service import OSRMRoutingService
from .routing_service import RoutingService

__all__ = ["OSRMRoutingService", "RoutingService"]
