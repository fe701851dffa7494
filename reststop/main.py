import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from reststop.config import settings
from reststop.errors import FacilityNotFound, InvalidArgument, NoRouteError, ValidationError
from reststop.logging_config import configure_logging
from reststop.models.facility import Facility
from reststop.models.request import (
    DirectionsRequest,
    RecommendationRequest,
    StructuredQuery,
    UtteranceQuery,
)
from reststop.models.response import ChatReply, DirectionsResponse, FacilityListResponse
from reststop.services.chat import IntentDispatcher, ResponseComposer
from reststop.services.chat_service import ChatService
from reststop.services.directions_service import DirectionsService
from reststop.services.routing import OSRMRoutingService
from reststop.services.search_service import SearchService
from reststop.services.store import FacilityStore

configure_logging(settings.log_level, settings.log_json)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="RestStop API",
    description="Restroom search, ranking and chat assistant API",
    version=settings.api_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

facility_store = FacilityStore()
facility_store.load_builtin()

search_service = SearchService(facility_store)
chat_service = ChatService(IntentDispatcher(facility_store), ResponseComposer())
directions_service = DirectionsService(facility_store, OSRMRoutingService())
logger.info("RestStop API ready with %d restrooms", len(facility_store))


def _list_response(facilities) -> FacilityListResponse:
    return FacilityListResponse(
        success=True,
        message=f"Found {len(facilities)} restrooms",
        facilities=facilities,
        total_count=len(facilities),
    )


@app.post("/api/v1/restrooms/search", response_model=FacilityListResponse)
async def search_restrooms(query: StructuredQuery):
    """Filter restrooms by area, radius and preferences, cleanest first"""
    try:
        return _list_response(search_service.search(query))
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/v1/restrooms/recommendations", response_model=FacilityListResponse)
async def recommend_restrooms(request: RecommendationRequest):
    """Top restrooms matching the given preferences"""
    try:
        recommended = search_service.recommend(
            request.preferences, origin=request.origin, radius_km=request.radius_km
        )
        return _list_response(recommended)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/v1/restrooms", response_model=Facility)
async def add_restroom(facility: Facility):
    """Submit a new restroom"""
    try:
        return facility_store.add(facility)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/v1/restrooms/{facility_id}", response_model=Facility)
async def get_restroom(facility_id: str):
    try:
        return facility_store.get(facility_id)
    except FacilityNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/api/v1/chat", response_model=ChatReply)
async def chat(query: UtteranceQuery):
    """Answer a free-text question about restrooms"""
    return await chat_service.reply(query)


@app.post("/api/v1/directions", response_model=DirectionsResponse)
async def get_directions(request: DirectionsRequest):
    """Road distance and travel time to a restroom"""
    try:
        return await directions_service.get_directions(request)
    except FacilityNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NoRouteError as e:
        raise HTTPException(status_code=502, detail=f"Routing failed: {str(e)}")


@app.get("/health")
async def health_check():
    """Health check"""
    return {
        "status": "healthy" if facility_store.builtin_loaded else "degraded",
        "version": settings.api_version,
        "restrooms": len(facility_store),
        "user_submitted": len(facility_store.user_submitted()),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
