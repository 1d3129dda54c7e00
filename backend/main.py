import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from budget_travel.api.routes_inventory import router as inventory_router
from budget_travel.api.routes_itinerary import router as itinerary_router

from budget_travel.core.config_loader import settings


app = FastAPI(
    title="Budget Travel Planner",
    description="Budget travel itinerary generator with synthetic inventory and budget optimization",
    version="1.0.0"
)

# -------------------------------------------------------------
# CORS
# -------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # update to frontend domain in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------------------------------------------------
# ROUTES
# -------------------------------------------------------------
app.include_router(itinerary_router)
app.include_router(inventory_router)


# -------------------------------------------------------------
# ROOT ENDPOINT
# -------------------------------------------------------------
@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Budget Travel Planner backend is running",
        "env": settings.environment
    }


# -------------------------------------------------------------
# RUN LOCAL
# -------------------------------------------------------------
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
