"""Root Endpoint: service banner with an index of the available routes."""

from fastapi import APIRouter

router = APIRouter(tags=["root"])

ENDPOINTS = {
    "health": "GET /health",
    "users": {
        "list": "GET /users",
        "get": "GET /users/:id",
        "create": "POST /users",
        "update": "PUT /users/:id",
        "delete": "DELETE /users/:id",
    },
}


@router.get("/")
async def index():
    return {"message": "Welcome to the User API", "endpoints": ENDPOINTS}
