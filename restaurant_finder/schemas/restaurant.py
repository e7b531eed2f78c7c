"""
Restaurant Finder - Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract.
How:   FastAPI validates request bodies against the input models and
       serializes responses through the envelope models, which also drive
       the OpenAPI documentation.

Envelope shapes are kept exactly as existing clients expect them:

    GET    /api/v1/restaurants        {"status": "Success", "data": {"restaurants": [...]}}
    GET    /api/v1/restaurants/{id}   {"status": "Success", "data": {"restaurant": {...}}}
    POST   /api/v1/restaurants        {"status": "Success", "data": {"restaurants": {...}}}
    PUT    /api/v1/restaurants/{id}   {"status": "success", "data": {...}}
    DELETE /api/v1/restaurants/{id}   {"status": "Success"}
    POST   /upload                    {"message": "...", "data": {"image_url": "..."}}
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class RestaurantIn(BaseModel):
    """
    Body of create and update requests.

    Update is a full replace: every field is written, so an omitted
    image_url clears the stored one.
    """
    rname: str = Field(min_length=1, max_length=255, description="Restaurant name")
    location: str = Field(min_length=1, max_length=255, description="Restaurant location")
    price_range: str = Field(
        min_length=1, max_length=20, description="Price band, e.g. '$$'"
    )
    image_url: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Path returned by POST /upload, or null",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "rname": "Cafe X",
                "location": "Downtown",
                "price_range": "$$",
                "image_url": "/uploads/Images/1700000000000123456.png",
            }
        }
    }


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class RestaurantOut(BaseModel):
    """A stored restaurant row."""
    id: int = Field(description="Identifier assigned by the database")
    rname: str
    location: str
    price_range: str
    image_url: Optional[str] = None

    model_config = {"from_attributes": True}


class RestaurantListData(BaseModel):
    restaurants: List[RestaurantOut]


class RestaurantListResponse(BaseModel):
    status: str = "Success"
    data: RestaurantListData


class RestaurantDetailData(BaseModel):
    restaurant: RestaurantOut


class RestaurantDetailResponse(BaseModel):
    status: str = "Success"
    data: RestaurantDetailData


class RestaurantCreatedData(BaseModel):
    # Singular row under a plural key, as existing clients read it
    restaurants: RestaurantOut


class RestaurantCreatedResponse(BaseModel):
    status: str = "Success"
    data: RestaurantCreatedData


class RestaurantUpdatedResponse(BaseModel):
    status: str = "success"
    data: RestaurantOut


class StatusResponse(BaseModel):
    status: str = "Success"


class UploadData(BaseModel):
    image_url: str = Field(description="Public path of the stored image")


class UploadResponse(BaseModel):
    message: str = "Image uploaded successfully!"
    data: UploadData


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body shared by every endpoint.

    Example:
        {
            "status": "Error",
            "error": "Only JPEG, JPG, PNG, and GIF images are allowed!",
            "details": {"field": "image", "extension": ".pdf"},
            "request_id": "1f2e3d4c"
        }
    """
    status: str = Field(default="Error")
    error: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
