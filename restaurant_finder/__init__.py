"""
Restaurant Finder - Application Package
========================================

HTTP service for restaurant listings: CRUD over a single `restaurants`
table plus image uploads stored on local disk.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (RestaurantService,      │
    │   UploadService, StorageGateway)    │
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
