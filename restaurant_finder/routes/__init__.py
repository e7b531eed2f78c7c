"""
Restaurant Finder - API Routes Package
=======================================

Route Inventory:
    - restaurants.py:  /api/v1/restaurants[/{id}]   (CRUD)
    - upload.py:       POST /upload                 (store an image)
                       GET  /uploads/{path}         (serve stored images)
    - health.py:       GET  /health                 (service health check)

Handlers stay thin: extract input, call a service, shape the envelope.
"""
