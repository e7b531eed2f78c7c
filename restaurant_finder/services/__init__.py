"""
Restaurant Finder - Services Layer
===================================

Service Inventory:
    - StorageGateway:     parameterized statement execution, rows as dicts
    - RestaurantService:  list/get/create/update/delete over the gateway
    - UploadService:      image type/size validation and disk storage
"""
