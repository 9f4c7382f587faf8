"""
Service layer.

Each service wraps the storage calls for one collection.  Handlers in
``api/endpoints`` stay thin and delegate here.
"""
