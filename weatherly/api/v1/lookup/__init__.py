from weatherly.api.v1.lookup.lookup_routes import router as lookup_router

__all__ = ["lookup_router"]
