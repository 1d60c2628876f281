from weatherly.api.pages.lookup_pages import router as pages_router

__all__ = ["pages_router"]
