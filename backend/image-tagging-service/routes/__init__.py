"""API routers for the image tagging service."""
