"""
Files API.

FastAPI application hosting the file upload endpoint.
"""
