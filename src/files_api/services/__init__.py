"""
Service layer for the Files API.

Route handlers get these services through the dependencies in
`files_api.dependencies`; worker modules construct them directly.
"""
from files_api.services.file_service import FileService

__all__ = ["FileService"]
