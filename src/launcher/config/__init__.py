"""
Configuration management for the launcher.

Contains the Pydantic settings shared by the API and worker processes.
"""
