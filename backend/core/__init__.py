"""Core backend infrastructure for the Sports Prediction API.

This package contains configuration, logging, database, error handling,
validation, and credential helpers used by the FastAPI application entrypoint.
"""
