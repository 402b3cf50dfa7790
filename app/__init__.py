"""Continuous assessment backend: a FastAPI service with two static routes."""
