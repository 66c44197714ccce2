"""Notification service package.

Holds the domain model, the application service and the adapters (SQL store,
event listener, HTTP routes) that expose per-user notifications.
"""
