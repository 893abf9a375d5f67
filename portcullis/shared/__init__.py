"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, infrastructure and bot layers. No business logic.
"""
