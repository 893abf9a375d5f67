"""Persistence: directory database engine, models, repositories."""
