"""Telemetry and environment configuration."""
