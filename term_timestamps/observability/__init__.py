"""Observability: structured logging and metrics.

structlog for logging, Prometheus for metrics.
"""
