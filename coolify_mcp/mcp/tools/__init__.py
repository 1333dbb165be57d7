"""Coolify tool registrations grouped by domain."""

from . import platform, applications, deployments  # noqa: F401

__all__ = ["platform", "applications", "deployments"]
