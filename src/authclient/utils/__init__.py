"""Shared utilities."""

from authclient.utils.json_serializers import json_serializer

__all__ = ["json_serializer"]
