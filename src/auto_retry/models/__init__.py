"""Data models shared by the transport and the retry engine."""

from auto_retry.models.api_models import ApiResponse, ResponseParameters

__all__ = ["ApiResponse", "ResponseParameters"]
