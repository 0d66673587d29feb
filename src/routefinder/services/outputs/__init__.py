"""Output serializers."""

from .routing_formatter import route_result_to_csv, route_result_to_json, route_result_to_text

__all__ = ["route_result_to_text", "route_result_to_json", "route_result_to_csv"]
