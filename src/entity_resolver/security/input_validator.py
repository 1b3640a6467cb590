"""
Input validation for resolver requests.

OOP: Single Responsibility - Only handles request validation.
"""
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import ValidationError


class InputValidator:
    """
    Validates request payloads before they reach the resolver.

    Resolution itself never fails on odd text; this layer only rejects
    payloads with the wrong shape or unreasonable sizes.
    """

    MAX_QUERY_LENGTH = 200
    MAX_USER_TEAMS = 50
    MAX_TEAM_NAME_LENGTH = 100
    MAX_LOCATION_LENGTH = 200

    @staticmethod
    def validate_query(query: Any) -> str:
        """
        :param query: Raw query value from the request
        :return: The query string (may be empty)
        :raises ValidationError: If query is missing, not a string, or too long
        """
        if query is None:
            raise ValidationError("Missing 'query' in request body")

        if not isinstance(query, str):
            raise ValidationError("Query must be a string")

        if len(query) > InputValidator.MAX_QUERY_LENGTH:
            raise ValidationError(
                f"Query exceeds maximum length of {InputValidator.MAX_QUERY_LENGTH} characters"
            )

        return query.replace("\x00", "")

    @staticmethod
    def validate_user_teams(user_teams: Any) -> List[str]:
        if user_teams is None:
            return []

        if not isinstance(user_teams, list) or not all(isinstance(t, str) for t in user_teams):
            raise ValidationError("user_teams must be a list of strings")

        if len(user_teams) > InputValidator.MAX_USER_TEAMS:
            raise ValidationError(
                f"user_teams exceeds maximum of {InputValidator.MAX_USER_TEAMS} entries"
            )

        if any(len(t) > InputValidator.MAX_TEAM_NAME_LENGTH for t in user_teams):
            raise ValidationError(
                f"Team names cannot exceed {InputValidator.MAX_TEAM_NAME_LENGTH} characters"
            )

        return user_teams

    @staticmethod
    def validate_coordinates(lat: Any, lon: Any) -> Tuple[Optional[float], Optional[float]]:
        """
        Both coordinates or neither; numeric and within range.
        """
        if lat is None and lon is None:
            return None, None

        if lat is None or lon is None:
            raise ValidationError("user_lat and user_lon must be provided together")

        for name, value in (("user_lat", lat), ("user_lon", lon)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"{name} must be a number")

        if not -90.0 <= lat <= 90.0:
            raise ValidationError("user_lat must be between -90 and 90")
        if not -180.0 <= lon <= 180.0:
            raise ValidationError("user_lon must be between -180 and 180")

        return float(lat), float(lon)

    @staticmethod
    def validate_location(location: Any) -> Optional[str]:
        if location is None:
            return None

        if not isinstance(location, str):
            raise ValidationError("user_location must be a string")

        if len(location) > InputValidator.MAX_LOCATION_LENGTH:
            raise ValidationError(
                f"user_location exceeds maximum length of {InputValidator.MAX_LOCATION_LENGTH} characters"
            )

        return location

    @staticmethod
    def validate_resolve_request(payload: Any) -> Dict[str, Any]:
        """
        Validate a /resolve request body.

        :param payload: Decoded JSON body
        :return: Keyword arguments for ResolverService.resolve
        :raises ValidationError: If the payload is invalid
        """
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")

        user_lat, user_lon = InputValidator.validate_coordinates(
            payload.get("user_lat"), payload.get("user_lon")
        )

        return {
            "query": InputValidator.validate_query(payload.get("query")),
            "user_teams": InputValidator.validate_user_teams(payload.get("user_teams")),
            "user_lat": user_lat,
            "user_lon": user_lon,
            "user_location": InputValidator.validate_location(payload.get("user_location")),
        }
