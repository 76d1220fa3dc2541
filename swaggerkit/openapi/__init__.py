"""Models of the API specification documents swaggerkit emits."""

from swaggerkit.openapi.v2 import Swagger

__all__ = [
    'Swagger',
]
