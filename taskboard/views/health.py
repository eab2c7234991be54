from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response

from taskboard.constants.health import AppHealthStatus, ComponentHealthStatus
from taskboard.views.base import DatabaseAPIView


class HealthView(DatabaseAPIView):
    @extend_schema(
        operation_id="health_check",
        summary="Health check",
        description="Check the health status of the application and its components",
        tags=["health"],
        responses={
            200: OpenApiResponse(description="Application is healthy"),
            503: OpenApiResponse(description="Application is unhealthy"),
        },
    )
    def get(self, request):
        is_mongodb_healthy = self.get_database_manager().check_database_health()

        mongodb_status = ComponentHealthStatus.UP if is_mongodb_healthy else ComponentHealthStatus.DOWN
        overall_status = AppHealthStatus.UP if is_mongodb_healthy else AppHealthStatus.DOWN

        response = {
            "status": overall_status.name,
            "components": {
                "mongodb": {"status": mongodb_status.name},
            },
        }
        return Response(response, overall_status.http_status)
