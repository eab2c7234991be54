from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from taskboard.models.assignee import AssigneeModel
from taskboard.serializers.assignee_serializer import AssigneeSerializer
from taskboard.services.assignee_service import AssigneeService
from taskboard.views.base import DatabaseAPIView

assignee_id_parameter = OpenApiParameter(
    name="assignee_id",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
    description="Identifier of the assignee",
    required=True,
)


class AssigneeListView(DatabaseAPIView):
    @extend_schema(
        operation_id="get_assignees",
        summary="List assignees",
        tags=["assignees"],
        responses={
            200: OpenApiResponse(response=AssigneeModel, description="Array of all assignees"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def get(self, request: Request):
        assignees = AssigneeService(self.get_database_manager()).get_assignees()
        return Response(data=[assignee.to_response() for assignee in assignees], status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_assignee",
        summary="Create assignee",
        tags=["assignees"],
        request=AssigneeSerializer,
        responses={
            201: OpenApiResponse(response=AssigneeModel, description="Assignee created"),
            400: OpenApiResponse(description="Body is not an object or a known field has the wrong type"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def post(self, request: Request):
        serializer = AssigneeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        assignee = AssigneeService(self.get_database_manager()).create_assignee(serializer.get_fields_to_store())
        return Response(data=assignee.to_response(), status=status.HTTP_201_CREATED)


class AssigneeDetailView(DatabaseAPIView):
    @extend_schema(
        operation_id="get_assignee_by_id",
        summary="Get assignee",
        tags=["assignees"],
        parameters=[assignee_id_parameter],
        responses={
            200: OpenApiResponse(response=AssigneeModel, description="Assignee found"),
            404: OpenApiResponse(description="Assignee not found"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def get(self, request: Request, assignee_id: str):
        assignee = AssigneeService(self.get_database_manager()).get_assignee_by_id(assignee_id)
        return Response(data=assignee.to_response(), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_assignee",
        summary="Partially update assignee",
        tags=["assignees"],
        parameters=[assignee_id_parameter],
        request=AssigneeSerializer,
        responses={
            200: OpenApiResponse(response=AssigneeModel, description="Assignee updated"),
            400: OpenApiResponse(description="Body is not an object or a known field has the wrong type"),
            404: OpenApiResponse(description="Assignee not found"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def patch(self, request: Request, assignee_id: str):
        serializer = AssigneeSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        assignee = AssigneeService(self.get_database_manager()).update_assignee(
            assignee_id, serializer.get_fields_to_store()
        )
        return Response(data=assignee.to_response(), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_assignee",
        summary="Delete assignee",
        description="Delete the assignee if it exists. Assignments that reference it are left in place.",
        tags=["assignees"],
        parameters=[assignee_id_parameter],
        responses={
            204: OpenApiResponse(description="Assignee deleted or already absent"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def delete(self, request: Request, assignee_id: str):
        AssigneeService(self.get_database_manager()).delete_assignee(assignee_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
