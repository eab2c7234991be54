from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from taskboard.models.task import TaskModel
from taskboard.serializers.task_serializer import TaskSerializer
from taskboard.services.task_service import TaskService
from taskboard.views.base import DatabaseAPIView

task_id_parameter = OpenApiParameter(
    name="task_id",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
    description="Identifier of the task",
    required=True,
)


class TaskListView(DatabaseAPIView):
    @extend_schema(
        operation_id="get_tasks",
        summary="List tasks",
        description="Return every task in insertion order.",
        tags=["tasks"],
        responses={
            200: OpenApiResponse(response=TaskModel, description="Array of all tasks"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def get(self, request: Request):
        tasks = TaskService(self.get_database_manager()).get_tasks()
        return Response(data=[task.to_response() for task in tasks], status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_task",
        summary="Create task",
        description="Create a task with a server-generated identifier. Fields other than the known ones are stored as sent.",
        tags=["tasks"],
        request=TaskSerializer,
        responses={
            201: OpenApiResponse(response=TaskModel, description="Task created"),
            400: OpenApiResponse(description="Body is not an object or a known field has the wrong type"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def post(self, request: Request):
        serializer = TaskSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        task = TaskService(self.get_database_manager()).create_task(serializer.get_fields_to_store())
        return Response(data=task.to_response(), status=status.HTTP_201_CREATED)


class TaskDetailView(DatabaseAPIView):
    @extend_schema(
        operation_id="get_task_by_id",
        summary="Get task",
        tags=["tasks"],
        parameters=[task_id_parameter],
        responses={
            200: OpenApiResponse(response=TaskModel, description="Task found"),
            404: OpenApiResponse(description="Task not found"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def get(self, request: Request, task_id: str):
        task = TaskService(self.get_database_manager()).get_task_by_id(task_id)
        return Response(data=task.to_response(), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_task",
        summary="Partially update task",
        description="Merge the supplied fields into the task. Fields not supplied keep their values.",
        tags=["tasks"],
        parameters=[task_id_parameter],
        request=TaskSerializer,
        responses={
            200: OpenApiResponse(response=TaskModel, description="Task updated"),
            400: OpenApiResponse(description="Body is not an object or a known field has the wrong type"),
            404: OpenApiResponse(description="Task not found"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def patch(self, request: Request, task_id: str):
        serializer = TaskSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        task = TaskService(self.get_database_manager()).update_task(task_id, serializer.get_fields_to_store())
        return Response(data=task.to_response(), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_task",
        summary="Delete task",
        description="Delete the task if it exists. Assignments that reference it are left in place.",
        tags=["tasks"],
        parameters=[task_id_parameter],
        responses={
            204: OpenApiResponse(description="Task deleted or already absent"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def delete(self, request: Request, task_id: str):
        TaskService(self.get_database_manager()).delete_task(task_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
