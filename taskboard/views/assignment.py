from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from taskboard.models.assignee import AssigneeModel
from taskboard.models.assignment import AssignmentModel
from taskboard.models.task import TaskModel
from taskboard.services.assignment_service import AssignmentService
from taskboard.views.base import DatabaseAPIView


def path_parameter(name: str, description: str) -> OpenApiParameter:
    return OpenApiParameter(
        name=name,
        type=OpenApiTypes.STR,
        location=OpenApiParameter.PATH,
        description=description,
        required=True,
    )


class AssignmentListView(DatabaseAPIView):
    @extend_schema(
        operation_id="get_assignments",
        summary="List assignments",
        tags=["assignments"],
        responses={
            200: OpenApiResponse(response=AssignmentModel, description="Array of all assignments"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def get(self, request: Request):
        assignments = AssignmentService(self.get_database_manager()).get_assignments()
        return Response(data=[assignment.to_response() for assignment in assignments], status=status.HTTP_200_OK)


class AssignTaskView(DatabaseAPIView):
    @extend_schema(
        operation_id="assign_task",
        summary="Assign task to assignee",
        description="""
        Link a task to an assignee.

        Neither record is checked for existence, and assigning the same pair again
        creates another, independent assignment.
        """,
        tags=["assignments"],
        request=None,
        parameters=[
            path_parameter("task_id", "Identifier of the task"),
            path_parameter("assignee_id", "Identifier of the assignee"),
        ],
        responses={
            201: OpenApiResponse(response=AssignmentModel, description="Assignment created"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def post(self, request: Request, task_id: str, assignee_id: str):
        assignment = AssignmentService(self.get_database_manager()).assign(task_id, assignee_id)
        return Response(data=assignment.to_response(), status=status.HTTP_201_CREATED)


class UnassignTaskView(DatabaseAPIView):
    @extend_schema(
        operation_id="unassign_task",
        summary="Unassign task from assignee",
        description="Remove one assignment for the pair. Succeeds even when no assignment exists.",
        tags=["assignments"],
        parameters=[
            path_parameter("task_id", "Identifier of the task"),
            path_parameter("assignee_id", "Identifier of the assignee"),
        ],
        responses={
            204: OpenApiResponse(description="Assignment removed or already absent"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def delete(self, request: Request, task_id: str, assignee_id: str):
        AssignmentService(self.get_database_manager()).unassign(task_id, assignee_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AssigneeTasksView(DatabaseAPIView):
    @extend_schema(
        operation_id="get_assignee_tasks",
        summary="List tasks assigned to an assignee",
        description="Returns an empty array when the assignee has no assignments or does not exist.",
        tags=["assignments"],
        parameters=[path_parameter("assignee_id", "Identifier of the assignee")],
        responses={
            200: OpenApiResponse(response=TaskModel, description="Array of tasks"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def get(self, request: Request, assignee_id: str):
        tasks = AssignmentService(self.get_database_manager()).get_tasks_for_assignee(assignee_id)
        return Response(data=[task.to_response() for task in tasks], status=status.HTTP_200_OK)


class TaskAssigneesView(DatabaseAPIView):
    @extend_schema(
        operation_id="get_task_assignees",
        summary="List assignees of a task",
        description="Returns an empty array when the task has no assignments or does not exist.",
        tags=["assignments"],
        parameters=[path_parameter("task_id", "Identifier of the task")],
        responses={
            200: OpenApiResponse(response=AssigneeModel, description="Array of assignees"),
            500: OpenApiResponse(description="Store failure"),
        },
    )
    def get(self, request: Request, task_id: str):
        assignees = AssignmentService(self.get_database_manager()).get_assignees_for_task(task_id)
        return Response(data=[assignee.to_response() for assignee in assignees], status=status.HTTP_200_OK)
