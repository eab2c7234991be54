from django.urls import path
from taskboard.views.task import TaskListView, TaskDetailView
from taskboard.views.assignee import AssigneeListView, AssigneeDetailView
from taskboard.views.assignment import (
    AssignmentListView,
    AssignTaskView,
    UnassignTaskView,
    AssigneeTasksView,
    TaskAssigneesView,
)
from taskboard.views.health import HealthView

urlpatterns = [
    path("tasks", TaskListView.as_view(), name="tasks"),
    path("tasks/<str:task_id>", TaskDetailView.as_view(), name="task_detail"),
    path("tasks/<str:task_id>/assignees", TaskAssigneesView.as_view(), name="task_assignees"),
    path("tasks/<str:task_id>/assign/<str:assignee_id>", AssignTaskView.as_view(), name="assign_task"),
    path("tasks/<str:task_id>/unassign/<str:assignee_id>", UnassignTaskView.as_view(), name="unassign_task"),
    path("assignees", AssigneeListView.as_view(), name="assignees"),
    path("assignees/<str:assignee_id>", AssigneeDetailView.as_view(), name="assignee_detail"),
    path("assignees/<str:assignee_id>/tasks", AssigneeTasksView.as_view(), name="assignee_tasks"),
    path("assignments", AssignmentListView.as_view(), name="assignments"),
    path("health", HealthView.as_view(), name="health"),
]
