import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from taskboard.exceptions.record_exceptions import RecordNotFoundException

logger = logging.getLogger(__name__)


def handle_exception(exc, context):
    """
    Single failure path for every view.

    Missing records become 404 with a resource message, DRF errors keep DRF's response
    and anything else, store failures included, becomes 500 carrying the raw message.
    """
    if isinstance(exc, RecordNotFoundException):
        return Response(data={"message": exc.message}, status=status.HTTP_404_NOT_FOUND)

    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {str(exc)}")
    return Response(data={"error": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
