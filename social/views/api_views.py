import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from social.errors import SocialError
from social.identity import identity_for
from social.operations import execute

logger = logging.getLogger(__name__)


def health(request):
    """Liveness probe."""
    return JsonResponse({"status": "ok"})


class OperationApi(APIView):
    """Single query/mutation endpoint.

    Request body: ``{"operation": <name>, "variables": {...}}``.
    Response body: ``{"data": ..., "errors": [...]}``; a failed operation
    reports its message and error kind with no data.
    """

    def perform_authentication(self, request):
        # Credentials are resolved lazily by identity_for so a bad token
        # surfaces as an operation error rather than a bare 401.
        pass

    def post(self, request):
        """Resolve the caller's identity and run the named operation."""
        body = request.data if isinstance(request.data, dict) else {}
        name = body.get("operation")
        if not name or not isinstance(name, str):
            return Response(
                {"data": None, "errors": [{"message": "Missing operation name", "kind": "BAD_REQUEST"}]},
                status=status.HTTP_400_BAD_REQUEST,
            )

        identity = identity_for(request)
        try:
            data = execute(name, identity, body.get("variables"))
        except SocialError as exc:
            logger.info("Operation %s failed: %s (%s)", name, exc.message, exc.kind)
            error = dict(exc.as_dict(), operation=name)
            code = status.HTTP_400_BAD_REQUEST if exc.kind == "BAD_REQUEST" else status.HTTP_200_OK
            return Response({"data": None, "errors": [error]}, status=code)
        return Response({"data": data, "errors": []})
