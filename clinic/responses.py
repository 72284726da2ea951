"""
Rendering of service results as DRF responses.

Every :class:`~clinic.results.MessageKind` has exactly one HTTP status in
``HTTP_STATUS_BY_KIND``; :func:`render` looks kinds up there and nowhere
else, so adding a kind without a status fails loudly at import time.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response

from clinic.results import Message, MessageKind, Result

HTTP_STATUS_BY_KIND: dict[MessageKind, int] = {
    MessageKind.SUCCESS: status.HTTP_200_OK,
    MessageKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    MessageKind.INVALID_PAYLOAD: status.HTTP_400_BAD_REQUEST,
    MessageKind.ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    MessageKind.PAYMENT_FAILED: status.HTTP_402_PAYMENT_REQUIRED,
    MessageKind.PAYMENT_COMPLETED: status.HTTP_409_CONFLICT,
}

_unmapped = set(MessageKind) - set(HTTP_STATUS_BY_KIND)
if _unmapped:
    raise RuntimeError(f"MessageKind without HTTP status: {sorted(k.name for k in _unmapped)}")


def error_body(code: str, message) -> dict:
    return {'ok': False, 'error': {'code': code, 'message': message}}


def render(result: Result, serializer_class=None, *, created: bool = False) -> Response:
    if not result.is_ok:
        error = result.error
        return Response(error_body(error.kind.value, error.text), status=HTTP_STATUS_BY_KIND[error.kind])

    value = result.value
    if isinstance(value, Message):
        data = value.to_dict()
    elif serializer_class is not None:
        data = serializer_class(value, many=isinstance(value, list)).data
    else:
        data = value
    code = status.HTTP_201_CREATED if created else HTTP_STATUS_BY_KIND[MessageKind.SUCCESS]
    return Response({'ok': True, 'data': data}, status=code)
