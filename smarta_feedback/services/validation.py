import re
from typing import AbstractSet

from pydantic import ValidationError

from ..core.errors import InvalidField, MalformedInput, Unauthorized
from ..schemas.feedback import (
    AuthenticatedCaller,
    FeedbackKind,
    FeedbackRecord,
    FeedbackValue,
    SaveFeedbackRequest,
)

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


class FeedbackValidator:
    """
    Turns an untrusted request body and a gateway identity into a
    FeedbackRecord ready to be saved.

    Checks run in a fixed order and the first failing one raises:
    Unauthorized, MalformedInput, then InvalidField for kind, value and
    email. The validator holds no mutable state and performs no I/O, so
    one instance is shared by every request.
    """

    def __init__(self, valid_kinds: AbstractSet[str], valid_values: AbstractSet[str]):
        self.valid_kinds = valid_kinds
        self.valid_values = valid_values

    def validate(self, caller: AuthenticatedCaller, body: bytes) -> FeedbackRecord:
        if not caller.session_id or not caller.role:
            raise Unauthorized()

        request = self._parse(body)

        kind = (request.kind or "").lower()
        if kind not in self.valid_kinds:
            raise InvalidField("kind", kind)

        record = FeedbackRecord(
            session_id=caller.session_id,
            role=caller.role,
            kind=FeedbackKind(kind),
        )

        value = (request.value or "").strip().lower()
        if value:
            if value not in self.valid_values:
                raise InvalidField("value", value)
            record.value = FeedbackValue(value)

        if request.email:
            if not EMAIL_PATTERN.fullmatch(request.email):
                raise InvalidField("email", request.email)
            record.email = request.email

        if request.message:
            record.message = request.message

        return record

    def _parse(self, body: bytes) -> SaveFeedbackRequest:
        try:
            return SaveFeedbackRequest.model_validate_json(body)
        except ValidationError as e:
            raise MalformedInput(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)
