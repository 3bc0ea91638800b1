from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Document(BaseModel):
    """
    Base for everything stored in the JSON document.

    Attributes are snake_case in Python and camelCase on disk.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id(length: int = 10) -> str:
    """Short opaque identifier"""
    return uuid4().hex[:length]
