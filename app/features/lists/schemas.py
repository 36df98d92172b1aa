from uuid import UUID

from pydantic import Field

from app.common.schemas import CamelModel


class CreateListRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    template_version: str = Field(min_length=1, max_length=64)


class RenameListRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)


class ListResponse(CamelModel):
    id: UUID
    name: str
    template_version: str
    deprecated: bool
