"""Request/response shapes shared by batch endpoints."""

from pydantic import BaseModel, Field


class BatchIds(BaseModel):
    ids: list[int] = Field(min_length=1)


class BatchDeleteResult(BaseModel):
    ok: int = 1
    n: int
    deleted_count: int


class BatchUpdateResult(BaseModel):
    ok: int = 1
    n: int
    modified_count: int
