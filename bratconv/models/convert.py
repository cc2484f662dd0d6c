from pydantic import BaseModel, Field


class DocumentIn(BaseModel):
    id: str = Field(..., min_length=1)
    ann: str
    txt: str
    test: bool | None = None  # None -> derived from the id prefix


class ConvertRequest(BaseModel):
    conf: str
    documents: list[DocumentIn]


class DocumentOut(BaseModel):
    id: str
    test: bool
    acharya: str
    standoff: str
    entity_count: int
    relation_count: int


class ConvertResponse(BaseModel):
    acharya: str
    documents: list[DocumentOut]
