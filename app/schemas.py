from pydantic import BaseModel, ConfigDict, Field
from typing import List


class VideoProvider(BaseModel):
    # Frontend consumers read the flag as "sandbox"
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    domain: str
    sandboxed: bool = Field(True, alias="sandbox")


class ProvidersResponse(BaseModel):
    providers: List[VideoProvider]


class EmbedResponse(BaseModel):
    embedUrl: str


class ErrorResponse(BaseModel):
    error: str
