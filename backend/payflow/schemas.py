from pydantic import BaseModel, ConfigDict, Field


class FlowResponse(BaseModel):
    mermaid: str
    notes: str


class ErrorResponse(BaseModel):
    error: str


class EnvStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_key: bool = Field(alias="hasKey")


class PresetResponse(BaseModel):
    id: str
    label: str
    text: str


class GlossaryTermResponse(BaseModel):
    term: str
    definition: str


class HealthResponse(BaseModel):
    status: str
    version: str
