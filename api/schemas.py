from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.filters import ALL


class FilterCriteriaModel(BaseModel):
    query: str = ""
    status: str = ALL
    priority: str = ALL
    team: str = ALL
    owner: str = ALL


class RecordModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    goals: str = ""
    tasks: str = ""
    team: str = ""
    priority: str = ""
    owner: str = ""
    status: str = ""
    eta: str = ""
    completion_date: str = Field(default="", alias="completionDate")
    links: str = ""
    notes: str = ""


class SummaryCountsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    in_progress: int = Field(default=0, alias="inProgress")
    ongoing: int = 0
    to_be_picked: int = Field(default=0, alias="toBePicked")
    completed: int = 0


class ErrorModel(BaseModel):
    error: str
