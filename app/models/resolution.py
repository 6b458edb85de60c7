# app/models/resolution.py
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResolutionRequest(BaseModel):
    owner: str = ""
    repo: str = ""
    ref: Optional[str] = None
    token: Optional[str] = None

    @field_validator("owner", "repo", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return v or ""

    @field_validator("ref", "token", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        return v or None


class ResolutionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sha: str
    fq_ref: str = Field(..., alias="fqRef", description="e.g. refs/heads/<branch> or refs/tags/<tag>")
