"""
Graph description models.

The JSON file a page loads looks like:

    {
      "header": {"title": "...", "description": "..."},
      "nodes": [{"id": "a", "group": 1, "targets": ["b"], "link": "https://..."}],
      "customNodes": {"x": ["a"]}
    }
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Header(BaseModel):
    title: str | None = None
    description: str | None = None

    model_config = ConfigDict(extra="ignore")


class Node(BaseModel):
    """A graph vertex. Layout positions live in the browser, never here."""
    id: str
    group: int
    targets: List[str] = Field(default_factory=list)
    link: str | None = None

    model_config = ConfigDict(extra="ignore")


class GraphDescription(BaseModel):
    header: Header = Field(default_factory=Header)
    nodes: List[Node]
    custom_nodes: Dict[str, List[str]] = Field(default_factory=dict, alias="customNodes")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("header", mode="before")
    @classmethod
    def _null_header(cls, value):
        return {} if value is None else value

    @field_validator("custom_nodes", mode="before")
    @classmethod
    def _null_catalog(cls, value):
        return {} if value is None else value
