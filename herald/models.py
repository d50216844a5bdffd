"""
Herald — Pydantic models
Serializable summaries of registry state.
"""

from pydantic import BaseModel, Field


class EventSummary(BaseModel):
    name: str
    listeners: int = Field(0, ge=0)
    once_listeners: int = Field(0, ge=0, description="Listeners that fire on the next emit only")


class RegistrySnapshot(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "max_listeners": 10,
                    "events": [
                        {"name": "newListener", "listeners": 0, "once_listeners": 0},
                        {"name": "removeListener", "listeners": 0, "once_listeners": 0},
                        {"name": "message", "listeners": 2, "once_listeners": 1},
                    ],
                }
            ]
        }
    }

    max_listeners: int = Field(..., ge=0, description="0 = uncapped")
    events: list[EventSummary] = Field(default_factory=list)

    @property
    def total_listeners(self) -> int:
        return sum(e.listeners for e in self.events)
