from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    entity: str
    entity_id: int

    @property
    def message(self) -> str:
        return f"{self.entity} not found"


@dataclass(frozen=True)
class Invalid:
    field: str
    message: str
