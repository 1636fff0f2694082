from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class RemoteRepository:
    id: str
    layout: str # only "default" (maven2) is fetchable
    url: str
