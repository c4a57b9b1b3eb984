from typing import Iterable

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Read-only view of a stored alias -> URL mapping
    
    - from_attributes=True builds it straight from a URL model row
    - frozen=True makes it hashable, so result sets compare as sets
    """
    id: int
    alias: str
    url: str

    # Pydantic V2 style configuration
    model_config = ConfigDict(from_attributes=True, frozen=True)


def format_records(records: Iterable[Record]) -> str:
    """Render records as one inspection string.
    
    Example: "{id: 1, url: https://example.com, alias: ex1}, "
    Meant for logs and debugging; callers that need data should use the
    records themselves.
    """
    return "".join(
        f"{{id: {record.id}, url: {record.url}, alias: {record.alias}}}, "
        for record in records
    )
