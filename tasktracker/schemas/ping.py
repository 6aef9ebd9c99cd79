from pydantic import BaseModel


class Ping(BaseModel):
    db_status: bool
    tasks_total: int
    memory_usage: str
