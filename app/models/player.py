from pydantic import BaseModel, Field

from app.models.pick import Pick


class Player(BaseModel):
    """Participante del pool con sus picks"""

    id: str
    name: str

    picks: list[Pick] = Field(default_factory=list)

    class Config:
        populate_by_name = True
