from typing import Literal
from pydantic import BaseModel

class AnatomyImage(BaseModel):
    id: str
    name: str
    url: str
    view: Literal["front", "back"]

class Exercise(BaseModel):
    id: str
    name: str
    description: str
    difficulty: Literal["beginner", "intermediate", "advanced"]
    equipment: list[str]

class BodyPart(BaseModel):
    id: str
    name: str
    description: str
    muscles: list[str]
    exercises: list[Exercise]
