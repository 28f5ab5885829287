from typing import Annotated
from pydantic import Field

TitleStr = Annotated[str, Field(max_length=100)]
DescriptionStr = Annotated[str, Field(max_length=500)]
AdviceBodyStr = Annotated[str, Field(max_length=2000)]

def required_text(v: str, field: str) -> str:
    v2 = v.strip()
    if not v2:
        raise ValueError(f"{field} cannot be blank")
    return v2
