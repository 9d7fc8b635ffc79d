from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

class EncodableBadge(BaseModel):
    badge_type: str
    attributes: Dict[str, Optional[str]]

class BadgesUpdateIn(BaseModel):
    # None (o campo ausente) = no tocar los badges; {} = borrarlos todos
    badges: Optional[Dict[str, Optional[Dict[str, Optional[str]]]]] = None

class BadgeWarnings(BaseModel):
    invalid_badges: List[str] = Field(default_factory=list)

class BadgesUpdateOut(BaseModel):
    ok: bool = True
    badges: List[EncodableBadge]
    warnings: BadgeWarnings

    model_config = ConfigDict(from_attributes=True)
