from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CreditProgressOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    user_id: str
    bureau: str
    score: Optional[int] = None
    previous_score: Optional[int] = None
    items_removed: int
    disputes_active: int
    recorded_at: datetime
