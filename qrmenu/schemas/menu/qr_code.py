from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from .common import AbsoluteUrl, NonEmptyStr, PartialUpdate


# qr_code_url is derived by the service and deliberately absent from the inputs
class QRCodeCreate(BaseModel):
    name: NonEmptyStr
    menu_url: AbsoluteUrl
    is_active: bool = True


class QRCodeUpdate(PartialUpdate):
    name: Optional[NonEmptyStr] = None
    menu_url: Optional[AbsoluteUrl] = None
    is_active: Optional[bool] = None


class QRCodeRead(BaseModel):
    id: int
    name: str
    menu_url: str
    qr_code_url: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
