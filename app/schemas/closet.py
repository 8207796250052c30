from pydantic import BaseModel
from typing import Dict, List, Optional


class VocabularyOut(BaseModel):
    categories: List[str]
    required_categories: List[str]
    optional_categories: List[str]
    warmth: List[str]
    formality: List[str]


class PhotoPresignIn(BaseModel):
    filename: Optional[str] = None
    content_type: str
    item_id: Optional[str] = None


class PhotoPresignOut(BaseModel):
    item_id: str
    key: str
    upload_url: str
    headers: Dict[str, str]


class PhotoResetIn(BaseModel):
    confirmation: str = ""


class PhotoResetOut(BaseModel):
    ok: bool
    deleted: int
    message: str
    warning: Optional[str] = None
