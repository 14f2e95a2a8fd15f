"""
Request and response schemas for the x01 Oracle API.

Prices are plain floats keyed by ticker symbol; a missing price is None.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

PriceMap = Dict[str, Optional[float]]


class TranslationResult(BaseModel):
    translated: str = Field(..., description="Text translated to English")
    detected: str = Field("unknown", description="Detected source language code")


class AskRequest(BaseModel):
    query: str = Field(..., description="Free text question in any language")
    current: Optional[str] = Field(None, description="Symbol currently selected in the dropdown")


class SelectRequest(BaseModel):
    symbol: str = Field(..., description="Watchlist symbol, e.g., SOL")


class Quote(BaseModel):
    symbol: str
    price: Optional[float]
    price_text: str
    status: str
    updated_at: Optional[datetime] = None


class AskResponse(BaseModel):
    query: str
    translated: str
    detected: str
    lang_info: str
    quote: Quote


class PricesResponse(BaseModel):
    watchlist: List[str]
    prices: PriceMap
    updated_at: Optional[datetime] = None
