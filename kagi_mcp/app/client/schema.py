from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


class KagiConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: Optional[float] = None  # seconds


# --- Request parameters ---


class _Params(BaseModel):
    def to_wire(self) -> Dict[str, Any]:
        """Drop unset fields; booleans travel as "true"/"false"."""
        wire = {}
        for key, value in self.model_dump(exclude_none=True).items():
            wire[key] = str(value).lower() if isinstance(value, bool) else value
        return wire


class SearchParams(_Params):
    q: str
    limit: Optional[int] = None


class SummarizeParams(_Params):
    url: Optional[str] = None
    text: Optional[str] = None
    engine: Optional[Literal["cecil", "agnes", "daphne", "muriel"]] = None
    summary_type: Optional[Literal["summary", "takeaway"]] = None
    target_language: Optional[str] = None
    cache: Optional[bool] = None


class FastGPTParams(_Params):
    query: str
    cache: Optional[bool] = None


class EnrichParams(_Params):
    q: str


# --- Responses ---


class _Record(BaseModel):
    model_config = ConfigDict(extra="allow")


class Meta(_Record):
    id: str
    node: str
    ms: Union[int, float]
    api_balance: Optional[float] = None


class Image(_Record):
    url: str
    height: int
    width: int


class SearchItem(_Record):
    t: int
    rank: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    snippet: Optional[str] = None
    published: Optional[str] = None
    thumbnail: Optional[Image] = None
    list: Optional[List[str]] = None


class SearchResponse(_Record):
    meta: Meta
    data: List[SearchItem]
    error: Optional[List[Dict[str, Any]]] = None


class SummarizationItem(_Record):
    output: str
    tokens: int


class SummarizationResponse(_Record):
    meta: Meta
    data: SummarizationItem
    error: Optional[List[Dict[str, Any]]] = None


class FastGPTReference(_Record):
    title: str
    snippet: str
    url: str


class FastGPTItem(_Record):
    output: str
    tokens: int
    references: List[FastGPTReference] = []


class FastGPTResponse(_Record):
    meta: Meta
    data: FastGPTItem
    error: Optional[List[Dict[str, Any]]] = None


class EnrichItem(_Record):
    t: int
    rank: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    snippet: Optional[str] = None
    published: Optional[str] = None


class EnrichResponse(_Record):
    meta: Meta
    data: List[EnrichItem]
    error: Optional[List[Dict[str, Any]]] = None
