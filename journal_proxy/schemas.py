from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field

class BulkRequest(BaseModel):
    # Shape is checked by the fetch pipeline so any bad body gets a 400, not a 422
    urls: Any = Field(None, description="Ordered list of URLs to fetch")
    delay: Any = Field(None, description="Pause between requests in milliseconds")

    @classmethod
    def from_body(cls, body: Any) -> "BulkRequest":
        """Accept any JSON body; anything but an object carries no URLs."""
        if not isinstance(body, dict):
            return cls()
        return cls(urls=body.get("urls"), delay=body.get("delay"))

class FetchOutcomeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    index: int
    success: bool
    status: Optional[int] = None
    status_text: Optional[str] = Field(None, alias="statusText")
    html: Optional[str] = Field(None, description="Response body, null when the fetch failed")
    error: Optional[str] = None

class CheckOutcomeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    index: int
    success: bool = Field(description="A response was received")
    accessible: bool = Field(description="The response status was 2xx")
    status: Optional[int] = None
    status_text: Optional[str] = Field(None, alias="statusText")
    error: Optional[str] = None

class BulkProxyResponse(BaseModel):
    total: int
    success: int
    failed: int
    results: List[FetchOutcomeOut]

class BulkCheckResponse(BaseModel):
    total: int
    accessible: int
    inaccessible: int
    results: List[CheckOutcomeOut]

class WebsiteCheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    status: Optional[int] = None
    status_text: Optional[str] = Field(None, alias="statusText")
    accessible: bool
    error: Optional[str] = None
    timestamp: str
