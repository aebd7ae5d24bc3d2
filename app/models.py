from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class TimeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    time: str = Field(examples=["3:20"])


class TimecodeTally(BaseModel):
    """Result of one pass of the timecode pipeline.

    `seconds` and `total` may hold NaN when a time string is malformed.
    """

    match: str
    entries: List[TimeEntry] = Field(default_factory=list)
    time_strings: List[str] = Field(default_factory=list)
    seconds: List[Number] = Field(default_factory=list)
    total: Number = 0


class TotalRequest(BaseModel):
    entries: List[TimeEntry]
    match: Optional[str] = Field(default=None, examples=["Flexbox"])


class TotalResponse(BaseModel):
    match: str
    matched: int
    time_strings: List[str]
    # null stands for a non-finite value
    seconds: List[Optional[Number]]
    total: Optional[Number]


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    site: str


class Profile(BaseModel):
    user: User
    profile_url: str
    avatar_url: str


class ProfileRequest(BaseModel):
    name: str = Field(examples=["David Martinez"])
    email: str = Field(examples=["davy.martinez@gmail.com"])
    site: str = Field(examples=["davymartinez.com"])


class GreetingResponse(BaseModel):
    greeting: str


class HealthResponse(BaseModel):
    ok: bool = True
