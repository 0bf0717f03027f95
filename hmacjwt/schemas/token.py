from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class Header(BaseModel):
    model_config = ConfigDict(frozen=True)

    alg: str
    typ: str


class ParsedToken(BaseModel):
    """Syntactically decoded token. Nothing here has been authenticated."""

    model_config = ConfigDict(frozen=True)

    header: Dict[str, Any]
    payload: Dict[str, Any]
    signature: str
