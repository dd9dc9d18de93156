from typing import Dict, List

from pydantic import BaseModel


class ValidationProblem(BaseModel):
    """Problem details body (RFC 9457) listing the messages of each invalid field"""

    type: str = "https://tools.ietf.org/html/rfc9110#section-15.5.21"
    title: str = "One or more validation errors occurred."
    status: int = 422
    errors: Dict[str, List[str]]
