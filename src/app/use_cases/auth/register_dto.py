"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- RegisterResponse: Output from use case (structured result)
"""

from pydantic import BaseModel


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    name: str
    email: str
    password: str


class RegisterResponse(BaseModel):
    """Register response - the created account"""

    user_id: str
