"""Pydantic configuration models with code-baked defaults.

Sparse JSON contract: defaults baked here, ``config.json`` only contains
overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class AddressConfig(BaseModel):
    """``address`` section."""

    model_config = {"frozen": True, "extra": "forbid"}

    street: str = ""
    city: str = ""
    state: str = ""
    zipcode: str = ""


class CardConfig(BaseModel):
    """``card`` section."""

    model_config = {"frozen": True, "extra": "forbid"}

    number: str = ""
    expiration: str = ""


class ApizzaConfig(BaseModel):
    """Root of the user's persisted configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: str = ""
    email: str = ""
    phone: str = ""
    address: AddressConfig = Field(default_factory=AddressConfig)
    card: CardConfig = Field(default_factory=CardConfig)
    service: Literal["Delivery", "Carryout"] = "Delivery"
    editor: str = ""
