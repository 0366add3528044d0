"""Pydantic models for inbound client events."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from svg_snake.messages import ArrowPressed, Message, SizeUpdated, key_from_code


class KeyDownEvent(BaseModel):
    """A key-down reported by the browser."""

    type: Literal["keydown"]
    key_code: int

    def to_message(self) -> Message:
        return ArrowPressed(key_from_code(self.key_code))


class ResizeEvent(BaseModel):
    """A viewport resize reported by the browser."""

    type: Literal["resize"]
    width: int = Field(ge=0)
    height: int = Field(ge=0)

    def to_message(self) -> Message:
        return SizeUpdated(width=self.width, height=self.height)


ClientEvent = Annotated[
    Union[KeyDownEvent, ResizeEvent], Field(discriminator="type"),
]

client_event_adapter: TypeAdapter[ClientEvent] = TypeAdapter(ClientEvent)
