"""Slack incoming webhook payload models."""

from typing import Literal

from pydantic import BaseModel, Field

from ....domain.value_objects import BlockKind, MessageBlock


class SlackText(BaseModel):
    """Block Kit text object."""

    type: Literal["plain_text", "mrkdwn"]
    text: str
    emoji: bool | None = Field(default=None, description="Only valid on plain_text objects")


class SlackBlock(BaseModel):
    """Block Kit layout block (header, divider or section)."""

    type: Literal["header", "divider", "section"]
    text: SlackText | None = None

    @classmethod
    def from_message_block(cls, block: MessageBlock) -> "SlackBlock":
        """Convert a domain message block to its Block Kit form."""
        match block.kind:
            case BlockKind.HEADER:
                return cls(type="header", text=SlackText(type="plain_text", text=block.text, emoji=True))
            case BlockKind.DIVIDER:
                return cls(type="divider")
            case BlockKind.SECTION:
                return cls(type="section", text=SlackText(type="mrkdwn", text=block.text))


class SlackMessage(BaseModel):
    """Webhook request body."""

    blocks: list[SlackBlock]

    def to_payload(self) -> dict:
        """Serialize to the JSON body, omitting unset optional fields."""
        return self.model_dump(exclude_none=True)
