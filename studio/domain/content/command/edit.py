"""Editor commands: create, update, duplicate and delete content locally."""

from datetime import UTC, datetime
from typing import Any

import logfire

from studio.domain.auth.model.identity import Viewer
from studio.domain.auth.model.role import Role
from studio.domain.content.model.content import (
    ContentBase,
    ContentType,
    dump_content_item,
    parse_as,
    parse_content_item,
)
from studio.domain.content.model.validation import validate_content
from studio.domain.content.model.value import generate_content_id
from studio.domain.content.service.content import ContentService
from studio.domain.shared.authorization.policy import requires_role
from studio.domain.shared.command import Command, CommandHandler, Result
from studio.domain.shared.error import InvalidStateError, NotFoundError


class CreateContent(Command):
    content_type: ContentType
    data: dict[str, Any]


class UpdateContent(Command):
    item: dict[str, Any]  # full item including `type` and `id`


class DuplicateContent(Command):
    content_type: ContentType
    id: str


class DeleteContent(Command):
    content_type: ContentType
    id: str


class ContentSaved(Result):
    id: str
    content_type: ContentType
    item: dict[str, Any]


class ContentDeleted(Result):
    id: str
    content_type: ContentType


def _saved(item: ContentBase) -> ContentSaved:
    return ContentSaved(id=item.id, content_type=item.content_type, item=dump_content_item(item))


class CreateContentHandler(CommandHandler[CreateContent, ContentSaved]):
    __auth__ = requires_role(Role.EDITOR)
    viewer: Viewer
    content_service: ContentService

    async def run(self, cmd: CreateContent) -> ContentSaved:
        with logfire.span("CreateContent"):
            now = datetime.now(UTC)
            item = parse_as(
                cmd.content_type,
                {
                    **cmd.data,
                    "id": generate_content_id(cmd.content_type),
                    "created_at": now,
                    "updated_at": now,
                    "created_by": self.viewer.viewer_id,
                },
            )
            validate_content(item)
            item = self.content_service.overlay(cmd.content_type).create_custom(item)
            logfire.info("Content created", content_type=cmd.content_type.value, id=item.id)
            return _saved(item)


class UpdateContentHandler(CommandHandler[UpdateContent, ContentSaved]):
    __auth__ = requires_role(Role.EDITOR)
    viewer: Viewer
    content_service: ContentService

    async def run(self, cmd: UpdateContent) -> ContentSaved:
        with logfire.span("UpdateContent"):
            item = parse_content_item(cmd.item)
            if self.content_service.get_item(item.content_type, item.id) is None:
                raise NotFoundError(f"{item.content_type.value} not found: {item.id}")
            validate_content(item)
            item = item.model_copy(update={"updated_at": datetime.now(UTC)})
            self.content_service.overlay(item.content_type).apply_edit(item)
            logfire.info("Content updated", content_type=item.content_type.value, id=item.id)
            return _saved(item)


class DuplicateContentHandler(CommandHandler[DuplicateContent, ContentSaved]):
    __auth__ = requires_role(Role.EDITOR)
    viewer: Viewer
    content_service: ContentService

    async def run(self, cmd: DuplicateContent) -> ContentSaved:
        with logfire.span("DuplicateContent"):
            item = self.content_service.duplicate(cmd.content_type, cmd.id)
            return _saved(item)


class DeleteContentHandler(CommandHandler[DeleteContent, ContentDeleted]):
    __auth__ = requires_role(Role.EDITOR)
    viewer: Viewer
    content_service: ContentService

    async def run(self, cmd: DeleteContent) -> ContentDeleted:
        with logfire.span("DeleteContent"):
            overlay = self.content_service.overlay(cmd.content_type)
            if not overlay.is_custom(cmd.id):
                if self.content_service.get_item(cmd.content_type, cmd.id) is not None:
                    raise InvalidStateError(
                        f"Built-in {cmd.content_type.value} cannot be deleted: {cmd.id}",
                        code="canonical_read_only",
                    )
                raise NotFoundError(f"Custom {cmd.content_type.value} not found: {cmd.id}")
            overlay.delete_custom(cmd.id)
            logfire.info("Content deleted", content_type=cmd.content_type.value, id=cmd.id)
            return ContentDeleted(id=cmd.id, content_type=cmd.content_type)
