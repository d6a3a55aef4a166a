"""Content id generation."""

import time
from collections.abc import Callable

from studio.domain.content.model.content import ContentType

ID_PREFIX: dict[ContentType, str] = {
    ContentType.PROJECT: "project",
    ContentType.BLOG_POST: "post",
    ContentType.GRADIENT: "custom",
}


class ContentIdFactory:
    """Issues `<prefix>-<epoch ms>` ids, strictly increasing per factory.

    Two ids requested within the same millisecond get consecutive values.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self, content_type: ContentType) -> str:
        stamp = max(int(self._clock() * 1000), self._last + 1)
        self._last = stamp
        return f"{ID_PREFIX[content_type]}-{stamp}"


generate_content_id = ContentIdFactory()
