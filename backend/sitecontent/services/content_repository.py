from __future__ import annotations

from typing import List

from sitecontent.models.content import (
    GALLERY_IMAGES_KEY,
    PAGE_CONTENT_KEY,
    GalleryImage,
    LiveContent,
    PageContent,
)
from sitecontent.store.kv import KeyValueStore
from sitecontent.utils.transaction import transactional


class ContentRepository:
    """Reads and replaces the two live content documents."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get_live_content(self) -> LiveContent:
        page_content, gallery_images = self._store.get_many(
            [PAGE_CONTENT_KEY, GALLERY_IMAGES_KEY]
        )
        return LiveContent(page_content, gallery_images)

    def set_live_content(
        self,
        page_content: PageContent,
        gallery_images: List[GalleryImage],
    ) -> None:
        """Replace both documents wholesale in a single MULTI/EXEC."""
        with transactional(self._store) as tx:
            tx.set(PAGE_CONTENT_KEY, page_content)
            tx.set(GALLERY_IMAGES_KEY, gallery_images)
