from typing import Any, Dict

from sitecontent.models.defaults import default_gallery_images, default_page_content
from sitecontent.services.content_repository import ContentRepository


def get_public_content(*, repository: ContentRepository) -> Dict[str, Any]:
    """
    Live content for the public site.

    Falls back to the built-in defaults for any document that has never
    been saved, so a fresh store still renders a site and loads the admin
    panel.
    """
    current = repository.get_live_content()

    page_content = current.page_content
    if not page_content:
        page_content = default_page_content()

    gallery_images = current.gallery_images
    if gallery_images is None:
        gallery_images = default_gallery_images()

    return {
        "pageContent": page_content,
        "galleryImages": gallery_images,
    }
