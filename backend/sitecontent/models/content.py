# sitecontent/models/content.py
"""
Typed shapes of the documents kept in the key-value store.

``pageContent`` and ``galleryImages`` are free-form JSON written by the
admin panel; the TypedDicts below name the fields the site knows about.
Every field is optional except where marked Required, and unknown
fields are preserved as-is.
"""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Required, TypedDict

PAGE_CONTENT_KEY = "pageContent"
GALLERY_IMAGES_KEY = "galleryImages"
HISTORY_INDEX_KEY = "content_history"
HISTORY_KEY_PREFIX = "history:"
USER_KEY_PREFIX = "user:"


class AppImage(TypedDict, total=False):
    url: Required[str]
    alt: str


class Service(TypedDict, total=False):
    _key: str
    title: str
    description: str
    customIcon: AppImage
    published: bool
    hasPage: bool
    slug: str
    pageContent: str


class PageContent(TypedDict, total=False):
    _id: str
    companyName: str
    logo: AppImage
    heroTitle: str
    heroTagline: str
    heroButtonText: str
    heroImage: AppImage
    servicesTitle: str
    servicesSubtitle: str
    servicesList: List[Service]
    beforeImage: AppImage
    afterImage: AppImage
    ogImage: AppImage
    contactMapEnabled: bool
    contactMapUrl: str
    facebookUrl: str
    footerCopyrightText: str


class GalleryImage(TypedDict, total=False):
    _id: str
    image: AppImage
    published: bool
    category: str


class HistorySnapshot(TypedDict):
    pageContent: PageContent
    galleryImages: List[GalleryImage]


class User(TypedDict):
    username: str
    hashedPassword: str


class LiveContent(NamedTuple):
    """Current published state; either part is None when never written."""

    page_content: Optional[PageContent]
    gallery_images: Optional[List[GalleryImage]]

    @property
    def is_initialized(self) -> bool:
        return bool(self.page_content) and self.gallery_images is not None


# Field groups used by the invariants in domain/invariants/content.py
PAGE_IMAGE_FIELDS = ("logo", "heroImage", "beforeImage", "afterImage", "ogImage")
PAGE_BOOL_FIELDS = ("contactMapEnabled",)
SERVICE_BOOL_FIELDS = ("published", "hasPage")
GALLERY_BOOL_FIELDS = ("published",)
