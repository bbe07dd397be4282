from sitecontent.domain.exceptions import InvariantViolation
from sitecontent.models.content import (
    GALLERY_BOOL_FIELDS,
    PAGE_BOOL_FIELDS,
    PAGE_IMAGE_FIELDS,
    SERVICE_BOOL_FIELDS,
)


def assert_app_image(image, *, field):
    if not isinstance(image, dict):
        raise InvariantViolation(f"{field} must be an object.")

    # New items carry an empty url until an image is uploaded.
    if not isinstance(image.get("url"), str):
        raise InvariantViolation(f"{field}.url must be a string.")

    if "alt" in image and image["alt"] is not None and not isinstance(image["alt"], str):
        raise InvariantViolation(f"{field}.alt must be a string.")


def _assert_bools(doc, fields, *, prefix):
    for name in fields:
        if name in doc and not isinstance(doc[name], bool):
            raise InvariantViolation(f"{prefix}{name} must be a boolean.")


def assert_service(service, *, index):
    prefix = f"pageContent.servicesList[{index}]"
    if not isinstance(service, dict):
        raise InvariantViolation(f"{prefix} must be an object.")

    _assert_bools(service, SERVICE_BOOL_FIELDS, prefix=f"{prefix}.")

    if service.get("customIcon") is not None:
        assert_app_image(service["customIcon"], field=f"{prefix}.customIcon")


def assert_page_content(page_content):
    """
    Validates a full pageContent document.

    Rules:
    - must be a non-empty object (it replaces the live document wholesale)
    - known image fields must be images with a string url
    - servicesList, when present, is a list of service objects
    """
    if not page_content:
        raise InvariantViolation("Invalid payload. Missing pageContent.")

    if not isinstance(page_content, dict):
        raise InvariantViolation("pageContent must be an object.")

    for field in PAGE_IMAGE_FIELDS:
        if page_content.get(field) is not None:
            assert_app_image(page_content[field], field=f"pageContent.{field}")

    _assert_bools(page_content, PAGE_BOOL_FIELDS, prefix="pageContent.")

    services = page_content.get("servicesList")
    if services is not None:
        if not isinstance(services, list):
            raise InvariantViolation("pageContent.servicesList must be a list.")
        for index, service in enumerate(services):
            assert_service(service, index=index)


def assert_gallery_images(gallery_images):
    # An empty list is a valid gallery; a missing one is not.
    if gallery_images is None:
        raise InvariantViolation("Invalid payload. Missing galleryImages.")

    if not isinstance(gallery_images, list):
        raise InvariantViolation("galleryImages must be a list.")

    for index, item in enumerate(gallery_images):
        prefix = f"galleryImages[{index}]"
        if not isinstance(item, dict):
            raise InvariantViolation(f"{prefix} must be an object.")
        if item.get("image") is not None:
            assert_app_image(item["image"], field=f"{prefix}.image")
        _assert_bools(item, GALLERY_BOOL_FIELDS, prefix=f"{prefix}.")


def assert_history_timestamp(timestamp):
    if not timestamp:
        raise InvariantViolation("Timestamp is required.")

    if not isinstance(timestamp, str):
        raise InvariantViolation("Timestamp must be a string.")
