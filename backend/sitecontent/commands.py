import json

import click

from sitecontent.domain.exceptions import ValidationError
from sitecontent.domain.invariants.content import assert_gallery_images, assert_page_content
from sitecontent.models.defaults import default_gallery_images, default_page_content
from sitecontent.services.content_repository import ContentRepository
from sitecontent.store.client import get_store


def register_commands(app):
    @app.cli.command("seed-content")
    @click.argument("source", type=click.File("r", encoding="utf-8"), required=False)
    def seed_content(source):
        """Write pageContent and galleryImages to the store.

        SOURCE is a JSON file with ``pageContent`` and ``galleryImages`` keys;
        without it the built-in default content is used. No history entry
        is recorded.
        """
        if source is None:
            page_content = default_page_content()
            gallery_images = default_gallery_images()
        else:
            data = json.load(source)
            page_content = data.get("pageContent")
            gallery_images = data.get("galleryImages")

        try:
            assert_page_content(page_content)
            assert_gallery_images(gallery_images)
        except ValidationError as exc:
            raise click.ClickException(exc.message)

        ContentRepository(get_store()).set_live_content(page_content, gallery_images)

        click.echo("Page content seeded.")
        click.echo(f"Gallery images seeded ({len(gallery_images)} items).")
