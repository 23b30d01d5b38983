"""Schemas for build artifacts consumed at startup."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_load, validates

FEATURE_IMAGE_ALIASES = ("featureImagePath", "feature_image")


class ContentEntrySchema(Schema):
    """One blog frontmatter record from ``blog/data.json``."""

    class Meta:
        # The build writes extra frontmatter (dates, authors) we do not use.
        unknown = EXCLUDE

    slug = fields.String(required=True)
    title = fields.String(load_default="", allow_none=True)
    excerpt = fields.String(load_default="", allow_none=True)
    feature_image = fields.String(data_key="featureImage", load_default="", allow_none=True)

    @validates("slug")
    def _validate_slug(self, value: str, **kwargs: Any) -> None:
        if not value.strip():
            raise ValidationError("Slug must not be blank.")

    @pre_load
    def _apply_aliases(self, data: Any, **kwargs: Any) -> Any:
        if not isinstance(data, dict) or "featureImage" in data:
            return data
        for alias in FEATURE_IMAGE_ALIASES:
            if alias in data:
                data = dict(data)
                data["featureImage"] = data.pop(alias)
                break
        return data
