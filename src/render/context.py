"""Render-time settings passed explicitly to every component."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

PRESENT_LABELS: dict[str, str] = {
    "en": "present",
    "zh": "至今",
}


class RenderContext(BaseModel):
    """Where assets live and which language to label things in."""

    model_config = ConfigDict(frozen=True)

    asset_root: str = "/images"
    locale: str = "en"

    @property
    def present_label(self) -> str:
        return PRESENT_LABELS.get(self.locale, PRESENT_LABELS["en"])

    def asset_url(self, src_path: str) -> str:
        root = self.asset_root.rstrip("/")
        return f"{root}/{src_path.lstrip('/')}"


DEFAULT_CONTEXT = RenderContext()
