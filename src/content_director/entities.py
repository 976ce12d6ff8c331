"""Typed, immutable entities returned by a successful validation.

These models describe shape only. Field constraints (lengths, patterns, enums,
fixed collection sizes) live in ``content_director.schemas`` and are enforced
by the structural validator before a model is ever constructed.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ProductAnalysis(_Entity):
    """Director's read of the product."""

    name: str
    visual_description: str
    key_features_zh: str


class PromptData(_Entity):
    """One image prompt with its Chinese summary."""

    prompt_en: str
    summary_zh: str


class MarketingRoute(_Entity):
    """A creative direction with exactly three image prompts."""

    route_name: str
    headline_zh: str
    subhead_zh: str
    style_brief_zh: str
    target_audience_zh: Optional[str] = None
    visual_elements_zh: Optional[str] = None
    image_prompts: tuple[PromptData, ...]


class DirectorOutput(_Entity):
    product_analysis: ProductAnalysis
    marketing_routes: tuple[MarketingRoute, ...]


class ContentItem(_Entity):
    """One slide of a content plan."""

    id: str
    type: Literal["main_white", "main_lifestyle", "story_slide"]
    ratio: Literal["1:1", "9:16", "16:9"]
    title_zh: str
    copy_zh: str
    visual_prompt_en: str
    visual_summary_zh: str


class ContentPlan(_Entity):
    plan_name: str
    items: tuple[ContentItem, ...]
