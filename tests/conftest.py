# Shared payload builders for validator tests
# Each fixture returns a fresh, fully valid payload that tests mutate freely

import pytest

PROMPT_EN = "Studio shot of a brass desk lamp on a walnut desk, soft window light, 85mm lens"

ITEM_SLOTS = [
    ("white", "main_white", "1:1"),
    ("lifestyle", "main_lifestyle", "1:1"),
    ("hook", "story_slide", "9:16"),
    ("problem", "story_slide", "9:16"),
    ("solution", "story_slide", "9:16"),
    ("features", "story_slide", "9:16"),
    ("trust", "story_slide", "16:9"),
    ("cta", "story_slide", "16:9"),
]


def make_product_analysis() -> dict:
    return {
        "name": "Aurora Lamp",
        "visual_description": "A brushed brass desk lamp with a linen shade",
        "key_features_zh": "可調光三段色溫，USB-C 快充設計",
    }


def make_prompt_data() -> dict:
    return {
        "prompt_en": PROMPT_EN,
        "summary_zh": "胡桃木桌上的黃銅檯燈特寫",
    }


def make_marketing_route(name: str = "Warm Minimal") -> dict:
    return {
        "route_name": name,
        "headline_zh": "讓光陪你安靜工作",
        "subhead_zh": "黃銅與亞麻，為書桌帶來溫暖的光",
        "style_brief_zh": "暖色調極簡風格，大量留白，自然光線與木質紋理為主要視覺元素",
        "image_prompts": [make_prompt_data() for _ in range(3)],
    }


def make_content_item(index: int = 1, slot: str = "white", item_type: str = "main_white", ratio: str = "1:1") -> dict:
    return {
        "id": f"img_{index}_{slot}",
        "type": item_type,
        "ratio": ratio,
        "title_zh": "黃銅檯燈主圖展示",
        "copy_zh": "以黃銅與亞麻打造的桌燈，三段色溫隨心切換，陪伴每一個專注的夜晚。",
        "visual_prompt_en": PROMPT_EN,
        "visual_summary_zh": "白色背景上的黃銅檯燈正面特寫",
    }


@pytest.fixture
def product_analysis() -> dict:
    return make_product_analysis()


@pytest.fixture
def marketing_route() -> dict:
    return make_marketing_route()


@pytest.fixture
def director_output() -> dict:
    return {
        "product_analysis": make_product_analysis(),
        "marketing_routes": [make_marketing_route(n) for n in ("Warm Minimal", "Night Owl", "Gift Box")],
    }


@pytest.fixture
def content_item() -> dict:
    return make_content_item()


@pytest.fixture
def content_plan() -> dict:
    return {
        "plan_name": "Aurora Lamp launch carousel",
        "items": [
            make_content_item(i + 1, slot, item_type, ratio)
            for i, (slot, item_type, ratio) in enumerate(ITEM_SLOTS)
        ],
    }


@pytest.fixture(autouse=True)
def english_locale(monkeypatch):
    """Pin the default message locale regardless of the caller's environment"""
    from content_director.config import settings

    monkeypatch.setattr(settings, "locale", "en")
