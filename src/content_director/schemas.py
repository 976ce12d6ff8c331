# Entity schemas for director and content-plan responses
# Built once at import time from the schema nodes; never mutated

import re

from content_director.schema import ArrayConstraint, ObjectConstraint, StringConstraint

# ===== Cardinality =====

PROMPTS_PER_ROUTE = 3
ROUTES_PER_DIRECTOR = 3
ITEMS_PER_PLAN = 8

# ===== Content item enums =====

CONTENT_ITEM_SLOTS = ("white", "lifestyle", "hook", "problem", "solution", "features", "trust", "cta")
CONTENT_ITEM_ID_PATTERN = re.compile(rf"img_[0-9]+_({'|'.join(CONTENT_ITEM_SLOTS)})")
CONTENT_TYPES = ("main_white", "main_lifestyle", "story_slide")
CONTENT_RATIOS = ("1:1", "9:16", "16:9")


# ===== Director output =====

PRODUCT_ANALYSIS_SCHEMA = ObjectConstraint(
    fields={
        "name": StringConstraint(min_len=1, messages={"min": "product_name_empty"}),
        "visual_description": StringConstraint(
            min_len=10, messages={"min": "visual_description_too_short"}
        ),
        "key_features_zh": StringConstraint(min_len=10, messages={"min": "key_features_too_short"}),
    }
)

PROMPT_DATA_SCHEMA = ObjectConstraint(
    fields={
        "prompt_en": StringConstraint(min_len=50, messages={"min": "prompt_too_short"}),
        "summary_zh": StringConstraint(min_len=10, messages={"min": "summary_too_short"}),
    }
)

MARKETING_ROUTE_SCHEMA = ObjectConstraint(
    fields={
        "route_name": StringConstraint(min_len=2, max_len=20),
        "headline_zh": StringConstraint(min_len=5, max_len=30),
        "subhead_zh": StringConstraint(min_len=10, max_len=50),
        "style_brief_zh": StringConstraint(min_len=20),
        "target_audience_zh": StringConstraint(optional=True),
        "visual_elements_zh": StringConstraint(optional=True),
        "image_prompts": ArrayConstraint(
            PROMPT_DATA_SCHEMA,
            exact_length=PROMPTS_PER_ROUTE,
            messages={"length": "image_prompts_count"},
        ),
    }
)

DIRECTOR_OUTPUT_SCHEMA = ObjectConstraint(
    fields={
        "product_analysis": PRODUCT_ANALYSIS_SCHEMA,
        "marketing_routes": ArrayConstraint(
            MARKETING_ROUTE_SCHEMA,
            exact_length=ROUTES_PER_DIRECTOR,
            messages={"length": "marketing_routes_count"},
        ),
    }
)


# ===== Content plan =====

CONTENT_ITEM_SCHEMA = ObjectConstraint(
    fields={
        "id": StringConstraint(
            pattern=CONTENT_ITEM_ID_PATTERN, messages={"pattern": "content_item_id_format"}
        ),
        "type": StringConstraint(enum_values=CONTENT_TYPES),
        "ratio": StringConstraint(enum_values=CONTENT_RATIOS),
        "title_zh": StringConstraint(min_len=5, max_len=30),
        "copy_zh": StringConstraint(min_len=20, max_len=100),
        "visual_prompt_en": StringConstraint(min_len=50, max_len=500),
        "visual_summary_zh": StringConstraint(min_len=10, max_len=50),
    }
)

CONTENT_PLAN_SCHEMA = ObjectConstraint(
    fields={
        "plan_name": StringConstraint(min_len=10, max_len=50),
        "items": ArrayConstraint(
            CONTENT_ITEM_SCHEMA,
            exact_length=ITEMS_PER_PLAN,
            messages={"length": "content_items_count"},
        ),
    }
)
