"""User-facing message catalog for validation failures.

Every message a violation or field check can carry is looked up here by id and
rendered with ``str.format``. Two locales are shipped: ``en`` (default) and
``zh-TW``, the language the upstream director and content-plan prompts use.
"""

from typing import Any

DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES = ("en", "zh-TW")

MESSAGES: dict[str, dict[str, str]] = {
    # ===== Generic constraint messages =====
    "required": {
        "en": "Required",
        "zh-TW": "必填欄位",
    },
    "invalid_type": {
        "en": "Expected {expected}, received {received}",
        "zh-TW": "預期型別為 {expected}，實際為 {received}",
    },
    "too_short": {
        "en": "String must contain at least {min_len} character(s)",
        "zh-TW": "字串至少需要 {min_len} 個字元",
    },
    "too_long": {
        "en": "String must contain at most {max_len} character(s)",
        "zh-TW": "字串不能超過 {max_len} 個字元",
    },
    "invalid_pattern": {
        "en": "Invalid",
        "zh-TW": "格式不正確",
    },
    "invalid_enum": {
        "en": "Invalid enum value. Expected {expected}, received '{received}'",
        "zh-TW": "無效的選項，預期 {expected}，實際為 '{received}'",
    },
    "wrong_length": {
        "en": "Array must contain exactly {expected} element(s)",
        "zh-TW": "陣列必須包含恰好 {expected} 個元素",
    },
    "below_minimum": {
        "en": "Number must be greater than or equal to {minimum}",
        "zh-TW": "數值必須大於或等於 {minimum}",
    },
    "above_maximum": {
        "en": "Number must be less than or equal to {maximum}",
        "zh-TW": "數值必須小於或等於 {maximum}",
    },
    # ===== Field-specific messages =====
    "product_name_empty": {
        "en": "product name cannot be empty",
        "zh-TW": "產品名稱不能為空",
    },
    "visual_description_too_short": {
        "en": "visual description must be at least 10 characters",
        "zh-TW": "視覺描述至少需要 10 個字元",
    },
    "key_features_too_short": {
        "en": "key features must be at least 10 characters",
        "zh-TW": "核心賣點至少需要 10 個字元",
    },
    "prompt_too_short": {
        "en": "prompt must be at least 50 characters",
        "zh-TW": "提示詞至少需要 50 個字元",
    },
    "summary_too_short": {
        "en": "summary must be at least 10 characters",
        "zh-TW": "摘要至少需要 10 個字元",
    },
    "image_prompts_count": {
        "en": "must contain exactly 3 prompts",
        "zh-TW": "必須包含恰好 3 個提示詞",
    },
    "marketing_routes_count": {
        "en": "must contain exactly 3 marketing routes",
        "zh-TW": "必須包含恰好 3 條行銷路線",
    },
    "content_item_id_format": {
        "en": "ID format is invalid",
        "zh-TW": "ID 格式不正確",
    },
    "content_items_count": {
        "en": "must contain exactly 8 content items",
        "zh-TW": "必須包含恰好 8 個內容項目",
    },
    # ===== Report prefixes =====
    "director_output_failed": {
        "en": "API response format validation failed",
        "zh-TW": "API 回應格式驗證失敗",
    },
    "content_plan_failed": {
        "en": "content plan format validation failed",
        "zh-TW": "內容企劃格式驗證失敗",
    },
    # ===== Standalone input checks =====
    "product_name_too_long": {
        "en": "product name cannot exceed {limit} characters",
        "zh-TW": "產品名稱不能超過 {limit} 個字元",
    },
    "brand_context_too_long": {
        "en": "brand context cannot exceed {limit} characters",
        "zh-TW": "品牌資訊不能超過 {limit} 個字元",
    },
    "ref_copy_too_long": {
        "en": "reference copy cannot exceed {limit} characters",
        "zh-TW": "參考文案不能超過 {limit} 個字元",
    },
}

# Separator placed between a report prefix and its violation lines
PREFIX_SEPARATORS = {
    "en": ":\n",
    "zh-TW": "：\n",
}


def check_locale(locale: str) -> str:
    """Return ``locale`` unchanged, or raise ValueError if it is not shipped."""
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale: {locale!r}. Must be one of {SUPPORTED_LOCALES}")
    return locale


def render(message_id: str, locale: str = DEFAULT_LOCALE, **params: Any) -> str:
    """Render catalog message ``message_id`` in ``locale``.

    Raises:
        KeyError: If the message id is not in the catalog.
        ValueError: If the locale is not supported.
    """
    templates = MESSAGES[message_id]
    return templates[check_locale(locale)].format(**params)
