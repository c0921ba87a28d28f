from stylist_common.tools.fallback_data import (
    default_style_suggestion,
    generate_mock_images,
    mock_image_pool,
)
from stylist_common.tools.json_recovery import (
    extract_style_fields,
    greedy_span,
    recover_json_array,
    recover_json_object,
    recover_style_suggestion,
)
from stylist_common.tools.prompt_builders import (
    build_edit_prompt,
    build_image_block,
    build_image_search_prompt,
    build_keyword_input,
    build_style_messages,
    resolve_media_type,
)
from stylist_common.tools.style_normalizer import normalize_style_suggestion

__all__ = [
    "build_edit_prompt",
    "build_image_block",
    "build_image_search_prompt",
    "build_keyword_input",
    "build_style_messages",
    "default_style_suggestion",
    "extract_style_fields",
    "generate_mock_images",
    "greedy_span",
    "mock_image_pool",
    "normalize_style_suggestion",
    "recover_json_array",
    "recover_json_object",
    "recover_style_suggestion",
    "resolve_media_type",
]
