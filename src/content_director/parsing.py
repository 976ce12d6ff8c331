# Raw model reply -> JSON document
# Model replies often wrap the JSON in prose or markdown fences

import json
from typing import Any


def extract_json_from_response(response: str) -> str:
    """Extract JSON from response text."""
    response = response.strip()

    if response.startswith("{") and response.endswith("}"):
        return response
    if response.startswith("[") and response.endswith("]"):
        return response

    if "```json" in response:
        start = response.find("```json") + 7
        end = response.find("```", start)
        if end > start:
            return response[start:end].strip()

    if "```" in response:
        start = response.find("```") + 3
        end = response.find("```", start)
        if end > start:
            return response[start:end].strip()

    first_brace = response.find("{")
    last_brace = response.rfind("}")
    if first_brace != -1 and last_brace > first_brace:
        return response[first_brace : last_brace + 1]

    return response


def load_model_json(response: str) -> Any:
    """Extract and decode the JSON document in a model reply.

    Raises:
        json.JSONDecodeError: If no decodable JSON is found
    """
    return json.loads(extract_json_from_response(response))
