"""AWS Lambda handler for blueprint generation."""

import json

from ..app import build_service
from ..errors import BlueprintError
from ..models import GenerationRequest
from ..models.sections import STYLES, default_sections
from ..services.credentials import UserCredential

STATUS_BY_CATEGORY = {
    "empty_input": 400,
    "missing_credential": 401,
    "provider_auth": 403,
    "rate_limited": 429,
    "generation_failed": 502,
}


def _response(status_code: int, body: dict) -> dict:
    return {"statusCode": status_code, "body": json.dumps(body, ensure_ascii=False)}


def handler(event, context, service=None):
    """
    AWS Lambda handler - triggered by SQS or HTTP.

    Input payload:
    {
        "action": "generate",            # "probe" | "connect" | "disconnect" | "generate"
        "brandName": "Test Cafe",
        "freeText": "specialty coffee shop",
        "selectedSections": [{"id": "hero", "displayName": "Hero", "enabled": true}],
        "primaryColor": "#112233",
        "style": "미니멀/모던",
        "industryProfile": "visual"
    }

    Output: {"blueprint": {...}} or {"error": ..., "category": ..., "message": ...}
    """
    # Handle SQS event format
    if "Records" in event:
        body = json.loads(event["Records"][0]["body"])
    else:
        body = json.loads(event.get("body") or "{}")

    action = body.get("action", "generate")

    try:
        service = service or build_service()

        if action == "probe":
            return _response(200, {"connected": service.probe()})

        if action in ("connect", "disconnect"):
            if not isinstance(service.source, UserCredential):
                return _response(400, {"error": f"'{action}' is only available in user credential mode"})
            if action == "disconnect":
                service.source.clear()
                return _response(200, {"connected": False})
            connected = service.source.submit(body.get("apiKey", ""))
            return _response(200 if connected else 401, {"connected": connected})

        if action != "generate":
            return _response(400, {"error": f"Unknown action: {action}"})

        if body.get("selectedSections") is None:
            body["selectedSections"] = [
                {"id": s.id, "displayName": s.display_name, "enabled": s.enabled}
                for s in default_sections()
            ]
        if not body.get("style"):
            body["style"] = STYLES[0]
        try:
            request = GenerationRequest.from_dict(body)
        except (KeyError, ValueError) as e:
            return _response(400, {"error": f"Invalid request: {e}"})

        print(f"Generating blueprint for: {request.brand_name or '(unnamed brand)'}", flush=True)
        blueprint = service.generate(request)
        print(f"Generated {len(blueprint.sections)} sections", flush=True)

        return _response(200, {"blueprint": blueprint.to_dict()})

    except BlueprintError as e:
        print(f"Blueprint error ({e.category}): {e}", flush=True)
        return _response(
            STATUS_BY_CATEGORY.get(e.category, 500),
            {"error": e.category, "category": e.category, "message": e.user_message},
        )
    except Exception as e:
        print(f"ERROR: {e}", flush=True)
        return _response(500, {"error": str(e)})


# Local testing
if __name__ == "__main__":
    import sys

    from ..models import Attachment

    if len(sys.argv) < 3:
        print("Usage: python -m vibenav.handlers.worker <brand_name> <brand_data> [industry] [style] [color] [file]")
        print()
        print("Arguments:")
        print("  brand_name - Brand name, e.g. 'Test Cafe'")
        print("  brand_data - Free text about the brand")
        print("  industry   - general | visual (default: general)")
        print(f"  style      - One of {', '.join(STYLES)} (default: {STYLES[0]})")
        print("  color      - Primary color hex (default: #6366f1)")
        print("  file       - Optional path to a brochure/menu/image to attach")
        print()
        print("Example:")
        print('  python -m vibenav.handlers.worker "Test Cafe" "specialty coffee shop" visual "미니멀/모던" "#112233"')
        sys.exit(1)

    test_input = {
        "action": "generate",
        "brandName": sys.argv[1],
        "freeText": sys.argv[2],
        "industryProfile": sys.argv[3] if len(sys.argv) > 3 else "general",
        "style": sys.argv[4] if len(sys.argv) > 4 else STYLES[0],
        "primaryColor": sys.argv[5] if len(sys.argv) > 5 else "#6366f1",
    }
    if len(sys.argv) > 6:
        attachment = Attachment.from_file(sys.argv[6])
        test_input["attachedFile"] = {"mimeType": attachment.mime_type, "base64Data": attachment.base64_data}

    print("Running with input:")
    print(json.dumps({k: v for k, v in test_input.items() if k != "attachedFile"}, indent=2, ensure_ascii=False))
    print()

    result = handler({"body": json.dumps(test_input)}, None)
    print(f"\nResult ({result['statusCode']}):")
    print(json.dumps(json.loads(result["body"]), indent=2, ensure_ascii=False))
