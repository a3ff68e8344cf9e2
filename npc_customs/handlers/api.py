"""AWS Lambda handler for the Metadata and Image endpoints (API Gateway proxy)."""

import base64
import json
import logging

from ..services import create_npc_service

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = "Internal Server Error"


def handler(event, context):
    """
    API Gateway proxy handler.

    Routes:
        GET /Metadata?Id=<token id> -> JSON metadata document
        GET /Image?Id=<token id>    -> PNG (base64 body)

    Any failure is logged and returned as a plain 500.
    """
    path = (event.get("rawPath") or event.get("path") or "").rstrip("/")
    params = event.get("queryStringParameters") or {}
    token_id = params.get("Id")

    if path not in ("/Metadata", "/Image"):
        return {
            "statusCode": 404,
            "headers": {"Content-Type": "text/plain"},
            "body": "Not Found",
        }

    try:
        service = create_npc_service()

        if path == "/Metadata":
            metadata = service.build_metadata(token_id)
            return {
                "statusCode": 200,
                "headers": {"Content-Type": "application/json"},
                "body": json.dumps(metadata.to_dict()),
            }

        image_bytes = service.build_image(token_id)
        return {
            "statusCode": 200,
            "headers": {"Content-Type": "image/png"},
            "body": base64.b64encode(image_bytes).decode("ascii"),
            "isBase64Encoded": True,
        }

    except Exception:
        logger.exception(f"{path} failed for Id={token_id!r}")
        return {
            "statusCode": 500,
            "headers": {"Content-Type": "text/plain"},
            "body": INTERNAL_ERROR_BODY,
        }


# Local testing
if __name__ == "__main__":
    import sys

    if len(sys.argv) < 3:
        print("Usage: python -m npc_customs.handlers.api <Metadata|Image> <token_id> [out.png]")
        print()
        print("Example:")
        print("  python -m npc_customs.handlers.api Metadata 42")
        print("  python -m npc_customs.handlers.api Image 42 npc_42.png")
        sys.exit(1)

    logging.basicConfig(level=logging.INFO)

    event = {"path": f"/{sys.argv[1]}", "queryStringParameters": {"Id": sys.argv[2]}}
    result = handler(event, None)

    print(f"Status: {result['statusCode']}")
    if result.get("isBase64Encoded"):
        out_path = sys.argv[3] if len(sys.argv) > 3 else f"npc_{sys.argv[2]}.png"
        with open(out_path, "wb") as f:
            f.write(base64.b64decode(result["body"]))
        print(f"Saved: {out_path}")
    elif result["statusCode"] == 200:
        print(json.dumps(json.loads(result["body"]), indent=2))
    else:
        print(result["body"])
