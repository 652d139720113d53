"""Origin backend served behind every distribution in the pool."""

import json
import os


def handler(event, context):
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "message": "Hello World",
                "path": event.get("path"),
                "region": os.environ.get("AWS_REGION"),
            }
        ),
    }
