#!/usr/bin/env python3
"""Example usage of the Kinesis logging handler."""

import logging
import os
import sys
from datetime import datetime

# Add the python-logger to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'python-logger'))

from kinesis_logging import KinesisConfig, KinesisHandlerBuilder


def build_handler():
    """Build a handler for the user-events stream."""
    return (
        KinesisHandlerBuilder(os.getenv("KINESIS_STREAM", "user-events"))
        .config(KinesisConfig(region=os.getenv("AWS_REGION", "")))
        .levels([logging.ERROR, logging.WARNING, logging.INFO])
        .ignore("password")
        .field_filter("card_number", lambda v: "****" + str(v)[-4:])
        .build()
    )


def log_user_events(logger):
    """Example of logging user events."""
    # Example 1: partition key falls back to the message
    logger.info(
        "page_view",
        extra={
            "user_id": "user_12345",
            "page_url": "/products/laptop",
            "timestamp": datetime.utcnow(),
        },
    )

    # Example 2: explicit partition key
    logger.warning(
        "checkout_retry",
        extra={"user_id": "user_67890", "partition_key": "user_67890", "attempt": 2},
    )

    # Example 3: another stream, sensitive fields ignored or masked
    logger.error(
        "payment_failed",
        extra={
            "stream_name": "payment-errors",
            "user_id": "user_54321",
            "password": "hunter2",
            "card_number": "4111111111111111",
            "error": ValueError("card declined"),
        },
    )

    print("User events logged successfully")


def main():
    """Main function to run examples."""
    print("Running Kinesis logging examples...")

    try:
        handler = build_handler()
        logger = logging.getLogger("example")
        logger.setLevel(logging.INFO)
        logger.addHandler(handler)
        log_user_events(logger)
    except Exception as e:
        print(f"Error running examples: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
