import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from eventify.client import EventPublisher
from eventify.errors import ConfigurationError, PublishError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)

load_dotenv()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Publish a single event to EventifyPro.")
    parser.add_argument("type", help="Event type, e.g. OrderPosted")
    parser.add_argument("--data", default="{}", help="Event payload as a JSON object")
    parser.add_argument("--api-key", default=None, help="API key (defaults to EVENTIFY_PRO_API_KEY)")
    parser.add_argument("--base-uri", default=None, help="API base URI (defaults to EVENTIFY_PRO_BASE_URI)")
    parser.add_argument("--raise-errors", action="store_true", help="Fail with a traceback instead of a log line")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Publish one event from the command line.
    Args:
        argv (list): Arguments without the program name; defaults to sys.argv.
    Returns:
        int: 0 on success, 1 if publishing failed, 2 on bad input or configuration.
    """
    args = parse_args(argv)

    try:
        data = json.loads(args.data)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid --data JSON: {e}")
        return 2

    try:
        publisher = EventPublisher(
            api_key=args.api_key,
            raise_errors=args.raise_errors,
            base_uri=args.base_uri,
        )
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    logger.info(f"Publishing {args.type} event to {publisher.config.events_url}")
    try:
        published = publisher.publish(args.type, data)
    except PublishError as e:
        logger.error(f"Error publishing event: {e}")
        return 1

    return 0 if published else 1


if __name__ == "__main__":
    sys.exit(main())
