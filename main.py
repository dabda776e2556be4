"""
Example entry point: fetch the current agent and a known waypoint.
"""

import os
import sys

from dotenv import load_dotenv

from api import ApiClient, ApiError
from api.client import BASE_URL
from utils.logging import setup_logging

EXAMPLE_WAYPOINT = "X1-DF55-20250Z"


def build_client() -> ApiClient:
    """Prefer the saved config, fall back to the AGENT_TOKEN environment variable."""
    base_url = os.getenv("SPACETRADERS_API_URL", BASE_URL)
    try:
        return ApiClient.from_config(base_url=base_url)
    except ApiError:
        return ApiClient.from_bootstrap_token(base_url=base_url)


def main() -> int:
    load_dotenv()
    logger = setup_logging(os.getenv("LOG_LEVEL", "INFO"))

    try:
        client = build_client()
    except ApiError as e:
        logger.error("%s", e)
        logger.error("Please set AGENT_TOKEN in your .env file or register an agent first.")
        return 1

    try:
        print("Getting agent data:")
        print(client.get_agent_data())

        print("Getting location data:")
        print(client.get_waypoint_location(EXAMPLE_WAYPOINT))
    except ApiError as e:
        logger.error("%s", e)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
