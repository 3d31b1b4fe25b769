"""
Basic Usage Examples

Calls a few endpoints and branches on the returned result type.
Set NEUTRINO_USER_ID and NEUTRINO_API_KEY before running.
"""

import os

from neutrino_api import NeutrinoAPIClient, JsonResult, ErrorResult, EU_GEOFENCE_ENDPOINT


def reverse_geocode(client):
    """GET endpoint returning JSON."""
    print("\n=== geocode-reverse ===")

    outcome = client.call("geocode-reverse", {
        "latitude": "-41.2775847",
        "longitude": "174.7775229",
    })

    if isinstance(outcome, JsonResult):
        print(f"Address: {outcome.data.get('address')}")
    else:
        print(f"Failed: {outcome.error_name} ({outcome.error_code}): {outcome.error_message}")


def validate_phone(client):
    """Remote validation errors come back as ErrorResult with the API's code."""
    print("\n=== phone-validate ===")

    outcome = client.call("phone-validate", {"number": "not-a-number"})

    if isinstance(outcome, ErrorResult):
        print(f"HTTP {outcome.http_status}: {outcome.error_message}")
    else:
        print(f"Valid: {outcome.data.get('valid')}")


def main():
    user_id = os.environ["NEUTRINO_USER_ID"]
    api_key = os.environ["NEUTRINO_API_KEY"]

    with NeutrinoAPIClient(user_id, api_key) as client:
        reverse_geocode(client)
        validate_phone(client)

    # Same credentials, EU-only data processing
    with NeutrinoAPIClient(user_id, api_key, base_url=EU_GEOFENCE_ENDPOINT) as client:
        reverse_geocode(client)


if __name__ == "__main__":
    main()
