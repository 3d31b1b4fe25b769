"""
File Download Examples

Endpoints such as qr-code and html-render return a file; the body is
streamed to output_file_path. Logging is enabled to show the per-call
log records.
"""

import os
import tempfile

from neutrino_api import NeutrinoAPIClient, TransportConfig, FileResult, ErrorResult, LoggingConfig


def main():
    config = TransportConfig.create(
        os.environ["NEUTRINO_USER_ID"],
        os.environ["NEUTRINO_API_KEY"],
        logging=LoggingConfig.create(level="INFO", format="colored"),
    )

    with NeutrinoAPIClient(config=config) as client, tempfile.TemporaryDirectory() as tmpdir:
        output_path = os.path.join(tmpdir, "qr.png")

        outcome = client.call("qr-code", {"content": "https://www.neutrinoapi.com"},
                              output_file_path=output_path)

        if isinstance(outcome, FileResult):
            print(f"Saved {outcome.content_type} to {outcome.file_path} "
                  f"({outcome.file_path.stat().st_size} bytes)")
        elif isinstance(outcome, ErrorResult):
            print(f"Failed: {outcome.error_name}: {outcome.error_message}")


if __name__ == "__main__":
    main()
