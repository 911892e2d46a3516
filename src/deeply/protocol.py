# SPDX-License-Identifier: Apache-2.0
"""Wire format decoding for API responses."""

from __future__ import annotations

import json
from typing import Any

from deeply.errors import DecodeError


class JsonProtocol:
    """Decodes JSON response bodies into plain Python structures."""

    def process_response_data(self, raw_response_data: str | bytes) -> Any:
        """Decode a raw response body.

        Args:
            raw_response_data: Response body as returned by the transport.

        Returns:
            Decoded value (dicts, lists and scalars).

        Raises:
            DecodeError: If the body is not valid JSON.
        """
        try:
            return json.loads(raw_response_data)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
            raise DecodeError(f"Could not decode DeepL API response: {e}") from e
