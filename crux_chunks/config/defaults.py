"""crux_chunks.config.defaults
===========================

Central place for small, stable default values used across the crux_chunks
package. Environment driven settings live in ``crux_chunks.config.env``;
everything here is a plain constant.

This module intentionally avoids importing from other crux_chunks packages to
prevent circular dependencies.
"""

from __future__ import annotations

# ---- Provider ----
# Provider key attached to errors and log events raised while decoding chunks.
PROVIDER_NAME = "openrouter"

# ---- Reasoning details ----
# ``type`` tag of a reasoning detail whose ``data`` field carries the signature.
ENCRYPTED_REASONING_TYPE = "reasoning.encrypted"

# ---- Server-sent events framing ----
SSE_DATA_PREFIX = "data:"
SSE_DONE_SENTINEL = "[DONE]"
# Lines starting with a colon are SSE comments (OpenRouter keep-alives).
SSE_COMMENT_PREFIX = ":"

# ---- Logging ----
# Name of the shared base logger; module loggers are children of it.
LOGGER_NAME = "crux_chunks"
LOG_LEVEL_ENV = "CHUNKS_LOG_LEVEL"
LOG_JSON_ENV = "CHUNKS_LOG_JSON"
LOG_DECODE_ERRORS_ENV = "CHUNKS_LOG_DECODE_ERRORS"
