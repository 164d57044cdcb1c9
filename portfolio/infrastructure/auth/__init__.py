# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .gate import RequestGate, auth_required, current_identity
from .token_codec import JwtTokenCodec

__all__ = ["JwtTokenCodec", "RequestGate", "auth_required", "current_identity"]
