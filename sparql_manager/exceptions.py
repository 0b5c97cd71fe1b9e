# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Exceptions raised synchronously to callers.

Transport failures never show up here: they are delivered on the
manager's "error" channel.
"""


class SparqlManagerError(RuntimeError):
    """Base class for all errors raised by this package."""


class ConfigurationError(SparqlManagerError):
    """
    Raised when a manager is missing a collaborator it needs, or was
    configured with an invalid mode.
    """


class TemplateFormatError(SparqlManagerError):
    """Raised when template input has a shape that cannot be resolved."""


class UnknownEventError(SparqlManagerError):
    """Raised when a registry is asked about an event it does not carry."""

    def __init__(self, event: str, known: list[str]):
        self.event = event
        self.known = known
        super().__init__(
            f"Unknown event '{event}' (known: {', '.join(known) or 'none'})"
        )
