from __future__ import annotations


class ResolutionError(Exception):
    """Base class for failures of the query -> audio URL pipeline."""

    stage = "unknown"


class NoMatchFound(ResolutionError):
    """The search returned nothing usable for the query."""

    stage = "search"


class ExtractionError(ResolutionError):
    """Fetching the renditions of a video failed."""

    stage = "extraction"


class NoCompatibleAudioFormat(ExtractionError):
    """Renditions exist, but none is audio-bearing M4A."""


class MalformedEvent(Exception):
    """Inbound skill request is missing a field the router needs."""


class RelayError(Exception):
    status_code = 500


class MissingParameter(RelayError):
    status_code = 400


class UpstreamRelayFailure(RelayError):
    status_code = 502
