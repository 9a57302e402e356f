"""
Polling of the events-log plugin.

The plugin answers with one JSON event per line rather than a JSON document,
so the body is read raw and decoded line by line.
"""

from __future__ import annotations

import io
import logging
from typing import Dict, Optional, Union

from pydantic import ValidationError

from gerrit_rest.core.client import GerritClient, remove_magic_prefix_line
from gerrit_rest.core.errors import GerritParseError
from gerrit_rest.core.observability import log_event
from gerrit_rest.models.events import EventInfo, EventsLogOptions, EventsLogResult

EVENTS_LOG_PATH = "plugins/events-log/events/"
WINDOW_FORMAT = "%Y-%m-%d %H:%M:%S"

log = logging.getLogger("gerrit_rest.events")


def parse_event(line: Union[str, bytes]) -> EventInfo:
    """Decode a single stream event; raises pydantic.ValidationError."""
    return EventInfo.model_validate_json(line)


def _window_params(options: EventsLogOptions) -> Dict[str, str]:
    params: Dict[str, str] = {}
    if options.since is not None:
        params["t1"] = options.since.strftime(WINDOW_FORMAT)
    if options.until is not None:
        params["t2"] = options.until.strftime(WINDOW_FORMAT)
    return params


async def get_events(
    client: GerritClient, options: Optional[EventsLogOptions] = None
) -> EventsLogResult:
    """
    Events recorded by the events-log plugin, oldest first.
    - since/until bound the window (``t1``/``t2``); either may be omitted
    - an undecodable line raises GerritParseError, unless
      ``ignore_event_errors`` is set: then it is kept in ``failed_lines``
    """
    options = options or EventsLogOptions()
    sink = io.BytesIO()
    response = await client.call(
        "GET", EVENTS_LOG_PATH, options=_window_params(options), result=sink
    )

    result = EventsLogResult()
    body = remove_magic_prefix_line(sink.getvalue())
    for number, raw in enumerate(body.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            result.events.append(parse_event(line))
        except ValidationError as exc:
            text = line.decode("utf-8", errors="replace")
            if not options.ignore_event_errors:
                raise GerritParseError(
                    f"Undecodable event on line {number} of {response.url}: {exc}",
                    response=response,
                ) from exc
            result.failed_lines.append(text)
            log_event("events.skipped_line", logger=log, line=number)
    return result
