"""Parsing of Accept headers into media types ordered by quality."""

from __future__ import annotations

from dataclasses import dataclass

from restwire import tracing

_QUALITY_KEY = "q"


@dataclass(frozen=True)
class Mime:
    """A media type with its quality factor."""

    media: str
    quality: float


def _insert(mimes: list[Mime], entry: Mime) -> None:
    for index, each in enumerate(mimes):
        if entry.quality > each.quality:
            mimes.insert(index, entry)
            return
    mimes.append(entry)


def _parse_quality(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid syntax: {text!r}")
    return float(text)


def sorted_mimes(accept: str) -> list[Mime]:
    """Return the media types of ``accept`` ordered by descending quality.

    Entries of equal quality keep their order; entries whose quality cannot
    be parsed are dropped.
    """
    result: list[Mime] = []
    for each in accept.split(","):
        parts = each.strip(" ").split(";")
        media = parts[0]
        quality = 1.0
        if len(parts) > 1:
            key_value = parts[1].split("=")
            if len(key_value) == 2 and key_value[0].strip(" ") == _QUALITY_KEY:
                try:
                    quality = _parse_quality(key_value[1])
                except ValueError as exc:
                    logger = tracing._current_trace_logger()
                    if logger is not None:
                        logger.info("unable to parse quality in %s, %s", each, exc)
                    continue
        _insert(result, Mime(media, quality))
    return result