"""Build a runnable scenario (catalog, listeners, commands) from a JSON file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from streaming_simulator.application.commands.scenario_command import ScenarioCommand
from streaming_simulator.domain.accounts.entities import Listener
from streaming_simulator.domain.catalog.entities import Track, TrackCollection
from streaming_simulator.domain.shared.exceptions import EntityNotFoundError, ValidationError
from streaming_simulator.domain.shared.messages import ErrorMessages, LogTemplates
from streaming_simulator.infrastructure.catalog.in_memory_catalog import InMemoryCatalog
from streaming_simulator.infrastructure.scenario.models import ScenarioFile

logger = logging.getLogger(__name__)


@dataclass
class Scenario:
    """Everything a simulation run needs, resolved and validated."""

    catalog: InMemoryCatalog
    listeners: dict[str, Listener] = field(default_factory=dict)
    commands: list[ScenarioCommand] = field(default_factory=list)


def load_scenario(path: str | Path) -> Scenario:
    """Read and resolve a scenario file.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the document does not match the format.
        EntityNotFoundError: If a collection or merch item references
            something the catalog does not declare.
        ValidationError: If a username is declared twice.
    """
    path = Path(path)
    document = ScenarioFile.model_validate_json(path.read_text(encoding="utf-8"))
    scenario = build_scenario(document)
    logger.info(
        LogTemplates.SCENARIO_LOADED,
        path,
        len(document.tracks),
        len(document.collections),
        len(document.users),
    )
    return scenario


def build_scenario(document: ScenarioFile) -> Scenario:
    """Resolve name references of an already parsed document."""
    tracks = [item.to_domain() for item in document.tracks]
    by_name: dict[str, Track] = {}
    for track in tracks:
        by_name.setdefault(track.name, track)

    collections = []
    for item in document.collections:
        resolved = []
        for track_name in item.tracks:
            track = by_name.get(track_name)
            if track is None:
                raise EntityNotFoundError(
                    "Track",
                    track_name,
                    ErrorMessages.UNKNOWN_COLLECTION_TRACK.format(
                        collection=item.name, track=track_name
                    ),
                )
            resolved.append(track)
        collections.append(
            TrackCollection(name=item.name, owner=item.owner, kind=item.kind, tracks=tuple(resolved))
        )

    known_artists = {track.artist for track in tracks}
    merchandise = []
    for item in document.merchandise:
        if item.artist not in known_artists:
            raise EntityNotFoundError(
                "Artist",
                item.artist,
                ErrorMessages.UNKNOWN_MERCH_ARTIST.format(merch=item.name, artist=item.artist),
            )
        merchandise.append(item.to_domain())

    listeners: dict[str, Listener] = {}
    for user in document.users:
        if user.username in listeners:
            raise ValidationError(
                ErrorMessages.DUPLICATE_USER.format(username=user.username), field="users"
            )
        listeners[user.username] = user.to_domain()

    return Scenario(
        catalog=InMemoryCatalog(tracks, collections, merchandise),
        listeners=listeners,
        commands=sorted(document.commands, key=lambda command: command.timestamp),
    )
