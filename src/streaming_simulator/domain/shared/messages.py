"""Centralized message constants for error messages, log templates, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Playback invariants
    NEGATIVE_ELAPSED_TIME = "Elapsed time cannot be negative"
    EMPTY_SOURCE = "A playback source needs at least one track"
    ZERO_DURATION_TRACK = "Track '{name}' has zero duration and cannot be queued"

    # Monetization
    NEGATIVE_AD_PRICE = "Ad price cannot be negative"

    # Scenario loading
    UNKNOWN_COLLECTION_TRACK = "Collection '{collection}' references unknown track '{track}'"
    UNKNOWN_MERCH_ARTIST = "Merchandise '{merch}' references unknown artist '{artist}'"
    DUPLICATE_USER = "User '{username}' is declared more than once"
    AD_KIND_IN_CATALOG = "Catalog tracks must be songs or episodes; ads are inserted with adBreak"

    # Settings
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class PlayerMessages:
    """User-facing result messages returned by player commands."""

    USER_NOT_FOUND = "The username {username} doesn't exist."

    SOURCE_NOT_FOUND = "The source {name} doesn't exist."
    EMPTY_COLLECTION = "You can't load an empty audio collection!"
    LOADED = "Playback loaded successfully."

    PAUSE_NO_SOURCE = "Please load a source before attempting to pause or resume playback."
    PAUSED = "Playback paused successfully."
    RESUMED = "Playback resumed successfully."

    REPEAT_NO_SOURCE = "Please load a source before setting the repeat status."
    REPEAT_CHANGED = "Repeat mode changed to {label}."

    SHUFFLE_NO_SOURCE = "Please load a source before using the shuffle function."
    SHUFFLE_WRONG_KIND = "The loaded source is not a playlist or an album."
    SHUFFLE_ON = "Shuffle function activated successfully."
    SHUFFLE_OFF = "Shuffle function deactivated successfully."

    FORWARD_NO_SOURCE = "Please load a source before attempting to forward."
    BACKWARD_NO_SOURCE = "Please select a source before rewinding."
    NOT_A_PODCAST = "The loaded source is not a podcast."
    FORWARDED = "Skipped forward successfully."
    REWOUND = "Rewound successfully."

    NEXT_NO_SOURCE = "Please load a source before skipping to the next track."
    NEXT_DONE = "Skipped to next track successfully. The current track is {name}."
    PREV_NO_SOURCE = "Please load a source before returning to the previous track."
    PREV_DONE = "Returned to previous track successfully. The current track is {name}."

    AD_NO_MUSIC = "{username} is not playing any music."
    AD_INSERTED = "Ad inserted successfully."

    ALREADY_PREMIUM = "{username} is already a premium user."
    PREMIUM_BOUGHT = "{username} bought the subscription successfully."
    NOT_PREMIUM = "{username} is not a premium user."
    PREMIUM_CANCELLED = "{username} cancelled the subscription successfully."

    ARTIST_NOT_FOUND = "The artist {artist} doesn't exist."
    MERCH_NOT_FOUND = "The merch {merch} doesn't exist."
    MERCH_BOUGHT = "{username} has added new merch successfully."

    NO_STATS = "No data to show for {role} {name}."

    TRACK_NOT_FOUND = "The track {name} doesn't exist."
    TRACK_NAME_MISSING = "Give the name of a track to count its listens."

    UNKNOWN_COMMAND = "Unknown command {command}."


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.debug(), etc. and pass values as
    parameters for proper log formatting.
    """

    # Playback
    SOURCE_LOADED = "Loaded %s '%s' for %s"
    SOURCE_RESUMED_FROM_BOOKMARK = "Resuming podcast '%s' at episode %s, %ss in"
    BOOKMARK_SAVED = "Bookmarked podcast '%s' at episode %s, %ss in"
    BOOKMARK_DROPPED = "Dropped bookmark for finished podcast '%s'"
    SOURCE_EXHAUSTED = "Source exhausted for %s"
    TRACK_ADVANCED = "%s advanced to '%s'"
    REPEAT_CHANGED = "Repeat mode for %s changed to %s"
    SHUFFLE_TOGGLED = "Shuffle for %s is now %s (seed=%s)"
    AD_BREAK_INSERTED = "Ad break (price %s) inserted for %s"
    AD_BREAK_CROSSED = "%s crossed an ad break"

    # Listening
    LISTEN_RECORDED = "Listen #%s: %s -> '%s'"

    # Monetization
    PREMIUM_DISTRIBUTED = "Distributed premium pool over %s plays for %s"
    FREE_DISTRIBUTED = "Distributed ad revenue %s over %s plays for %s"
    DISTRIBUTION_SKIPPED = "No pending %s plays for %s, nothing to distribute"
    MERCH_SOLD = "Sold merch '%s' of %s for %s"

    # Simulation
    SIMULATION_STARTED = "Simulation started with %s commands and %s users"
    SIMULATION_FINISHED = "Simulation finished at timestamp %s"
    TIME_ADVANCED = "Advancing all players by %ss to timestamp %s"
    COMMAND_DISPATCHED = "Dispatching %s for %s"
    COMMAND_UNKNOWN = "Unknown command '%s' at timestamp %s"

    # Scenario
    SCENARIO_LOADED = "Loaded scenario %s: %s tracks, %s collections, %s users"

    # Application
    APP_STARTING = "Streaming simulator starting ({environment})"
    APP_FATAL_ERROR = "Simulation failed: %s"
    REPORT_WRITTEN = "Wrote report to %s"
