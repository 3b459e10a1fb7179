"""Werewolf game log replay: parser, log discovery, playback, and API."""
