from __future__ import annotations


class WordScrambleError(Exception):
    pass


class ResourceMissing(WordScrambleError):
    """A bundled resource (word list, dictionary) could not be read."""

    def __init__(self, path, reason: str = ''):
        self.path = str(path)
        detail = f": {reason}" if reason else ''
        super().__init__(f"Could not load resource {self.path}{detail}")


class EmptyWordList(WordScrambleError):
    def __init__(self):
        super().__init__("Cannot start a game from an empty word list")


class GameNotStarted(WordScrambleError):
    def __init__(self):
        super().__init__("start_game() must be called before submitting words")


class GameNotFound(WordScrambleError):
    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id!r} not found")


class WordRejected(WordScrambleError):
    """Raised inside the validation chain; submit() turns it into a result."""

    def __init__(self, reason, title: str, message: str):
        self.reason = reason
        self.title = title
        self.message = message
        super().__init__(f"{title}: {message}")
