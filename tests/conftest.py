import os
import tempfile

# Keep test logs out of the working directory; must run before wordle_board is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wordle_board_logs_"))

import pytest

from wordle_board.services.game_service import GameService
from wordle_board.services.message_service import MessageBoard

DICTIONARY = [
    "ABLE", "BALE", "TEEN", "NICE", "COOL", "FISH", "DUST", "TOUR", "WORD", "WORLD",
]


class PickWord:
    """Stands in for random.Random and always picks the given target."""

    def __init__(self, word):
        self.word = word.lower()

    def choice(self, candidates):
        assert self.word in candidates
        return self.word


class _Handle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Collects deferred callbacks so tests decide when they fire."""

    def __init__(self):
        self.handles = []

    def call_later(self, delay, callback):
        handle = _Handle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [handle for handle in self.handles if not handle.cancelled]

    def run_next(self):
        handle = self.pending[0]
        self.handles.remove(handle)
        handle.callback()
        return handle


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def messages(scheduler):
    return MessageBoard(2.0, 0.5, scheduler)


@pytest.fixture
def make_service(messages):
    def _make(target="able", dictionary=DICTIONARY, word_length=4, num_attempts=4):
        return GameService(dictionary, word_length, num_attempts, messages, PickWord(target))
    return _make


@pytest.fixture
def service(make_service):
    return make_service()


def type_word(service, word):
    for letter in word:
        service.type_letter(letter)


def play(service, word):
    type_word(service, word)
    return service.submit_attempt()


@pytest.fixture
def app(messages):
    from wordle_board import create_app
    from wordle_board.config import TestingConfig
    from wordle_board.services.game_service import initialize_game_service

    initialize_game_service(DICTIONARY, 4, 4, messages, PickWord("able"))
    flask_app, socketio = create_app(TestingConfig)
    yield flask_app

    from wordle_board.services import game_service as game_service_module
    game_service_module._game_service = None


@pytest.fixture
def client(app):
    return app.test_client()
